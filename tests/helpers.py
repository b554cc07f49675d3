"""
Deterministic noise evaluators for tests.
"""

from py_heightfield.core.noise_layer import NoiseEvaluator


class LinearNoise(NoiseEvaluator):
    """Noise that is simply the sum of the scaled coordinates."""

    def _sample(self, x, y):
        return x + y


class FailingNoise(LinearNoise):
    """Linear noise whose configure call raises once ``fail`` is set."""

    fail = False

    def configure(self, seed, frequency):
        if self.fail:
            raise RuntimeError("noise backend failure")
        super().configure(seed, frequency)
