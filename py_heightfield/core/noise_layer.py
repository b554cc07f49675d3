"""
Noise evaluators and single-octave accumulation.

An octave is one pass of a seeded, frequency-scaled noise function over every
cell of the grid. ``accumulate_layer`` adds that pass into an existing buffer
so several octaves can be summed into one heightfield.
"""

from typing import Tuple

import numpy as np
import structlog
from opensimplex import OpenSimplex

logger = structlog.get_logger()

# Seeds are unsigned 64-bit values
_SEED_MASK = 0xFFFFFFFFFFFFFFFF


class NoiseEvaluator:
    """
    Base class for 2D coherent noise functions.

    Subclasses implement ``_sample`` on already frequency-scaled coordinates.
    Evaluation must be pure for a given ``(seed, frequency)`` configuration.
    """

    def __init__(self, seed: int = 0, frequency: float = 0.01):
        self.seed = 0
        self.frequency = 0.0
        self.configure(seed, frequency)

    def configure(self, seed: int, frequency: float) -> None:
        """Set the seed and sampling frequency used by later evaluations."""
        self.seed = int(seed) & _SEED_MASK
        self.frequency = float(frequency)

    def _sample(self, x: float, y: float) -> float:
        raise NotImplementedError

    def evaluate(self, x: float, y: float) -> float:
        """Evaluate noise at grid coordinate ``(x, y)``."""
        return self._sample(x * self.frequency, y * self.frequency)

    def evaluate_grid(self, width: int, height: int) -> np.ndarray:
        """
        Evaluate noise at every integer coordinate of a grid.

        Returns:
            float array of shape ``(height, width)``, indexed ``[y, x]``
        """
        values = np.empty((height, width), dtype=np.float64)
        for y in range(height):
            for x in range(width):
                values[y, x] = self.evaluate(x, y)
        return values


class OpenSimplexNoise(NoiseEvaluator):
    """OpenSimplex noise, output roughly in [-1, 1]."""

    def configure(self, seed: int, frequency: float) -> None:
        super().configure(seed, frequency)
        self._generator = OpenSimplex(seed=self.seed)

    def _sample(self, x: float, y: float) -> float:
        return self._generator.noise2(x, y)

    def evaluate_grid(self, width: int, height: int) -> np.ndarray:
        xs = np.arange(width, dtype=np.float64) * self.frequency
        ys = np.arange(height, dtype=np.float64) * self.frequency
        # noise2array returns values indexed [y, x]
        return self._generator.noise2array(xs, ys)


def accumulate_layer(
    noise: NoiseEvaluator,
    size: Tuple[int, int],
    scale: float,
    offset: float,
    output: np.ndarray,
) -> None:
    """
    Add one octave of noise into ``output`` in place.

    For every cell ``output[x + y * width] += noise(x, y) * scale + offset``.
    Existing content of ``output`` is preserved and added to.

    Args:
        noise: Configured noise evaluator
        size: Grid size as ``(width, height)``
        scale: Multiplier applied to the noise value
        offset: Constant added to every cell
        output: Flat row-major float32 buffer of length ``width * height``
    """
    width, height = size
    if output.shape != (width * height,):
        raise ValueError(
            f"Buffer of shape {output.shape} does not match grid {width}x{height}"
        )

    layer = noise.evaluate_grid(width, height).astype(np.float32)
    output += layer.reshape(-1) * np.float32(scale) + np.float32(offset)

    logger.debug(
        "Accumulated noise layer",
        seed=noise.seed,
        frequency=noise.frequency,
        scale=scale,
        offset=offset,
    )
