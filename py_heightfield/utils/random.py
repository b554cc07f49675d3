"""
Random number generation utilities.

Heightfield generation only consumes the random source to seed each noise
octave, so the interface is a single ``next_u64`` call. Seeded sources use
NumPy's PCG64 and are reproducible across processes; unseeded sources draw
from OS entropy.
"""

from typing import Optional

import numpy as np


class RandomSource:
    """Source of unsigned 64-bit integers used to seed noise octaves."""

    def __init__(self, seed: Optional[int] = None):
        """
        Create a random source.

        Args:
            seed: Optional 64-bit seed. ``None`` draws fresh OS entropy.
        """
        self.seed = seed
        self.call_count = 0
        self._bit_generator = np.random.PCG64(seed)

    @property
    def seeded(self) -> bool:
        return self.seed is not None

    def next_u64(self) -> int:
        """Return the next unsigned 64-bit integer as a Python int."""
        self.call_count += 1
        return int(self._bit_generator.random_raw())


# Process-wide source used when callers do not supply one
_rng = None


def set_random_seed(seed: Optional[int]) -> None:
    """
    Reset the process-wide random source.

    Args:
        seed: Seed for a reproducible stream, or ``None`` for OS entropy
    """
    global _rng
    _rng = RandomSource(seed)


def get_rng() -> RandomSource:
    """
    Get the process-wide random source, creating an unseeded one on first use.

    Returns:
        RandomSource instance
    """
    global _rng
    if _rng is None:
        _rng = RandomSource()
    return _rng
