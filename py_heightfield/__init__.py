"""
py_heightfield: fractal noise heightmap generation.
"""

from .core import (
    HeightField,
    HeightFieldError,
    InvalidConfigurationError,
    NoiseEvaluator,
    OpenSimplexNoise,
    RenderError,
    accumulate_layer,
)
from .utils.random import RandomSource

__version__ = "0.1.0"

__all__ = ['HeightField', 'HeightFieldError', 'InvalidConfigurationError',
           'NoiseEvaluator', 'OpenSimplexNoise', 'RenderError',
           'accumulate_layer', 'RandomSource']
