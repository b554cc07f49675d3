"""
Core heightfield generation functionality.
"""

from .errors import HeightFieldError, InvalidConfigurationError, RenderError
from .noise_layer import NoiseEvaluator, OpenSimplexNoise, accumulate_layer
from .heightfield import HeightField, FREQUENCY_MULTIPLIER, SCALE_DIVISOR

__all__ = ['HeightFieldError', 'InvalidConfigurationError', 'RenderError',
           'NoiseEvaluator', 'OpenSimplexNoise', 'accumulate_layer',
           'HeightField', 'FREQUENCY_MULTIPLIER', 'SCALE_DIVISOR']
