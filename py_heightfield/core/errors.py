"""
Exceptions raised by heightfield construction and rendering.
"""


class HeightFieldError(Exception):
    """Base class for heightfield errors."""


class InvalidConfigurationError(HeightFieldError, ValueError):
    """Raised when a heightfield is constructed with unusable parameters."""


class RenderError(HeightFieldError):
    """Raised when an output adapter fails to encode a heightfield."""
