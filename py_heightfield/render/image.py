"""
Grayscale image rendering and PNG data URI encoding.
"""

import base64
import io

import numpy as np
import structlog
from PIL import Image

from ..core.errors import RenderError

logger = structlog.get_logger()

DATA_URI_PREFIX = "data:image/png;base64,"


def gray_levels(values: np.ndarray) -> np.ndarray:
    """Clamp raw values to [0, 1] and truncate them to 8-bit intensities. NaN maps to 0."""
    clamped = np.nan_to_num(np.clip(values.astype(np.float32), 0.0, 1.0), nan=0.0)
    return (clamped * np.float32(255.0)).astype(np.uint8)


def render_grayscale(field) -> Image.Image:
    """
    Render a heightfield as an RGB image with equal channels.

    The image always has the field's size; an ungenerated field is black.
    """
    width, height = field.size
    if not field.is_generated:
        return Image.fromarray(np.zeros((height, width, 3), dtype=np.uint8))

    levels = gray_levels(field.data).reshape(height, width)
    return Image.fromarray(np.stack([levels] * 3, axis=-1))


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes, raising ``RenderError`` on failure."""
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError, KeyError) as e:
        logger.error("PNG encoding failed", error=str(e))
        raise RenderError(f"Could not encode image: {e}") from e
    return buffer.getvalue()


def render_data_uri(field) -> str:
    """Render a heightfield as a ``data:image/png;base64,...`` URI."""
    data = encode_png(render_grayscale(field))
    return DATA_URI_PREFIX + base64.b64encode(data).decode("ascii")
