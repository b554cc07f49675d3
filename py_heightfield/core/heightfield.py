"""
Fractal heightfield generation.

A heightfield is the sum of several octaves of coherent noise over a
rectangular grid. The base octave is centred around [0, 1]; every further
octave quadruples the frequency and contributes a sixth of the previous
octave's amplitude. The raw sums are kept unnormalized and clamped only when
rendered into the declared height range.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np
import structlog

from ..render.image import render_data_uri, render_grayscale
from ..render.table import render_html_table, render_text_table
from ..utils.random import RandomSource, get_rng
from .errors import InvalidConfigurationError
from .noise_layer import NoiseEvaluator, OpenSimplexNoise, accumulate_layer

logger = structlog.get_logger()

# Octave schedule. Changing either constant changes every generated map.
FREQUENCY_MULTIPLIER = 4.0
SCALE_DIVISOR = 6.0
BASE_SCALE = 0.5
BASE_OFFSET = 0.5


class HeightField:
    """
    Multi-octave noise heightfield.

    The field starts empty and is populated by ``generate``. Generation
    replaces the whole buffer at once; there is no partial regeneration and
    no resizing.
    """

    def __init__(
        self,
        width: int,
        height: int,
        min_height: float = 0.0,
        max_height: float = 1.0,
        octave_count: int = 0,
        noise: Optional[NoiseEvaluator] = None,
    ):
        """
        Initialize an empty heightfield.

        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive
            min_height: Height that a normalized value of 0 maps to
            max_height: Height that a normalized value of 1 maps to
            octave_count: Refinement octaves added on top of the base octave
            noise: Noise evaluator, OpenSimplex when omitted
        """
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"Heightfield dimensions must be positive, got {width}x{height}"
            )
        if octave_count < 0:
            raise InvalidConfigurationError(
                f"Octave count must be non-negative, got {octave_count}"
            )

        self.size = (int(width), int(height))
        self.height_range = (float(min_height), float(max_height))
        self.octave_count = int(octave_count)
        self.noise = noise if noise is not None else OpenSimplexNoise()
        self._data = np.zeros(0, dtype=np.float32)

    def __repr__(self) -> str:
        return (
            f"HeightField(size={self.size}, height_range={self.height_range}, "
            f"octave_count={self.octave_count}, generated={self.is_generated})"
        )

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    @property
    def is_generated(self) -> bool:
        return self._data.size > 0

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the raw row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def octave_scales(self) -> List[Tuple[float, float, float]]:
        """
        Octave schedule used by ``generate``.

        Returns:
            List of ``(frequency, scale, offset)``, base octave first
        """
        # float32 arithmetic keeps the schedule identical to the buffer precision
        avg = np.float32((self.width + self.height) / 2.0)
        freq = np.float32(1.0) / avg
        scale = np.float32(1.0)

        schedule = [
            (float(freq), float(BASE_SCALE * scale), float(BASE_OFFSET * scale))
        ]
        for _ in range(self.octave_count):
            freq *= np.float32(FREQUENCY_MULTIPLIER)
            scale /= np.float32(SCALE_DIVISOR)
            schedule.append((float(freq), float(scale), 0.0))
        return schedule

    def generate(self, rng: Optional[RandomSource] = None) -> None:
        """
        Generate the heightfield, replacing any previous content.

        One seed is drawn from ``rng`` per octave, base octave first.

        Args:
            rng: Random source, the process-wide source when omitted
        """
        if rng is None:
            rng = get_rng()

        logger.info(
            "Generating heightfield",
            width=self.width,
            height=self.height,
            octave_count=self.octave_count,
            seeded=rng.seeded,
        )

        data = np.zeros(self.width * self.height, dtype=np.float32)
        for octave, (freq, scale, offset) in enumerate(self.octave_scales()):
            self.noise.configure(rng.next_u64(), freq)
            logger.debug("Adding octave", octave=octave, frequency=freq, scale=scale)
            accumulate_layer(self.noise, self.size, scale, offset, data)

        # Published in one step so a failed pass leaves the old buffer intact
        self._data = data

        logger.info(
            "Heightfield generated",
            min_value=float(data.min()),
            max_value=float(data.max()),
        )

    def generate_seeded(self, seed: Optional[int] = None) -> None:
        """
        Generate from a fresh random source.

        Args:
            seed: 64-bit seed for reproducible output, ``None`` for OS entropy
        """
        self.generate(RandomSource(seed))

    def iter(self) -> Iterator[Tuple[Tuple[int, int], float]]:
        """
        Iterate ``((x, y), value)`` in row-major order.

        Each call starts a new pass over the current buffer. Yields nothing
        before the field has been generated.
        """
        width = self.width
        for i, value in enumerate(self._data.tolist()):
            yield (i % width, i // width), value

    def __iter__(self) -> Iterator[Tuple[Tuple[int, int], float]]:
        return self.iter()

    def to_table(self) -> str:
        """Render rescaled heights as aligned text, rows separated by CRLF."""
        return render_text_table(self)

    def to_normalized_text(self) -> str:
        return self.to_table()

    def to_html_table(self) -> str:
        """Render rescaled heights as an HTML ``<table>``."""
        return render_html_table(self)

    def to_image(self):
        """Render the field as an RGB grayscale ``PIL.Image.Image``."""
        return render_grayscale(self)

    def to_grayscale_pixels(self):
        return self.to_image()

    def to_data_uri(self) -> str:
        """Render the field as a ``data:image/png;base64,...`` URI."""
        return render_data_uri(self)
