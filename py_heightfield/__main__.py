"""
Command-line heightmap generation.

Example:
    python -m py_heightfield --width 40 --height 20 --octaves 3 --seed 42 --png map.png
"""

import argparse
from pathlib import Path

import structlog

from .config import settings
from .core.heightfield import HeightField
from .render.image import encode_png
from .utils.log_setup import configure_logging, install_excepthook

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py_heightfield",
        description="Generate a fractal noise heightmap",
    )
    parser.add_argument("--width", type=int, default=settings.default_width)
    parser.add_argument("--height", type=int, default=settings.default_height)
    parser.add_argument("--min-height", type=float, default=settings.default_min_height)
    parser.add_argument("--max-height", type=float, default=settings.default_max_height)
    parser.add_argument("--octaves", type=int, default=settings.default_octave_count,
                        help="Refinement octaves on top of the base octave")
    parser.add_argument("--seed", type=int, default=None,
                        help="64-bit seed; omit for a random map")
    parser.add_argument("--png", type=Path, default=None,
                        help="Write the grayscale image to this path")
    parser.add_argument("--html", action="store_true",
                        help="Print an HTML table instead of plain text")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the table")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(args.log_level, "plain")
    install_excepthook()

    field = HeightField(args.width, args.height, args.min_height, args.max_height, args.octaves)
    field.generate_seeded(args.seed)

    if not args.quiet:
        print(field.to_html_table() if args.html else field.to_table())

    if args.png is not None:
        args.png.write_bytes(encode_png(field.to_image()))
        logger.info("Image written", path=str(args.png))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
