#!/usr/bin/env python3
"""
Demo script showing heightfield generation and rendering.
"""

import base64
from pathlib import Path

import numpy as np
from py_heightfield import HeightField
from py_heightfield.utils.log_setup import configure_logging


def save_data_uri(data_uri, output_filename):
    """Decode a ``data:image/png;base64,...`` URI into a PNG file."""
    header, encoded = data_uri.split(",", 1)
    if "image/png" not in header:
        raise ValueError(f"Unexpected data URI header: {header}")

    image_data = base64.b64decode(encoded)
    Path(output_filename).write_bytes(image_data)
    print(f"  Image saved as: {output_filename} ({len(image_data):,} bytes)")


def main():
    """Demonstrate heightfield generation."""
    configure_logging("WARNING", "plain")

    print("Heightfield Generation Demo")
    print("=" * 40)

    # Small table for the terminal
    print("\nSmall field, 12x6, 0-100, 2 octaves:")
    print("-" * 30)
    field = HeightField(12, 6, 0.0, 100.0, 2)
    field.generate_seeded(42)
    print(field.to_table().replace("\r\n", "\n"))

    # Roughness comparison
    for octave_count in [0, 1, 3, 6]:
        print(f"\n{octave_count} refinement octaves:")
        print("-" * 30)

        field = HeightField(128, 96, 0.0, 1000.0, octave_count)
        field.generate_seeded(2024)
        heights = field.data

        # Raw sums are unnormalized; clamping happens at render time
        clipped = np.mean((heights < 0) | (heights > 1)) * 100
        print(f"  Raw range: {heights.min():.3f} to {heights.max():.3f}")
        print(f"  Mean raw value: {heights.mean():.3f}")
        print(f"  Clamped on render: {clipped:.1f}%")

        # Show value distribution
        bins = [-np.inf, 0.0, 0.2, 0.4, 0.6, 0.8, 1.0, np.inf]
        hist, _ = np.histogram(heights, bins=bins)
        labels = ["<0.0", "0.0-0.2", "0.2-0.4", "0.4-0.6", "0.6-0.8", "0.8-1.0", ">1.0"]
        print("  Value distribution:")
        for label, count in zip(labels, hist):
            bar = '#' * int(count / max(hist) * 20)
            print(f"    {label:>8}: {bar} ({count})")

        save_data_uri(field.to_data_uri(), f"heightfield_{octave_count}_octaves.png")


if __name__ == "__main__":
    main()
