"""
Text and HTML table rendering.

Raw values are clamped to [0, 1] and mapped into the field's height range.
Rows are detected purely from the iteration order: a new row starts whenever
``x`` wraps back to 0. NaN cells render as ``NaN``.
"""

import math
from typing import List, Tuple

import numpy as np


def rescale_height(value: float, height_range: Tuple[float, float]) -> float:
    """Clamp a raw value to [0, 1] and map it into ``height_range``."""
    low, high = np.float32(height_range[0]), np.float32(height_range[1])
    clamped = np.float32(min(max(value, 0.0), 1.0))
    return float(clamped * (high - low) + low)


def column_width(max_height: float) -> int:
    """Cell width wide enough for ``max_height`` with one decimal digit."""
    if max_height > 1 and math.isfinite(max_height):
        return int(math.log10(max_height)) + 3
    return 3


def _rows(field, fmt: str) -> List[List[str]]:
    rows = []
    for (x, _), value in field.iter():
        if x == 0:
            rows.append([])
        cell = format(rescale_height(value, field.height_range), fmt)
        rows[-1].append(cell.replace("nan", "NaN"))
    return rows


def render_text_table(field) -> str:
    """
    Render a heightfield as right-aligned text.

    Cells are separated by a single space and rows by CRLF. There is no
    trailing whitespace. An ungenerated field renders as an empty string.
    """
    fmt = f">{column_width(field.height_range[1])}.1f"
    return "\r\n".join(" ".join(row) for row in _rows(field, fmt))


def render_html_table(field) -> str:
    """Render a heightfield as an HTML table, one ``<td>`` per cell."""
    parts = ["<table>"]
    for row in _rows(field, ".1f"):
        parts.append("<tr>")
        parts.extend(f"<td>{cell}</td>" for cell in row)
        parts.append("</tr>")
    parts.append("</table>")
    return "".join(parts)
