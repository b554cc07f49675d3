"""
Output adapters that consume a heightfield's ``((x, y), value)`` iteration.
"""

from .image import encode_png, gray_levels, render_data_uri, render_grayscale
from .table import column_width, render_html_table, render_text_table, rescale_height

__all__ = ['encode_png', 'gray_levels', 'render_data_uri', 'render_grayscale',
           'column_width', 'render_html_table', 'render_text_table', 'rescale_height']
