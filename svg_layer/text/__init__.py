"""Approximate text measurement and line wrapping."""

from .metrics import GLYPH_WIDTHS, measure_text, strip_diacritics
from .wrap import SAFETY_MARGIN, max_lines_for_height, wrap_lines

__all__ = [
    "GLYPH_WIDTHS",
    "SAFETY_MARGIN",
    "max_lines_for_height",
    "measure_text",
    "strip_diacritics",
    "wrap_lines",
]
