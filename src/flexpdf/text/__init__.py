"""
Module: text

Purpose:
    Line wrapping and text flow (sizing and placement) for Text elements.
"""

from .wrap import break_text_into_lines
from .flow import (
    BASELINE_RATIO,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_HEIGHT,
    LinePlacement,
    TextAlign,
    WrappedLine,
    block_height,
    measure_text,
    place_lines,
    wrap_lines,
)

__all__ = [
    "break_text_into_lines",
    "BASELINE_RATIO",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_LINE_HEIGHT",
    "LinePlacement",
    "TextAlign",
    "WrappedLine",
    "block_height",
    "measure_text",
    "place_lines",
    "wrap_lines",
]
