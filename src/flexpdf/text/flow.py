"""
Module: text.flow

Purpose:
    Text flow for Text elements: wrap a string at a width, size the
    resulting block for the solver (intrinsic sizing), and place each
    line for painting.

    Vertical placement centres the text block in its box. The first
    baseline sits baseline_offset below the block top, where
    baseline_offset = 0.75 * font height approximates the ascent for most
    fonts rather than reading it from the font.

Key Classes:
    - TextAlign: Horizontal alignment of each line
    - WrappedLine: One wrapped line and its measured width
    - LinePlacement: Where a line is drawn on the canvas

Key Functions:
    - wrap_lines(): Wrap with a font at a size
    - block_height(): Height of a block of lines
    - measure_text(): Intrinsic size under a solver constraint
    - place_lines(): Canvas positions of wrapped lines

Dependencies:
    - flexpdf.text.wrap: Line breaking
    - flexpdf.layout: Measure modes and coordinate helpers

Used By:
    - flexpdf.elements.text: Measurement callback and painting
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from flexpdf.fonts import FontMetrics
from flexpdf.layout.positions import Rect, canvas_y
from flexpdf.layout.solver import Size
from flexpdf.layout.style import MeasureMode

from .wrap import break_text_into_lines

DEFAULT_FONT_SIZE = 16.0
DEFAULT_LINE_HEIGHT = 1.2  # multiple of the font size
BASELINE_RATIO = 0.75


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class WrappedLine:
    text: str
    width: float


@dataclass(frozen=True)
class LinePlacement:
    """
    A line positioned on the canvas.

    Attributes:
        text: Line content
        x: Left edge in canvas points
        y: Baseline in canvas points (from the page bottom)
        width: Measured line width
    """

    text: str
    x: float
    y: float
    width: float


def wrap_lines(text: str, max_width: float, font: FontMetrics, size: float) -> List[WrappedLine]:
    """Wrap text with font metrics at size. Not cached: widths vary per call."""
    def width_of(value: str) -> float:
        return font.width_of_text_at_size(value, size)

    return [
        WrappedLine(line, width_of(line))
        for line in break_text_into_lines(text, max_width, width_of)
    ]


def block_height(line_count: int, font_size: float, line_height: float, font_height: float) -> float:
    """Every line but the last takes a full line step; the last takes the font height."""
    return (line_count - 1) * font_size * line_height + font_height


def measure_text(
    text: str,
    font: FontMetrics,
    size: float,
    line_height: float,
    available_width: float,
    width_mode: MeasureMode,
) -> Size:
    """
    Intrinsic size of text under a solver width constraint.

    - EXACTLY: wrap at available_width and report it
    - UNDEFINED: no wrapping beyond explicit newlines, report the
      longest line
    - AT_MOST: wrap at available_width, report the longest line capped
      at available_width
    """
    wrap_width = math.inf if width_mode is MeasureMode.UNDEFINED else available_width
    lines = wrap_lines(text, wrap_width, font, size)
    height = block_height(len(lines), size, line_height, font.height_at_size(size))

    if width_mode is MeasureMode.EXACTLY:
        width = available_width
    else:
        width = min(max(line.width for line in lines), wrap_width)
    return Size(width, height)


def place_lines(
    lines: Sequence[WrappedLine],
    box: Rect,
    page_height: float,
    font_size: float,
    line_height: float,
    font_height: float,
    align: Optional[TextAlign] = None,
) -> List[LinePlacement]:
    """
    Position wrapped lines inside an absolute layout box.

    Args:
        lines: Output of wrap_lines() at the box width
        box: Absolute box in layout space (top-down)
        page_height: Page height, for the Y axis flip
        font_size: Font size in points
        line_height: Line height multiplier
        font_height: Font height at font_size
        align: Horizontal alignment (None behaves as LEFT)

    Returns:
        One placement per line, top line first
    """
    step = font_size * line_height
    baseline_offset = font_height * BASELINE_RATIO
    total_height = block_height(len(lines), font_size, line_height, font_height)

    center_y = canvas_y(page_height, box.top) - box.height / 2
    first_baseline = center_y + total_height / 2 - baseline_offset

    return [
        LinePlacement(
            text=line.text,
            x=_line_x(box, line.width, align),
            y=first_baseline - i * step,
            width=line.width,
        )
        for i, line in enumerate(lines)
    ]


def _line_x(box: Rect, line_width: float, align: Optional[TextAlign]) -> float:
    if align is TextAlign.CENTER:
        return box.left + (box.width - line_width) / 2
    if align is TextAlign.RIGHT:
        return box.left + box.width - line_width
    return box.left
