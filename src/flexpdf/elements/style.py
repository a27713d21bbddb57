"""
Module: elements.style

Purpose:
    Immutable builder state for elements. Fluent setters replace these
    values; the layout node is built from the value current at first
    layout. Sizes are kept as given and validated by the solver when the
    node is built.

Key Classes:
    - BoxStyle: Div sizing, flex and paint attributes
    - TextStyle: Text font, size, leading, alignment and width
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from reportlab.lib.colors import Color

from flexpdf.fonts import FontRef
from flexpdf.layout.style import (
    Align,
    DimensionInput,
    Display,
    FlexDirection,
    Justify,
    Overflow,
    PositionType,
)
from flexpdf.text.flow import DEFAULT_FONT_SIZE, DEFAULT_LINE_HEIGHT, TextAlign


@dataclass(frozen=True)
class BoxStyle:
    """
    Style of a Div.

    None means "not set": the solver default applies. Shrink always has a
    value and is always pushed; grow is only pushed when set.
    """

    width: DimensionInput = None
    height: DimensionInput = None
    display: Optional[Display] = None
    flex_direction: FlexDirection = FlexDirection.ROW
    grow: Optional[float] = None
    shrink: float = 1.0
    align_items: Optional[Align] = None
    justify_content: Optional[Justify] = None
    position_type: Optional[PositionType] = None
    overflow: Optional[Overflow] = None
    background: Optional[Color] = None


@dataclass(frozen=True)
class TextStyle:
    """Style of a Text run."""

    font: Optional[FontRef] = None
    font_size: float = DEFAULT_FONT_SIZE
    line_height: float = DEFAULT_LINE_HEIGHT
    align: Optional[TextAlign] = None
    width: DimensionInput = None
