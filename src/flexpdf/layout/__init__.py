"""
Module: layout

Purpose:
    Geometry for the element tree: a flexbox solver over LayoutNodes and
    helpers that turn parent-relative results into page coordinates.

Key Classes:
    - LayoutNode: Solver node
    - Dimension: Point/percent/auto length

Key Functions:
    - absolute_left(), absolute_top(), absolute_rect(), canvas_y()
"""

from .style import (
    Align,
    Dimension,
    Direction,
    Display,
    FlexDirection,
    Justify,
    MeasureMode,
    Overflow,
    PositionType,
    Unit,
)
from .solver import LayoutNode, Size
from .positions import Rect, absolute_left, absolute_rect, absolute_top, canvas_y

__all__ = [
    # Style
    "Align",
    "Dimension",
    "Direction",
    "Display",
    "FlexDirection",
    "Justify",
    "MeasureMode",
    "Overflow",
    "PositionType",
    "Unit",
    # Solver
    "LayoutNode",
    "Size",
    # Positions
    "Rect",
    "absolute_left",
    "absolute_top",
    "absolute_rect",
    "canvas_y",
]
