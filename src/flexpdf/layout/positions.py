"""
Module: layout.positions

Purpose:
    Convert solver results into page coordinates. The solver reports each
    node's offset relative to its parent only; painting on a flat canvas
    needs the offsets accumulated up to the page root, and the canvas Y
    axis grows upward from the page bottom.

Key Functions:
    - absolute_left(), absolute_top(): Accumulate offsets to the root
    - absolute_rect(): Absolute box of a node in layout space
    - canvas_y(): Top-down layout Y to bottom-up canvas Y

Used By:
    - flexpdf.elements.div: Rectangle painting
    - flexpdf.elements.text: Text block placement
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Protocol


class PositionedNode(Protocol):
    @property
    def computed_left(self) -> float: ...

    @property
    def computed_top(self) -> float: ...

    @property
    def parent(self) -> Optional["PositionedNode"]: ...


class Rect(NamedTuple):
    """Box in layout space (origin top-left, Y grows downward)."""

    left: float
    top: float
    width: float
    height: float


def absolute_left(node: PositionedNode) -> float:
    """
    Left edge of node relative to the page root.

    The root itself is the origin and never contributes its own offset.
    Only valid after the whole-subtree solve.
    """
    left = 0.0
    current = node
    while current.parent is not None:
        left += current.computed_left
        current = current.parent
    return left


def absolute_top(node: PositionedNode) -> float:
    """Top edge of node relative to the page root."""
    top = 0.0
    current = node
    while current.parent is not None:
        top += current.computed_top
        current = current.parent
    return top


def absolute_rect(node) -> Rect:
    return Rect(
        left=absolute_left(node),
        top=absolute_top(node),
        width=node.computed_width,
        height=node.computed_height,
    )


def canvas_y(page_height: float, layout_top: float, height: float = 0.0) -> float:
    """
    Convert top-down layout Y to bottom-up canvas Y.

    With height the result is the bottom edge of a box (where a filled
    rectangle is anchored); without it, the canvas Y of layout_top itself.

    Example:
        >>> canvas_y(700, layout_top=0, height=700)
        0
    """
    return page_height - layout_top - height
