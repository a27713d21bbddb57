"""
Module: elements.div

Purpose:
    Div: a rectangular flex container. Fluent setters build a BoxStyle;
    the layout node is created from it on first layout and the solved box
    is painted as a filled rectangle, followed by the children.

Key Classes:
    - Div: Flex container element

Dependencies:
    - flexpdf.layout: Solver node, coordinate helpers
    - flexpdf.colors: Background color conversion

Used By:
    - flexpdf.elements.page: Top-level page content
"""

from __future__ import annotations

import logging
from typing import List

from flexpdf.colors import hex_to_rgb
from flexpdf.fonts import FontResolution
from flexpdf.layout.positions import absolute_rect, canvas_y
from flexpdf.layout.solver import LayoutNode
from flexpdf.layout.style import (
    FULL,
    Align,
    DimensionInput,
    Display,
    FlexDirection,
    Justify,
    Overflow,
    PositionType,
)
from flexpdf.output.canvas import PageCanvas

from .base import Element
from .style import BoxStyle

logger = logging.getLogger(__name__)


class Div(Element):
    """
    Flex container.

    Defaults differ from the solver's: flex direction is row and shrink
    is 1, both always applied.

    Example:
        >>> sidebar = Div().w(100).shrink0().bg(0x00FF00)
        >>> body = Div().grow().bg(0x0000FF)
        >>> row = Div().w_full().h(100).child(sidebar).child(body)
    """

    def __init__(self) -> None:
        super().__init__()
        self._style = BoxStyle()
        self._children: List[Element] = []

    @property
    def style(self) -> BoxStyle:
        return self._style

    @property
    def children(self) -> List[Element]:
        return list(self._children)

    def child(self, element: Element) -> "Div":
        """Append a child; it is laid out and painted after earlier ones."""
        if self._check_mutable("children"):
            self._children.append(element)
        return self

    # ─────────────────────────────────────────────────────────────────────
    # Size and flex
    # ─────────────────────────────────────────────────────────────────────

    def w(self, width: DimensionInput) -> "Div":
        return self._restyle(width=width)

    def h(self, height: DimensionInput) -> "Div":
        return self._restyle(height=height)

    def w_full(self) -> "Div":
        return self._restyle(width=FULL)

    def h_full(self) -> "Div":
        return self._restyle(height=FULL)

    def grow(self, factor: float = 1) -> "Div":
        return self._restyle(grow=factor)

    def shrink(self, factor: float) -> "Div":
        return self._restyle(shrink=factor)

    def shrink0(self) -> "Div":
        return self.shrink(0)

    def shrink1(self) -> "Div":
        return self.shrink(1)

    def flex(self) -> "Div":
        return self._restyle(display=Display.FLEX)

    def hidden(self) -> "Div":
        return self._restyle(display=Display.NONE)

    def relative(self) -> "Div":
        return self._restyle(position_type=PositionType.RELATIVE)

    def absolute(self) -> "Div":
        return self._restyle(position_type=PositionType.ABSOLUTE)

    def overflow_hidden(self) -> "Div":
        return self._restyle(overflow=Overflow.HIDDEN)

    # ─────────────────────────────────────────────────────────────────────
    # Alignment and direction
    # ─────────────────────────────────────────────────────────────────────

    def items_start(self) -> "Div":
        return self._restyle(align_items=Align.FLEX_START)

    def items_center(self) -> "Div":
        return self._restyle(align_items=Align.CENTER)

    def items_end(self) -> "Div":
        return self._restyle(align_items=Align.FLEX_END)

    def items_stretch(self) -> "Div":
        return self._restyle(align_items=Align.STRETCH)

    def justify_start(self) -> "Div":
        return self._restyle(justify_content=Justify.FLEX_START)

    def justify_center(self) -> "Div":
        return self._restyle(justify_content=Justify.CENTER)

    def justify_end(self) -> "Div":
        return self._restyle(justify_content=Justify.FLEX_END)

    def justify_between(self) -> "Div":
        return self._restyle(justify_content=Justify.SPACE_BETWEEN)

    def flex_row(self) -> "Div":
        return self._restyle(flex_direction=FlexDirection.ROW)

    def flex_row_reverse(self) -> "Div":
        return self._restyle(flex_direction=FlexDirection.ROW_REVERSE)

    def flex_col(self) -> "Div":
        return self._restyle(flex_direction=FlexDirection.COLUMN)

    def flex_col_reverse(self) -> "Div":
        return self._restyle(flex_direction=FlexDirection.COLUMN_REVERSE)

    def bg(self, color: int) -> "Div":
        """Background fill from a 0xRRGGBB integer."""
        return self._restyle(background=hex_to_rgb(color))

    # ─────────────────────────────────────────────────────────────────────
    # Layout and paint
    # ─────────────────────────────────────────────────────────────────────

    def _build_node(self, canvas: PageCanvas, fonts: FontResolution) -> LayoutNode:
        style = self._style
        node = LayoutNode()

        node.set_width(style.width)
        node.set_height(style.height)
        if style.display is not None:
            node.set_display(style.display)
        node.set_flex_direction(style.flex_direction)
        if style.position_type is not None:
            node.set_position_type(style.position_type)
        if style.align_items is not None:
            node.set_align_items(style.align_items)
        if style.justify_content is not None:
            node.set_justify_content(style.justify_content)
        if style.grow is not None:
            node.set_flex_grow(style.grow)
        node.set_flex_shrink(style.shrink)
        if style.overflow is not None:
            node.set_overflow(style.overflow)

        for element in self._children:
            node.insert_child(element.layout_node(canvas, fonts))

        logger.debug(f"Built div node with {len(self._children)} children")
        return node

    def paint(self, canvas: PageCanvas, fonts: FontResolution) -> None:
        if self._style.display is Display.NONE:
            return

        box = absolute_rect(self.layout_node(canvas, fonts))
        bottom = canvas_y(canvas.page_height, box.top, box.height)
        canvas.fill_rectangle(box.left, bottom, box.width, box.height, self._style.background)

        if self._style.overflow is Overflow.HIDDEN:
            with canvas.clip_rect(box.left, bottom, box.width, box.height):
                self._paint_children(canvas, fonts)
        else:
            self._paint_children(canvas, fonts)

    def _paint_children(self, canvas: PageCanvas, fonts: FontResolution) -> None:
        for element in self._children:
            element.paint(canvas, fonts)
