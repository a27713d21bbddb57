"""
Module: elements.page

Purpose:
    One PDF page: its size and its top-level elements. Rendering builds a
    fresh root node holding every top-level element's node, solves the
    whole tree once at the page size, and paints the elements in order.

Key Classes:
    - Page: Page size and top-level content

Dependencies:
    - flexpdf.layout.solver: Root node and the single solve
    - flexpdf.output.canvas: Page sizing on the paint surface

Used By:
    - flexpdf.elements.document: Pages in document order
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from flexpdf.fonts import FontResolution
from flexpdf.layout.solver import LayoutNode
from flexpdf.layout.style import Direction
from flexpdf.output.canvas import PageCanvas

from .base import Element

logger = logging.getLogger(__name__)


class Page:
    """
    Page container.

    Width and height left unset fall back to the canvas page size (the
    document's configured default, A4 unless changed).

    The root node is built on the first render and kept, so rendering the
    same page again re-solves the same tree. An element can belong to one
    page only.
    """

    def __init__(self) -> None:
        self._width: Optional[float] = None
        self._height: Optional[float] = None
        self._children: List[Element] = []
        self._root: Optional[LayoutNode] = None

    @property
    def children(self) -> List[Element]:
        return list(self._children)

    def w(self, width: float) -> "Page":
        self._width = width
        return self

    def h(self, height: float) -> "Page":
        self._height = height
        return self

    def size(self, size: Tuple[float, float]) -> "Page":
        self._width, self._height = size
        return self

    def child(self, element: Element) -> "Page":
        if self._root is not None:
            logger.warning("Page is already rendered; ignoring new child")
            return self
        self._children.append(element)
        return self

    def render(self, canvas: PageCanvas, fonts: FontResolution) -> LayoutNode:
        """
        Solve and paint this page on the current canvas page.

        Args:
            canvas: Paint surface positioned on a fresh page
            fonts: Resolved document fonts

        Returns:
            The solved root node (its children are the top-level elements)

        Raises:
            MissingFontError: If a text element has no usable font
            InvalidGeometryError: If the solver rejects a style input, or an
                element already belongs to another solved page
        """
        width = self._width if self._width is not None else canvas.page_width
        height = self._height if self._height is not None else canvas.page_height
        canvas.set_page_size(width, height)

        if self._root is None:
            root = LayoutNode()
            for element in self._children:
                root.insert_child(element.layout_node(canvas, fonts))
            self._root = root
        root = self._root

        root.calculate_layout(width, height, Direction.LTR)

        for element in self._children:
            element.paint(canvas, fonts)

        logger.debug(f"Painted {len(self._children)} top-level elements at {width}x{height}")
        return root
