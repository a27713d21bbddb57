"""
Module: elements.base

Purpose:
    Two-phase contract shared by every element:
    1. layout_node(): build (once) and return the solver node
    2. paint(): draw using the solved geometry

    Builder state lives in an immutable style value that every fluent
    setter replaces. The first layout_node() call freezes the element:
    the node is built from the style at that moment, and later setters are
    ignored with a warning instead of silently diverging from the node.

Key Classes:
    - Element: Abstract base for Div and Text

Dependencies:
    - flexpdf.layout.solver: LayoutNode
    - flexpdf.output.canvas: PageCanvas

Used By:
    - flexpdf.elements.div, flexpdf.elements.text: Concrete elements
    - flexpdf.elements.page: Page composition
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Optional, TypeVar

from flexpdf.fonts import FontResolution
from flexpdf.layout.solver import LayoutNode
from flexpdf.output.canvas import PageCanvas

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Element")


class Element(ABC):
    """
    Node of the document tree.

    Subclasses keep their builder state in self._style (a frozen
    dataclass) and implement _build_node() and paint().
    """

    _style: Any

    def __init__(self) -> None:
        self._node: Optional[LayoutNode] = None

    @property
    def is_frozen(self) -> bool:
        """True once the layout node exists; configuration is then fixed."""
        return self._node is not None

    def layout_node(self, canvas: PageCanvas, fonts: FontResolution) -> LayoutNode:
        """
        Solver node for this element, built on first call.

        Every later call returns the identical node.
        """
        if self._node is None:
            self._node = self._build_node(canvas, fonts)
        return self._node

    @abstractmethod
    def _build_node(self, canvas: PageCanvas, fonts: FontResolution) -> LayoutNode:
        """Create the solver node from the current style."""

    @abstractmethod
    def paint(self, canvas: PageCanvas, fonts: FontResolution) -> None:
        """Draw this element, then its children in insertion order."""

    def _restyle(self: E, **changes: Any) -> E:
        if self._check_mutable(", ".join(changes)):
            self._style = replace(self._style, **changes)
        return self

    def _check_mutable(self, what: str) -> bool:
        if self._node is None:
            return True
        logger.warning(
            f"{type(self).__name__} layout is already built; ignoring change to {what}"
        )
        return False
