"""
Module: layout.solver

Purpose:
    Single-line flexbox geometry solver. Each LayoutNode carries the style
    inputs of one element; calculate_layout() on the root resolves width,
    height and parent-relative offsets for the whole subtree in one pass.

    The algorithm follows CSS Flexible Box Layout §9 in reduced form:
    1. Flex base size from the explicit main size, or by measuring content
       under an at-most constraint
    2. Container main size (definite, or fitted to content)
    3. Grow/shrink distribution (shrink weighted by base size, items that
       hit zero are frozen and the rest redistributed)
    4. Cross sizes (explicit, stretched or measured)
    5. Justify/align offsets, mirrored for reverse directions
    6. Absolutely positioned children sized on their own and aligned

Key Classes:
    - LayoutNode: Solver node with Yoga-style setters and computed results
    - Size: (width, height) result of a measurement callback

Dependencies:
    - weakref (std): Non-owning parent links
    - flexpdf.layout.style: Enums and Dimension

Used By:
    - flexpdf.elements: Layout node construction
    - flexpdf.layout.positions: Absolute coordinates
"""

from __future__ import annotations

import logging
import math
import weakref
from typing import Callable, Iterator, List, NamedTuple, Optional, Tuple

from flexpdf.errors import InvalidGeometryError

from .style import (
    AUTO,
    Align,
    Dimension,
    DimensionInput,
    Direction,
    Display,
    FlexDirection,
    Justify,
    MeasureMode,
    Overflow,
    PositionType,
)

logger = logging.getLogger(__name__)


class Size(NamedTuple):
    width: float
    height: float


MeasureFunc = Callable[[float, MeasureMode, float, MeasureMode], Tuple[float, float]]


class LayoutNode:
    """
    Solver node for one element.

    Defaults match Yoga rather than CSS: column direction, stretch
    alignment, grow 0 and shrink 0.

    Example:
        >>> root = LayoutNode()
        >>> child = LayoutNode()
        >>> child.set_height(100)
        >>> root.insert_child(child)
        >>> root.calculate_layout(500, 700)
        >>> (child.computed_width, child.computed_height)
        (500.0, 100.0)
    """

    def __init__(self) -> None:
        self._width: Dimension = AUTO
        self._height: Dimension = AUTO
        self._display = Display.FLEX
        self._flex_direction = FlexDirection.COLUMN
        self._justify_content = Justify.FLEX_START
        self._align_items = Align.STRETCH
        self._position_type = PositionType.RELATIVE
        self._overflow = Overflow.VISIBLE
        self._flex_grow = 0.0
        self._flex_shrink = 0.0
        self._measure: Optional[MeasureFunc] = None

        self._children: List[LayoutNode] = []
        self._parent_ref: Optional[weakref.ReferenceType] = None

        self._left = 0.0
        self._top = 0.0
        self._computed_width = 0.0
        self._computed_height = 0.0

    def __repr__(self) -> str:
        return (
            f"LayoutNode(left={self._left}, top={self._top}, "
            f"width={self._computed_width}, height={self._computed_height}, "
            f"children={len(self._children)})"
        )

    # ─────────────────────────────────────────────────────────────────────
    # Style inputs
    # ─────────────────────────────────────────────────────────────────────

    def set_width(self, value: DimensionInput) -> None:
        self._width = Dimension.parse(value)

    def set_height(self, value: DimensionInput) -> None:
        self._height = Dimension.parse(value)

    def set_display(self, display: Display) -> None:
        self._display = display

    def set_flex_direction(self, direction: FlexDirection) -> None:
        self._flex_direction = direction

    def set_justify_content(self, justify: Justify) -> None:
        self._justify_content = justify

    def set_align_items(self, align: Align) -> None:
        self._align_items = align

    def set_position_type(self, position: PositionType) -> None:
        self._position_type = position

    def set_overflow(self, overflow: Overflow) -> None:
        self._overflow = overflow

    def set_flex_grow(self, factor: float) -> None:
        self._flex_grow = _checked_factor(factor, "flex grow")

    def set_flex_shrink(self, factor: float) -> None:
        self._flex_shrink = _checked_factor(factor, "flex shrink")

    def set_measure_func(self, func: Optional[MeasureFunc]) -> None:
        """
        Make this node content-sized.

        Raises:
            InvalidGeometryError: If the node already has children
        """
        if func is not None and self._children:
            raise InvalidGeometryError("a node with children cannot have a measure function")
        self._measure = func

    @property
    def width(self) -> Dimension:
        return self._width

    @property
    def height(self) -> Dimension:
        return self._height

    @property
    def display(self) -> Display:
        return self._display

    @property
    def flex_direction(self) -> FlexDirection:
        return self._flex_direction

    @property
    def justify_content(self) -> Justify:
        return self._justify_content

    @property
    def align_items(self) -> Align:
        return self._align_items

    @property
    def position_type(self) -> PositionType:
        return self._position_type

    @property
    def overflow(self) -> Overflow:
        return self._overflow

    @property
    def flex_grow(self) -> float:
        return self._flex_grow

    @property
    def flex_shrink(self) -> float:
        return self._flex_shrink

    @property
    def has_measure_func(self) -> bool:
        return self._measure is not None

    # ─────────────────────────────────────────────────────────────────────
    # Tree
    # ─────────────────────────────────────────────────────────────────────

    def insert_child(self, child: "LayoutNode", index: Optional[int] = None) -> None:
        """
        Attach child at index (default: append).

        Raises:
            InvalidGeometryError: If this node is measured, or the child
                already belongs to another node
        """
        if self._measure is not None:
            raise InvalidGeometryError("a node with a measure function cannot have children")
        if child is self:
            raise InvalidGeometryError("a node cannot be its own child")
        if child.parent is not None:
            raise InvalidGeometryError("node is already attached to a parent")

        if index is None:
            index = len(self._children)
        self._children.insert(index, child)
        child._parent_ref = weakref.ref(self)

    @property
    def parent(self) -> Optional["LayoutNode"]:
        """Parent node, or None for a root (lookup only, not owned)."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def child_count(self) -> int:
        return len(self._children)

    def get_child(self, index: int) -> "LayoutNode":
        return self._children[index]

    def __iter__(self) -> Iterator["LayoutNode"]:
        return iter(self._children)

    # ─────────────────────────────────────────────────────────────────────
    # Results
    # ─────────────────────────────────────────────────────────────────────

    @property
    def computed_left(self) -> float:
        """Left offset from the parent's left edge."""
        return self._left

    @property
    def computed_top(self) -> float:
        """Top offset from the parent's top edge."""
        return self._top

    @property
    def computed_width(self) -> float:
        return self._computed_width

    @property
    def computed_height(self) -> float:
        return self._computed_height

    def calculate_layout(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        direction: Direction = Direction.LTR,
    ) -> None:
        """
        Solve geometry for this node and its whole subtree.

        The node's own explicit size wins; otherwise it fills the given
        owner size. An owner size of None leaves that axis content-sized.

        Args:
            width: Owner width in points
            height: Owner height in points
            direction: Inline flow direction (RTL mirrors row directions)
        """
        width = float(width) if width is not None else None
        height = float(height) if height is not None else None

        w = self._width.resolve(width)
        if w is None:
            w = width
        h = self._height.resolve(height)
        if h is None:
            h = height

        logger.debug(f"Solving layout at {w}x{h} ({direction.value})")

        _layout(
            self,
            w if w is not None else math.inf,
            MeasureMode.EXACTLY if w is not None else MeasureMode.UNDEFINED,
            h if h is not None else math.inf,
            MeasureMode.EXACTLY if h is not None else MeasureMode.UNDEFINED,
            direction,
        )
        self._left = 0.0
        self._top = 0.0


def _checked_factor(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidGeometryError(f"{name} must be a number: {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidGeometryError(f"{name} must be finite and >= 0: {value!r}")
    return float(value)


def _fit(value: float, available: float, mode: MeasureMode) -> float:
    if mode is MeasureMode.EXACTLY:
        return available
    if mode is MeasureMode.AT_MOST:
        return min(value, available)
    return value


def _probe(available: Optional[float], mode: MeasureMode) -> Tuple[float, MeasureMode]:
    """Constraint for measuring content inside a parent's available size."""
    if available is None or mode is MeasureMode.UNDEFINED or not math.isfinite(available):
        return math.inf, MeasureMode.UNDEFINED
    return available, MeasureMode.AT_MOST


def _effective_direction(node: LayoutNode, direction: Direction) -> FlexDirection:
    flex_direction = node._flex_direction
    if direction is Direction.RTL:
        if flex_direction is FlexDirection.ROW:
            return FlexDirection.ROW_REVERSE
        if flex_direction is FlexDirection.ROW_REVERSE:
            return FlexDirection.ROW
    return flex_direction


def _zero(node: LayoutNode) -> None:
    node._left = node._top = 0.0
    node._computed_width = node._computed_height = 0.0
    for child in node._children:
        _zero(child)


def _measure_leaf(
    node: LayoutNode,
    avail_w: float,
    w_mode: MeasureMode,
    avail_h: float,
    h_mode: MeasureMode,
) -> None:
    width, height = node._measure(avail_w, w_mode, avail_h, h_mode)
    for value in (width, height):
        if not isinstance(value, (int, float)) or math.isnan(value) or value < 0:
            raise InvalidGeometryError(f"measure function returned an invalid size: {value!r}")
    node._computed_width = _fit(float(width), avail_w, w_mode)
    node._computed_height = _fit(float(height), avail_h, h_mode)


def _layout(
    node: LayoutNode,
    avail_w: float,
    w_mode: MeasureMode,
    avail_h: float,
    h_mode: MeasureMode,
    direction: Direction,
) -> None:
    """Size node under the given constraints and position its children."""
    if node._display is Display.NONE:
        _zero(node)
        return

    if node._measure is not None:
        _measure_leaf(node, avail_w, w_mode, avail_h, h_mode)
        return

    flex_direction = _effective_direction(node, direction)
    row = flex_direction.is_row
    main_avail, main_mode = (avail_w, w_mode) if row else (avail_h, h_mode)
    cross_avail, cross_mode = (avail_h, h_mode) if row else (avail_w, w_mode)
    main_definite = main_avail if main_mode is MeasureMode.EXACTLY else None
    cross_definite = cross_avail if cross_mode is MeasureMode.EXACTLY else None

    items: List[LayoutNode] = []
    absolutes: List[LayoutNode] = []
    for child in node._children:
        if child._display is Display.NONE:
            _zero(child)
        elif child._position_type is PositionType.ABSOLUTE:
            absolutes.append(child)
        else:
            items.append(child)

    def main_dim(item: LayoutNode) -> Dimension:
        return item._width if row else item._height

    def cross_dim(item: LayoutNode) -> Dimension:
        return item._height if row else item._width

    def lay_out(item: LayoutNode, main: float, m_mode: MeasureMode, cross: float, c_mode: MeasureMode) -> None:
        if row:
            _layout(item, main, m_mode, cross, c_mode, direction)
        else:
            _layout(item, cross, c_mode, main, m_mode, direction)

    def main_of(item: LayoutNode) -> float:
        return item._computed_width if row else item._computed_height

    def cross_of(item: LayoutNode) -> float:
        return item._computed_height if row else item._computed_width

    def cross_constraint(item: LayoutNode) -> Tuple[float, MeasureMode]:
        explicit = cross_dim(item).resolve(cross_definite)
        if explicit is not None:
            return explicit, MeasureMode.EXACTLY
        if node._align_items is Align.STRETCH and cross_definite is not None:
            return cross_definite, MeasureMode.EXACTLY
        return _probe(cross_avail, cross_mode)

    # 1. Flex base size of every in-flow item.
    bases: List[float] = []
    for item in items:
        basis = main_dim(item).resolve(main_definite)
        if basis is None:
            probe_main, probe_mode = _probe(main_avail, main_mode)
            cross, c_mode = cross_constraint(item)
            lay_out(item, probe_main, probe_mode, cross, c_mode)
            basis = main_of(item)
        bases.append(basis)

    # 2. Main size of this container.
    total_basis = sum(bases)
    if main_mode is MeasureMode.EXACTLY:
        main_size = main_avail
    elif main_mode is MeasureMode.AT_MOST:
        main_size = min(total_basis, main_avail)
    else:
        main_size = total_basis

    # 3. Resolve flexible lengths.
    sizes = _resolve_flexible_lengths(items, bases, main_size)

    # 4. Cross size of every item.
    crosses: List[float] = []
    stretched: List[bool] = []
    for item, size in zip(items, sizes):
        explicit = cross_dim(item).resolve(cross_definite)
        stretch = explicit is None and node._align_items is Align.STRETCH
        if explicit is not None:
            cross = explicit
        elif stretch and cross_definite is not None:
            cross = cross_definite
        else:
            probe_cross, probe_mode = _probe(cross_avail, cross_mode)
            lay_out(item, size, MeasureMode.EXACTLY, probe_cross, probe_mode)
            cross = cross_of(item)
        crosses.append(cross)
        stretched.append(stretch)

    if cross_definite is not None:
        cross_size = cross_definite
    else:
        cross_size = _fit(max(crosses, default=0.0), cross_avail, cross_mode)
        crosses = [cross_size if s else c for c, s in zip(crosses, stretched)]

    # 5. Final layout and positions.
    leading, between = _justify_offsets(
        node._justify_content, main_size - sum(sizes), len(items))
    cursor = leading
    for item, size, cross in zip(items, sizes, crosses):
        lay_out(item, size, MeasureMode.EXACTLY, cross, MeasureMode.EXACTLY)

        main_offset = cursor
        if flex_direction.is_reverse:
            main_offset = main_size - cursor - size
        cross_offset = _align_offset(node._align_items, cross_size - cross)
        cursor += size + between

        if row:
            item._left, item._top = main_offset, cross_offset
        else:
            item._left, item._top = cross_offset, main_offset

    if row:
        node._computed_width, node._computed_height = main_size, cross_size
    else:
        node._computed_width, node._computed_height = cross_size, main_size

    # 6. Absolutely positioned children.
    for child in absolutes:
        _layout_absolute(node, child, flex_direction, direction)


def _resolve_flexible_lengths(
    items: List[LayoutNode],
    bases: List[float],
    main_size: float,
) -> List[float]:
    sizes = list(bases)
    free = main_size - sum(bases)

    if free > 0:
        grow_total = sum(item._flex_grow for item in items)
        if grow_total > 0:
            for i, item in enumerate(items):
                sizes[i] += free * item._flex_grow / grow_total
        return sizes

    # Shrink, freezing items clamped at zero until the overflow is absorbed.
    active = [i for i, item in enumerate(items) if item._flex_shrink > 0 and bases[i] > 0]
    while active:
        overflow = sum(sizes) - main_size
        if overflow <= 1e-9:
            break
        scaled_total = sum(items[i]._flex_shrink * bases[i] for i in active)
        clamped = []
        for i in active:
            sizes[i] -= overflow * items[i]._flex_shrink * bases[i] / scaled_total
            if sizes[i] <= 0:
                sizes[i] = 0.0
                clamped.append(i)
        if not clamped:
            break
        active = [i for i in active if i not in clamped]
    return sizes


def _justify_offsets(justify: Justify, remaining: float, count: int) -> Tuple[float, float]:
    """(leading space, space between items) along the main axis."""
    if count == 0:
        return 0.0, 0.0
    if justify is Justify.FLEX_END:
        return remaining, 0.0
    if justify is Justify.CENTER:
        return remaining / 2, 0.0
    if remaining <= 0:
        return 0.0, 0.0
    if justify is Justify.SPACE_BETWEEN:
        return 0.0, (remaining / (count - 1) if count > 1 else 0.0)
    if justify is Justify.SPACE_AROUND:
        gap = remaining / count
        return gap / 2, gap
    if justify is Justify.SPACE_EVENLY:
        gap = remaining / (count + 1)
        return gap, gap
    return 0.0, 0.0


def _align_offset(align: Align, free: float) -> float:
    if align is Align.CENTER:
        return free / 2
    if align is Align.FLEX_END:
        return free
    return 0.0


def _layout_absolute(
    parent: LayoutNode,
    child: LayoutNode,
    flex_direction: FlexDirection,
    direction: Direction,
) -> None:
    parent_w = parent._computed_width
    parent_h = parent._computed_height

    w = child._width.resolve(parent_w)
    h = child._height.resolve(parent_h)
    _layout(
        child,
        w if w is not None else parent_w,
        MeasureMode.EXACTLY if w is not None else MeasureMode.AT_MOST,
        h if h is not None else parent_h,
        MeasureMode.EXACTLY if h is not None else MeasureMode.AT_MOST,
        direction,
    )

    row = flex_direction.is_row
    main_free = (parent_w - child._computed_width) if row else (parent_h - child._computed_height)
    cross_free = (parent_h - child._computed_height) if row else (parent_w - child._computed_width)

    main_offset, _ = _justify_offsets(parent._justify_content, main_free, 1)
    if flex_direction.is_reverse:
        main_offset = main_free - main_offset
    cross_offset = _align_offset(parent._align_items, cross_free)

    if row:
        child._left, child._top = main_offset, cross_offset
    else:
        child._left, child._top = cross_offset, main_offset
