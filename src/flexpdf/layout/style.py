"""
Module: layout.style

Purpose:
    Style vocabulary understood by the geometry solver: flexbox enums,
    measure modes and the Dimension value type (points, percent or auto).

Key Classes:
    - Dimension: Point, percent or auto length
    - FlexDirection, Justify, Align, PositionType, Overflow, Display
    - MeasureMode: Constraint mode passed to measurement callbacks
    - Direction: Inline flow direction for a layout pass

Dependencies:
    - enum (std)
    - dataclasses (std)

Used By:
    - flexpdf.layout.solver: Node properties
    - flexpdf.elements: Builder state
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from flexpdf.errors import InvalidGeometryError


class FlexDirection(Enum):
    ROW = "row"
    ROW_REVERSE = "row-reverse"
    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"

    @property
    def is_row(self) -> bool:
        return self in (FlexDirection.ROW, FlexDirection.ROW_REVERSE)

    @property
    def is_reverse(self) -> bool:
        return self in (FlexDirection.ROW_REVERSE, FlexDirection.COLUMN_REVERSE)


class Justify(Enum):
    FLEX_START = "flex-start"
    CENTER = "center"
    FLEX_END = "flex-end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class Align(Enum):
    FLEX_START = "flex-start"
    CENTER = "center"
    FLEX_END = "flex-end"
    STRETCH = "stretch"


class PositionType(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class Overflow(Enum):
    VISIBLE = "visible"
    HIDDEN = "hidden"


class Display(Enum):
    FLEX = "flex"
    NONE = "none"


class Direction(Enum):
    LTR = "ltr"
    RTL = "rtl"


class MeasureMode(Enum):
    """How a measurement callback must treat the available size."""

    UNDEFINED = "undefined"  # no constraint, available size is math.inf
    EXACTLY = "exactly"      # the result must equal the available size
    AT_MOST = "at-most"      # the result may not exceed the available size


class Unit(Enum):
    POINT = "pt"
    PERCENT = "%"
    AUTO = "auto"


DimensionInput = Union[None, int, float, str, "Dimension"]

_PERCENT_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*%\s*$")
_POINT_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:pt)?\s*$")


@dataclass(frozen=True)
class Dimension:
    """
    A length on one axis.

    Attributes:
        value: Magnitude (points or percent, ignored for auto)
        unit: Unit of the value

    Example:
        >>> Dimension.parse("50%").resolve(300)
        150.0
        >>> Dimension.parse("auto").resolve(300) is None
        True
    """

    value: float
    unit: Unit

    @classmethod
    def parse(cls, raw: DimensionInput) -> "Dimension":
        """
        Build a Dimension from a number, "N%", "auto" or None.

        Raises:
            InvalidGeometryError: If the input is negative, not finite or
                cannot be parsed
        """
        if isinstance(raw, Dimension):
            return raw
        if raw is None:
            return AUTO
        if isinstance(raw, bool):
            raise InvalidGeometryError(f"invalid dimension: {raw!r}")
        if isinstance(raw, (int, float)):
            return cls._checked(float(raw), Unit.POINT, raw)
        if isinstance(raw, str):
            if raw.strip().lower() == "auto":
                return AUTO
            match = _PERCENT_RE.match(raw)
            if match:
                return cls._checked(float(match.group(1)), Unit.PERCENT, raw)
            match = _POINT_RE.match(raw)
            if match:
                return cls._checked(float(match.group(1)), Unit.POINT, raw)
        raise InvalidGeometryError(f"invalid dimension: {raw!r}")

    @classmethod
    def _checked(cls, value: float, unit: Unit, raw: object) -> "Dimension":
        if not math.isfinite(value) or value < 0:
            raise InvalidGeometryError(f"dimension must be finite and >= 0: {raw!r}")
        return cls(value, unit)

    @property
    def is_auto(self) -> bool:
        return self.unit is Unit.AUTO

    def resolve(self, reference: Optional[float]) -> Optional[float]:
        """
        Resolve to points.

        Percentages need a definite reference size; None is returned when
        the reference is unknown or the dimension is auto.
        """
        if self.unit is Unit.POINT:
            return self.value
        if self.unit is Unit.PERCENT and reference is not None and math.isfinite(reference):
            return reference * self.value / 100.0
        return None


AUTO = Dimension(0.0, Unit.AUTO)
FULL = Dimension(100.0, Unit.PERCENT)
