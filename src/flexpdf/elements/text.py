"""
Module: elements.text

Purpose:
    Text: a run of text sized by its content. The layout node carries a
    measurement callback that wraps the text under the solver's width
    constraint; painting re-wraps at the solved width and draws one line
    at a time, vertically centred in the solved box.

Key Classes:
    - Text: Text run element

Dependencies:
    - flexpdf.text.flow: Measurement and line placement
    - flexpdf.fonts: Font lookup

Used By:
    - flexpdf.elements.div: Children of containers
    - flexpdf.elements.page: Top-level page content
"""

from __future__ import annotations

import logging
import math

from flexpdf.errors import InvalidGeometryError, MissingFontError
from flexpdf.fonts import FontMetrics, FontRef, FontResolution
from flexpdf.layout.positions import absolute_rect
from flexpdf.layout.solver import LayoutNode, Size
from flexpdf.layout.style import FULL, DimensionInput, MeasureMode
from flexpdf.output.canvas import PageCanvas
from flexpdf.text.flow import TextAlign, measure_text, place_lines, wrap_lines

from .base import Element
from .style import TextStyle

logger = logging.getLogger(__name__)


class Text(Element):
    """
    Wrapped text run.

    Example:
        >>> title = Text("Hello world").size(24).text_center().w_full()
    """

    def __init__(self, value: str) -> None:
        super().__init__()
        self._value = value
        self._style = TextStyle()

    @property
    def value(self) -> str:
        """Text content, fixed at construction."""
        return self._value

    @property
    def style(self) -> TextStyle:
        return self._style

    def font(self, ref: FontRef) -> "Text":
        """Use a font registered on the document."""
        return self._restyle(font=ref)

    def size(self, points: float) -> "Text":
        return self._restyle(font_size=points)

    def leading(self, multiplier: float) -> "Text":
        """Line height as a multiple of the font size."""
        return self._restyle(line_height=multiplier)

    def leading_none(self) -> "Text":
        return self.leading(1)

    def text_left(self) -> "Text":
        return self._restyle(align=TextAlign.LEFT)

    def text_center(self) -> "Text":
        return self._restyle(align=TextAlign.CENTER)

    def text_right(self) -> "Text":
        return self._restyle(align=TextAlign.RIGHT)

    def w(self, width: DimensionInput) -> "Text":
        return self._restyle(width=width)

    def w_full(self) -> "Text":
        return self._restyle(width=FULL)

    def _build_node(self, canvas: PageCanvas, fonts: FontResolution) -> LayoutNode:
        style = self._style
        if not math.isfinite(style.font_size) or style.font_size <= 0:
            raise InvalidGeometryError(f"font size must be positive: {style.font_size!r}")
        if not math.isfinite(style.line_height) or style.line_height < 0:
            raise InvalidGeometryError(f"line height must be >= 0: {style.line_height!r}")

        font = self._current_font(canvas, fonts)
        node = LayoutNode()
        if style.width is not None:
            node.set_width(style.width)

        def measure(width: float, width_mode: MeasureMode, height: float, height_mode: MeasureMode) -> Size:
            return measure_text(
                self._value, font, style.font_size, style.line_height, width, width_mode
            )

        node.set_measure_func(measure)
        logger.debug(f"Built text node for {self._value[:20]!r} ({font.name} {style.font_size}pt)")
        return node

    def paint(self, canvas: PageCanvas, fonts: FontResolution) -> None:
        style = self._style
        font = self._current_font(canvas, fonts)
        box = absolute_rect(self.layout_node(canvas, fonts))

        lines = wrap_lines(self._value, box.width, font, style.font_size)
        placements = place_lines(
            lines,
            box,
            canvas.page_height,
            style.font_size,
            style.line_height,
            font.height_at_size(style.font_size),
            style.align,
        )
        for line in placements:
            canvas.draw_text_line(line.text, font, style.font_size, line.x, line.y)

    def _current_font(self, canvas: PageCanvas, fonts: FontResolution) -> FontMetrics:
        """
        Explicit font through the document mapping, else the default font.

        Raises:
            MissingFontError: If the explicit font was never registered on
                the document, or there is no font at all
        """
        ref = self._style.font
        if ref is not None:
            try:
                return fonts[ref]
            except KeyError:
                raise MissingFontError(f"{ref!r} is not registered on the document") from None

        if canvas.default_font is None:
            raise MissingFontError(f"No font for text {self._value[:20]!r} and no default font")
        return canvas.default_font
