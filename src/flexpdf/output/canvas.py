"""
Module: output.canvas

Purpose:
    Paint surface for one page at a time. Wraps a reportlab Canvas and
    exposes the primitives the element tree paints with. Coordinates are
    canvas coordinates: origin at the page bottom-left, Y grows upward.

Key Classes:
    - PageCanvas: Rectangle fill, text line drawing, clipping, page size

Dependencies:
    - reportlab: PDF generation

Used By:
    - flexpdf.elements: Painting
    - flexpdf.elements.document: One canvas per document, reused per page
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from reportlab.lib.colors import Color
from reportlab.pdfgen import canvas

from flexpdf.config import DEFAULT_PAGE_SIZE
from flexpdf.fonts import FontMetrics

logger = logging.getLogger(__name__)


class PageCanvas:
    """
    Drawing primitives over a reportlab canvas.

    Attributes:
        default_font: Font used by text without an explicit font, or None

    Example:
        >>> c = canvas.Canvas(io.BytesIO())
        >>> page = PageCanvas(c, default_font=ResolvedFont("Helvetica"))
        >>> page.set_page_size(500, 700)
        >>> page.fill_rectangle(0, 0, 500, 700, hex_to_rgb(0xFF0000))
    """

    def __init__(
        self,
        pdf_canvas: canvas.Canvas,
        page_size: Tuple[float, float] = DEFAULT_PAGE_SIZE,
        default_font: Optional[FontMetrics] = None,
    ):
        self._canvas = pdf_canvas
        self.default_font = default_font
        self._width, self._height = page_size

    @property
    def page_width(self) -> float:
        return self._width

    @property
    def page_height(self) -> float:
        return self._height

    def set_page_size(self, width: float, height: float) -> None:
        """Size of the page currently being drawn, in points."""
        self._canvas.setPageSize((width, height))
        logger.debug(f"Page size set to {width}x{height}")
        self._width, self._height = width, height

    def fill_rectangle(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Optional[Color] = None,
    ) -> None:
        """
        Fill a rectangle anchored at its bottom-left corner.

        Nothing is drawn without a color.
        """
        if color is None:
            return

        self._canvas.saveState()
        self._canvas.setFillColor(color)
        self._canvas.rect(x, y, width, height, stroke=0, fill=1)
        self._canvas.restoreState()

    def draw_text_line(self, text: str, font: FontMetrics, size: float, x: float, y: float) -> None:
        """Draw one line of text with its baseline at (x, y)."""
        if not text:
            return

        self._canvas.saveState()
        self._canvas.setFont(font.name, size)
        self._canvas.setFillColorRGB(0, 0, 0)
        self._canvas.drawString(x, y, text)
        self._canvas.restoreState()

    @contextmanager
    def clip_rect(self, x: float, y: float, width: float, height: float) -> Iterator[None]:
        """Restrict drawing inside the block to a rectangle."""
        self._canvas.saveState()
        try:
            path = self._canvas.beginPath()
            path.rect(x, y, width, height)
            self._canvas.clipPath(path, stroke=0, fill=0)
            yield
        finally:
            self._canvas.restoreState()

    def show_page(self) -> None:
        """Finish the current page; drawing continues on a new one."""
        self._canvas.showPage()
