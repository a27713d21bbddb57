"""
Module: elements.document

Purpose:
    PDF: the document root. Collects pages, fonts, metadata and scripts,
    then assembles the PDF bytes:
    1. Resolve every registered font concurrently
    2. Apply metadata
    3. Render pages in order on one reportlab canvas
    4. Serialise and attach document scripts

    Any failure aborts the whole document; no partial output is produced.

Key Classes:
    - PDF: Document root and assembler

Dependencies:
    - reportlab: PDF canvas
    - flexpdf.fonts: Concurrent font resolution
    - flexpdf.output.scripts: Document JavaScript (pypdf)

Used By:
    - flexpdf (public API): pdf() factory
"""

from __future__ import annotations

import io
import logging
import time
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Optional, Union

from reportlab.pdfgen import canvas

from flexpdf.config import RenderConfig
from flexpdf.fonts import FontRef, registered_font, resolve_fonts
from flexpdf.output.canvas import PageCanvas
from flexpdf.output.scripts import attach_scripts

from .page import Page

logger = logging.getLogger(__name__)


class PDF:
    """
    Document root.

    Example:
        >>> doc = PDF().author("Docs Team").child(Page().child(Div().w_full().h(100)))
        >>> data = asyncio.run(doc.render_to_bytes())
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()
        self._author: Optional[str] = None
        self._title: Optional[str] = None
        self._scripts: Dict[str, str] = {}
        self._pages: List[Page] = []
        self._fonts: Dict[FontRef, None] = {}

    @property
    def pages(self) -> List[Page]:
        return list(self._pages)

    @property
    def fonts(self) -> List[FontRef]:
        return list(self._fonts)

    @property
    def scripts(self) -> Dict[str, str]:
        return dict(self._scripts)

    def author(self, name: str) -> "PDF":
        self._author = name
        return self

    def title(self, title: str) -> "PDF":
        self._title = title
        return self

    def script(self, name: str, code: str) -> "PDF":
        """Add document-level JavaScript; a repeated name replaces the code."""
        self._scripts[name] = code
        return self

    def child(self, page: Page) -> "PDF":
        self._pages.append(page)
        return self

    def font(self, ref: FontRef) -> "PDF":
        """Register a font so Text elements can use it."""
        self._fonts[ref] = None
        return self

    async def render_to_bytes(self) -> bytes:
        """
        Assemble the document.

        Returns:
            Serialised PDF

        Raises:
            FontEmbeddingError: If any registered font fails to resolve
            MissingFontError: If a text element has no usable font
            InvalidGeometryError: If the solver rejects a style input
        """
        start_time = time.perf_counter()

        fonts = MappingProxyType(await resolve_fonts(self._fonts))

        buffer = io.BytesIO()
        pdf_canvas = canvas.Canvas(
            buffer,
            pagesize=self.config.page_size,
            pageCompression=int(self.config.page_compression),
        )
        if self._author is not None:
            pdf_canvas.setAuthor(self._author)
        if self._title is not None:
            pdf_canvas.setTitle(self._title)

        default_font = None
        if self.config.default_font is not None:
            default_font = registered_font(self.config.default_font)
        page_canvas = PageCanvas(pdf_canvas, self.config.page_size, default_font)

        for number, page in enumerate(self._pages, start=1):
            logger.info(f"Rendering page {number}/{len(self._pages)}")
            # Pages without an explicit size get the default, not the previous page's.
            page_canvas.set_page_size(self.config.page_width, self.config.page_height)
            page.render(page_canvas, fonts)
            page_canvas.show_page()

        pdf_canvas.save()
        data = attach_scripts(buffer.getvalue(), self._scripts)

        elapsed = time.perf_counter() - start_time
        logger.info(f"Assembled {len(self._pages)} pages ({len(data)} bytes) in {elapsed:.2f}s")
        return data

    async def save(self, path: Union[str, Path]) -> Path:
        """Render and write the document to path, creating parent directories."""
        path = Path(path)
        data = await self.render_to_bytes()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info(f"Wrote {path}")
        return path
