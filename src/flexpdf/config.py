"""
Module: config

Purpose:
    Configuration for document rendering. Immutable configuration with
    validation on construction.

Key Classes:
    - RenderConfig: Page defaults, fallback font and output options

Dependencies:
    - dataclasses (std)
    - reportlab: Standard page sizes

Used By:
    - flexpdf.elements.document: Document assembly
    - flexpdf.elements.page: Default page size
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from reportlab.lib.pagesizes import A4

# A4 in points: (595.27..., 841.88...)
DEFAULT_PAGE_SIZE: Tuple[float, float] = A4
DEFAULT_FONT_NAME = "Helvetica"


@dataclass(frozen=True)
class RenderConfig:
    """
    Configuration for rendering a document (immutable).

    Attributes:
        page_size: Page size used by pages that never set one (points)
        default_font: Standard font used by text without an explicit font.
            None disables the fallback, so such text raises MissingFontError.
        page_compression: Whether reportlab compresses page streams

    Example:
        >>> config = RenderConfig(default_font=None)
        >>> config.page_width
        595.2755905511812
    """

    page_size: Tuple[float, float] = DEFAULT_PAGE_SIZE
    default_font: Optional[str] = DEFAULT_FONT_NAME
    page_compression: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if len(self.page_size) != 2:
            raise ValueError(f"page_size must be (width, height): {self.page_size!r}")
        if self.page_width <= 0:
            raise ValueError(f"page width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page height must be positive: {self.page_height}")
        if self.default_font is not None and not self.default_font:
            raise ValueError("default_font must be a font name or None")

    @property
    def page_width(self) -> float:
        """Default page width in points."""
        return self.page_size[0]

    @property
    def page_height(self) -> float:
        """Default page height in points."""
        return self.page_size[1]
