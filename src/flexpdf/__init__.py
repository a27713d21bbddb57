"""Top-level package for flexpdf.

Builds PDF documents from a tree of flexbox boxes and text runs.

Provides subpackages:
- flexpdf.elements – Div, Text, Page and PDF plus fluent factories
- flexpdf.layout – flexbox geometry solver and page coordinates
- flexpdf.text – line wrapping and text flow
- flexpdf.output – reportlab paint surface and pypdf post-processing
"""

from .colors import hex_to_rgb
from .config import RenderConfig
from .elements import PDF, Div, Page, Text, div, page, pdf, text
from .errors import FlexPdfError, FontEmbeddingError, InvalidGeometryError, MissingFontError
from .fonts import FontRef, Fonts, font


def _get_version() -> str:
    """Get version from importlib.metadata (installed), else a placeholder."""
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("flexpdf")
    except Exception:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    # Document tree
    "PDF",
    "Page",
    "Div",
    "Text",
    "pdf",
    "page",
    "div",
    "text",
    # Fonts and colors
    "Fonts",
    "FontRef",
    "font",
    "hex_to_rgb",
    # Configuration
    "RenderConfig",
    # Errors
    "FlexPdfError",
    "FontEmbeddingError",
    "InvalidGeometryError",
    "MissingFontError",
]
