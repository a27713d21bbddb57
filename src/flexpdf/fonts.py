"""
Module: fonts

Purpose:
    Font references used across the element tree and their resolution into
    drawable, measurable fonts. A FontRef is an opaque handle compared by
    identity; a document resolves each distinct reference once, before any
    page paints, and shares the resulting mapping read-only.

Key Classes:
    - Fonts: The 14 standard PDF fonts
    - FontRef: Opaque font handle (identity, not content, equality)
    - FontMetrics: Protocol for width/height measurement
    - ResolvedFont: reportlab-backed metrics for a registered face

Key Functions:
    - font(): Create a FontRef
    - resolve_font(): Resolve one reference (async)
    - resolve_fonts(): Resolve many references concurrently (async)
    - registered_font(): Look up a font reportlab already knows

Dependencies:
    - reportlab: Font metrics and TrueType registration
    - asyncio (std): Concurrent resolution

Used By:
    - flexpdf.elements.text: Measurement and drawing
    - flexpdf.elements.document: Resolution before page rendering
"""

from __future__ import annotations

import asyncio
import hashlib
import io
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Mapping, Protocol, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from flexpdf.errors import FontEmbeddingError, MissingFontError

logger = logging.getLogger(__name__)


class Fonts(str, Enum):
    """Standard PDF fonts, always available without embedding."""

    COURIER = "Courier"
    COURIER_BOLD = "Courier-Bold"
    COURIER_OBLIQUE = "Courier-Oblique"
    COURIER_BOLD_OBLIQUE = "Courier-BoldOblique"
    HELVETICA = "Helvetica"
    HELVETICA_BOLD = "Helvetica-Bold"
    HELVETICA_OBLIQUE = "Helvetica-Oblique"
    HELVETICA_BOLD_OBLIQUE = "Helvetica-BoldOblique"
    TIMES_ROMAN = "Times-Roman"
    TIMES_BOLD = "Times-Bold"
    TIMES_ITALIC = "Times-Italic"
    TIMES_BOLD_ITALIC = "Times-BoldItalic"
    SYMBOL = "Symbol"
    ZAPF_DINGBATS = "ZapfDingbats"


FontSource = Union[Fonts, str, Path, bytes, bytearray]


@dataclass(frozen=True, eq=False)
class FontRef:
    """
    Opaque font handle shared by many Text elements.

    Two references built from the same source are still distinct keys;
    the document resolves each one it owns.

    Attributes:
        source: Standard font, standard font name, TrueType path or bytes
    """

    source: FontSource

    def __repr__(self) -> str:
        if isinstance(self.source, (bytes, bytearray)):
            return f"FontRef(<{len(self.source)} bytes>)"
        if isinstance(self.source, Fonts):
            return f"FontRef({self.source.value!r})"
        return f"FontRef({str(self.source)!r})"


def font(source: FontSource) -> FontRef:
    """Create a font reference to use across a document tree."""
    return FontRef(source)


class FontMetrics(Protocol):
    """What layout and painting need from a font."""

    @property
    def name(self) -> str: ...

    def width_of_text_at_size(self, text: str, size: float) -> float: ...

    def height_at_size(self, size: float) -> float: ...


@dataclass(frozen=True)
class ResolvedFont:
    """
    Font registered with reportlab under name.

    Example:
        >>> helvetica = ResolvedFont("Helvetica")
        >>> round(helvetica.height_at_size(10), 2)
        9.25
    """

    name: str

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.name, size)

    def height_at_size(self, size: float) -> float:
        """Ascent to descent distance at size, in points."""
        ascent, descent = pdfmetrics.getAscentDescent(self.name, size)
        return ascent - descent


_STANDARD_NAMES = frozenset(f.value for f in Fonts)

# reportlab's font registry is a plain module-level dict.
_REGISTRY_LOCK = threading.Lock()


def _load(source: FontSource) -> ResolvedFont:
    """Blocking part of resolution: read, parse and register a face."""
    if isinstance(source, Fonts):
        return ResolvedFont(source.value)

    if isinstance(source, str) and source in _STANDARD_NAMES:
        return ResolvedFont(source)

    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        path = Path(source)
        if not path.is_file():
            raise FontEmbeddingError(f"Font is neither a standard font nor a file: {source}")
        data = path.read_bytes()

    # Content-derived face name: identical bytes map to the same face.
    face_name = "F" + hashlib.sha1(data).hexdigest()[:16]
    if face_name in pdfmetrics.getRegisteredFontNames():
        return ResolvedFont(face_name)

    face = TTFont(face_name, io.BytesIO(data))
    with _REGISTRY_LOCK:
        if face_name not in pdfmetrics.getRegisteredFontNames():
            pdfmetrics.registerFont(face)
            logger.debug(f"Registered TrueType face {face_name} ({len(data)} bytes)")
    return ResolvedFont(face_name)


async def resolve_font(ref: FontRef) -> ResolvedFont:
    """
    Resolve a reference into a drawable font.

    Parsing runs in a worker thread so several fonts load concurrently.

    Raises:
        FontEmbeddingError: If the source cannot be loaded
    """
    try:
        return await asyncio.to_thread(_load, ref.source)
    except FontEmbeddingError:
        raise
    except Exception as e:
        raise FontEmbeddingError(f"Failed to embed {ref!r}: {e}") from e


async def resolve_fonts(refs: Iterable[FontRef]) -> Dict[FontRef, ResolvedFont]:
    """
    Resolve every distinct reference concurrently.

    Completes only when all references resolved; the first failure aborts
    with FontEmbeddingError.

    Returns:
        Mapping of reference to resolved font
    """
    unique = list(dict.fromkeys(refs))
    if not unique:
        return {}

    resolved = await asyncio.gather(*(resolve_font(ref) for ref in unique))
    logger.info(f"Resolved {len(resolved)} fonts")
    return dict(zip(unique, resolved))


FontResolution = Mapping[FontRef, FontMetrics]


def registered_font(name: str) -> ResolvedFont:
    """
    Look up a font already known to reportlab (standard or registered).

    Raises:
        MissingFontError: If no font is registered under name
    """
    try:
        pdfmetrics.getFont(name)
    except KeyError:
        raise MissingFontError(f"No font registered under {name!r}") from None
    return ResolvedFont(name)
