"""
Module: errors

Purpose:
    Exception taxonomy for document assembly. Every failure here is fatal
    to the document (or page) being rendered; nothing is retried.

Key Classes:
    - FlexPdfError: Base class for all library errors
    - MissingFontError: Text element has no usable font
    - FontEmbeddingError: A font reference could not be resolved
    - InvalidGeometryError: Solver rejected a style input

Used By:
    - flexpdf.layout.solver: Geometry validation
    - flexpdf.fonts: Font resolution
    - flexpdf.elements: Layout node construction
"""

from __future__ import annotations


class FlexPdfError(Exception):
    """Base error for document rendering."""
    pass


class MissingFontError(FlexPdfError):
    """Text element has neither an explicit font nor a default font."""
    pass


class FontEmbeddingError(FlexPdfError):
    """Font reference could not be loaded or registered."""
    pass


class InvalidGeometryError(FlexPdfError):
    """Style input rejected by the geometry solver (e.g. negative size)."""
    pass
