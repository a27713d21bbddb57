"""
Module: output.scripts

Purpose:
    Attach document-level JavaScript to rendered PDF bytes. reportlab has
    no document script support, so the rendered file is cloned with pypdf
    and the scripts are written to the catalog's JavaScript name tree
    under their own names.

Key Functions:
    - attach_scripts(): Return new PDF bytes with scripts attached
    - javascript_names(): Names in the document JavaScript name tree

Dependencies:
    - pypdf: PDF rewriting
"""

from __future__ import annotations

import io
import logging
from typing import List, Mapping

from pypdf import PdfReader, PdfWriter
from pypdf.generic import ArrayObject, DictionaryObject, NameObject, TextStringObject

logger = logging.getLogger(__name__)


def attach_scripts(pdf_bytes: bytes, scripts: Mapping[str, str]) -> bytes:
    """
    Add each script to the document, sorted by name.

    Args:
        pdf_bytes: Rendered PDF
        scripts: Script name to JavaScript source

    Returns:
        PDF bytes (unchanged input when there are no scripts)
    """
    if not scripts:
        return pdf_bytes

    writer = PdfWriter(clone_from=PdfReader(io.BytesIO(pdf_bytes)))
    root = writer.root_object
    if "/Names" not in root:
        root[NameObject("/Names")] = DictionaryObject()
    tree = DictionaryObject({NameObject("/Names"): ArrayObject()})
    root["/Names"][NameObject("/JavaScript")] = tree

    # Name tree keys must be in lexical order.
    for name, code in sorted(scripts.items()):
        action = DictionaryObject({
            NameObject("/Type"): NameObject("/Action"),
            NameObject("/S"): NameObject("/JavaScript"),
            NameObject("/JS"): TextStringObject(code),
        })
        tree["/Names"].extend([TextStringObject(name), action])
        logger.debug(f"Attached script {name!r} ({len(code)} chars)")

    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def javascript_names(reader: PdfReader) -> List[str]:
    """Script names of a document, in name tree (lexical) order."""
    catalog = reader.trailer["/Root"]
    if "/Names" not in catalog or "/JavaScript" not in catalog["/Names"]:
        return []
    names = catalog["/Names"]["/JavaScript"]["/Names"]
    return [str(entry) for entry in names[::2]]
