"""
Module: output

Purpose:
    PDF output primitives: the page paint surface (reportlab) and
    post-processing of rendered bytes (pypdf).

Key Classes:
    - PageCanvas: Paint surface

Key Functions:
    - attach_scripts(): Add document JavaScript
    - javascript_names(): Read back script names
"""

from .canvas import PageCanvas
from .scripts import attach_scripts, javascript_names

__all__ = [
    "PageCanvas",
    "attach_scripts",
    "javascript_names",
]
