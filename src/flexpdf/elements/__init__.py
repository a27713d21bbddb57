"""
Module: elements

Purpose:
    The declarative document tree: Div and Text elements, pages and the
    PDF document root, plus lowercase factories for fluent construction.

Key Functions:
    - pdf(), page(), div(), text(): Element factories
"""

from typing import Optional

from flexpdf.config import RenderConfig

from .base import Element
from .div import Div
from .document import PDF
from .page import Page
from .style import BoxStyle, TextStyle
from .text import Text


def pdf(config: Optional[RenderConfig] = None) -> PDF:
    return PDF(config)


def page() -> Page:
    return Page()


def div() -> Div:
    return Div()


def text(value: str) -> Text:
    return Text(value)


__all__ = [
    # Tree
    "Element",
    "Div",
    "Text",
    "Page",
    "PDF",
    # Builder state
    "BoxStyle",
    "TextStyle",
    # Factories
    "pdf",
    "page",
    "div",
    "text",
]
