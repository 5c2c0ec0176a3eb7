"""
Document tree: node types, HTML codec, fragment extraction and trimming.
"""

from __future__ import annotations

from .fragment import FragmentExtractor
from .html import HTML, RAW, escape_text, inner_markup, parse_html, serialize
from .nodes import (
    CData,
    Comment,
    Declaration,
    Doctype,
    Element,
    Node,
    ProcessingInstruction,
    Text,
    iter_elements,
)
from .trim import trim

__all__ = [
    "Text",
    "Comment",
    "Doctype",
    "ProcessingInstruction",
    "Declaration",
    "CData",
    "Element",
    "Node",
    "iter_elements",
    "parse_html",
    "serialize",
    "inner_markup",
    "escape_text",
    "RAW",
    "HTML",
    "FragmentExtractor",
    "trim",
]
