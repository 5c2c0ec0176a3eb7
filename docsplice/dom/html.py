"""
Conversion between markup text and docsplice nodes.

Parsing and serialization are delegated to BeautifulSoup with the stdlib
`html.parser` tree builder: it keeps unknown tags (include, markdown,
dynamic-panel) where they are and honours the self-closing `<include />` form.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4 import element as bs
from bs4.dammit import EntitySubstitution

from .nodes import CData, Comment, Declaration, Doctype, Element, Node, ProcessingInstruction, Text
from ..errors import ParseError

_BUILDER = "html.parser"

# Formatter names understood by bs4's decode()
RAW = None            # strings are written exactly as stored (Markdown source)
HTML = "minimal"      # &, < and > are escaped


def parse_html(text: str, *, source: Optional[Path] = None) -> Tuple[Node, ...]:
    """
    Parse markup into a tuple of top-level nodes.

    Args:
        text: Markup (or Markdown source containing markup)
        source: File the text came from, for error messages

    Raises:
        ParseError: If the parser rejects the markup
    """
    try:
        soup = BeautifulSoup(text, _BUILDER, multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        raise ParseError(source, e) from e
    return tuple(_from_soup(child) for child in soup.contents)


# bs4 string subclasses that carry their own delimiters (<!-- -->, <? >, ...)
_SPECIAL_STRINGS = (
    (bs.Comment, Comment),
    (bs.Doctype, Doctype),
    (bs.CData, CData),
    (bs.ProcessingInstruction, ProcessingInstruction),
    (bs.Declaration, Declaration),
)


def _from_soup(item) -> Node:
    if isinstance(item, Tag):
        attrs = {k: _attr_value(v) for k, v in item.attrs.items()}
        return Element(item.name, attrs, tuple(_from_soup(c) for c in item.contents))
    for bs_cls, node_cls in _SPECIAL_STRINGS:
        if isinstance(item, bs_cls):
            return node_cls(str(item))
    if isinstance(item, NavigableString):
        return Text(str(item))
    raise TypeError(f"Unexpected parse item: {type(item).__name__}")


def _attr_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def serialize(nodes: Iterable[Node], *, formatter: Optional[str] = HTML) -> str:
    """
    Serialize nodes back to markup.

    Args:
        nodes: Nodes to write out
        formatter: HTML to escape text, RAW to keep it verbatim
    """
    soup = BeautifulSoup("", _BUILDER)
    for node in nodes:
        soup.append(_to_soup(soup, node))
    return soup.decode(formatter=formatter)


def _to_soup(soup: BeautifulSoup, node: Node):
    if isinstance(node, Text):
        return NavigableString(node.content)
    for bs_cls, node_cls in _SPECIAL_STRINGS:
        if isinstance(node, node_cls):
            return bs_cls(node.content)
    tag = soup.new_tag(node.name, attrs=dict(node.attributes))
    for child in node.children:
        tag.append(_to_soup(soup, child))
    return tag


_RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


def escape_text(nodes: Iterable[Node]) -> Tuple[Node, ...]:
    """
    Re-escape text decoded by the parser so it survives RAW serialization.

    Content of script and style elements is left as is.
    """
    return tuple(_escape(node) for node in nodes)


def _escape(node: Node) -> Node:
    if isinstance(node, Text):
        return Text(EntitySubstitution.substitute_xml(node.content))
    if isinstance(node, Element) and node.name not in _RAW_TEXT_ELEMENTS:
        return node.with_children(escape_text(node.children))
    return node


def inner_markup(element: Element, *, formatter: Optional[str] = HTML) -> str:
    """Markup of the element's children, without the element itself."""
    return serialize(element.children, formatter=formatter)


__all__ = ["parse_html", "serialize", "inner_markup", "escape_text", "RAW", "HTML"]
