"""
Anchor-addressed fragment extraction.

`file.html#section` selects the element whose `id` is `section`; its inner
markup becomes the included content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from .html import HTML, inner_markup, parse_html
from .nodes import Element, Node, iter_elements


class FragmentExtractor:

    def find(self, nodes: Iterable[Node], anchor: str) -> Optional[Element]:
        """First element (document order) whose id equals `anchor`."""
        for element in iter_elements(nodes):
            if element.get_attr("id") == anchor:
                return element
        return None

    def extract(
        self,
        content: str,
        anchor: str,
        *,
        formatter: Optional[str] = HTML,
        source: Optional[Path] = None,
    ) -> Optional[str]:
        """
        Inner markup of the element identified by `anchor`.

        Args:
            content: Raw file content
            anchor: Identifier without the leading '#'
            formatter: Serialization formatter for the extracted children
            source: File the content came from, for parse errors

        Returns:
            Extracted markup, or None if no element matches
        """
        element = self.find(parse_html(content, source=source), anchor)
        if element is None:
            return None
        return inner_markup(element, formatter=formatter)


__all__ = ["FragmentExtractor"]
