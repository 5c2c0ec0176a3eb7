"""
Second pass over an include-resolved tree (render mode only).

* `markdown` markers left by HTML-includes-Markdown are rendered to HTML;
* `dynamic-panel` placeholders get their final attributes and their sources
  are recorded so that a follow-up build can materialize them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config.model import DEFAULT_DYNAMIC_SUFFIX
from ..context import IncludeContext
from ..dom.html import HTML, parse_html, serialize
from ..dom.nodes import Element, Node
from ..include.resolver import DYNAMIC_PANEL_TAG, MARKDOWN_TAG
from ..markdown.renderer import MarkdownRenderer
from ..paths import set_extension

logger = logging.getLogger(__name__)


class ContentRenderer:
    """
    Args:
        renderer: Markdown renderer for `markdown` markers
        dynamic_suffix: Extension given to local dynamic panel sources
        dynamic_sources: Log that collects dynamic include sources (append-only)
    """

    def __init__(
        self,
        renderer: MarkdownRenderer,
        *,
        dynamic_suffix: str = DEFAULT_DYNAMIC_SUFFIX,
        dynamic_sources: Optional[List[str]] = None,
    ):
        self.renderer = renderer
        self.dynamic_suffix = dynamic_suffix
        self.dynamic_sources: List[str] = dynamic_sources if dynamic_sources is not None else []

    def parse_all(self, nodes: Iterable[Node], context: IncludeContext) -> Tuple[Node, ...]:
        return tuple(self.parse(node, context) for node in nodes)

    def parse(self, node: Node, context: IncludeContext) -> Node:
        if not isinstance(node, Element):
            return node

        name = node.name.lower()
        if name == MARKDOWN_TAG:
            node = self._render_markdown(node)
        elif name == DYNAMIC_PANEL_TAG:
            node = self._materialize_panel(node)

        if not node.children:
            return node
        return node.with_children(self.parse_all(node.children, context))

    def _render_markdown(self, element: Element) -> Element:
        # children were rendered by the resolver already: keep their text escaped
        source = serialize(element.children, formatter=HTML)
        rendered = self.renderer.render(source)
        return element.with_name("div").with_children(parse_html(rendered))

    def _materialize_panel(self, element: Element) -> Element:
        is_open = element.get_attr("isOpen")
        if is_open is None:
            is_open = "false"
        elif is_open == "":
            # bare flag: <include ... isOpen>
            is_open = "true"

        src = element.get_attr("src", "")
        self.dynamic_sources.append(src)
        logger.debug(f"Dynamic panel for '{src}'")

        element = (
            element.set_attr("isOpen", is_open)
            .set_attr("header", element.get_attr("name", "") or "")
            .set_attr("src", self._panel_src(src))
        )
        return element

    def _panel_src(self, src: str) -> str:
        """Local files point at the separately built fragment; anything else stays."""
        try:
            path = Path(src)
            if src and path.is_file():
                return set_extension(path.name, self.dynamic_suffix)
        except (OSError, ValueError):
            # remote or not a valid path on this platform
            pass
        return src


__all__ = ["ContentRenderer"]
