"""
First pass: include resolution.

Walks a parsed tree and replaces every `<include>` directive either with the
content of the target file (spliced as children of a span/div/markdown
element) or with a `dynamic-panel` placeholder that is materialized later.
Included files are processed recursively with their own context, so relative
paths inside them resolve against their own directory.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Tuple

from .directive import INCLUDE_TAG, IncludeDirective
from ..cache.file_cache import FileCache
from ..context import IncludeContext, Mode, SourceFormat
from ..dom.fragment import FragmentExtractor
from ..dom.html import HTML, RAW, escape_text, parse_html
from ..dom.nodes import Element, Node
from ..markdown.renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

MARKDOWN_TAG = "markdown"
DYNAMIC_PANEL_TAG = "dynamic-panel"


def wrap_content(content: str, inline: bool) -> str:
    """
    Pad block content with a blank line before and a newline after, so that
    Markdown paragraphs do not merge across the splice point.
    Inline content is returned unchanged.
    """
    if inline:
        return content
    return f"\n\n{content}\n"


class IncludeResolver:
    """
    Recursive include resolver (preprocessor).

    Args:
        file_cache: Source of included file contents
        renderer: Markdown renderer used in render mode
        extractor: Anchor fragment extractor
        on_warning: Sink for non-fatal problems (unmatched anchors)
    """

    def __init__(
        self,
        file_cache: FileCache,
        renderer: MarkdownRenderer,
        extractor: Optional[FragmentExtractor] = None,
        on_warning: Optional[Callable[[str], None]] = None,
    ):
        self.file_cache = file_cache
        self.renderer = renderer
        self.extractor = extractor or FragmentExtractor()
        self.on_warning = on_warning

    def resolve_all(self, nodes: Iterable[Node], context: IncludeContext) -> Tuple[Node, ...]:
        return tuple(self.resolve(node, context) for node in nodes)

    def resolve(self, node: Node, context: IncludeContext) -> Node:
        if not isinstance(node, Element):
            return node
        if node.name == INCLUDE_TAG:
            return self._resolve_include(node, context)
        if not node.children:
            return node
        return node.with_children(self.resolve_all(node.children, context))

    # ======= Internal methods =======

    def _resolve_include(self, element: Element, context: IncludeContext) -> Element:
        directive = IncludeDirective.from_element(element, context.current_file)
        target = directive.target
        element = element.with_name("span" if directive.inline else "div")

        if directive.dynamic:
            logger.debug(f"Deferring dynamic include '{target.src}' from {context.current_file}")
            return (
                element.with_name(DYNAMIC_PANEL_TAG)
                .without_attrs("dynamic")
                .set_attr("src", target.location)
            )

        if target.remote:
            # URLs are only recorded, never fetched
            return element

        path = target.path
        source_format = SourceFormat.of(path)
        child_context = context.enter(path, source_format)
        raw = self.file_cache.get(path, included_from=context.current_file)
        logger.debug(f"Including {path} into {context.current_file} ({context.mode.value} mode)")

        content = self._content_for(raw, directive, source_format, context)
        children = parse_html(content, source=path)
        if source_format is SourceFormat.HTML and context.mode is Mode.INCLUDE:
            # include output is written RAW: keep entities of HTML sources intact
            children = escape_text(children)
        element = element.without_attrs("src", "inline").with_children(children)

        if source_format is SourceFormat.MARKDOWN and context.source_format is SourceFormat.HTML:
            # HTML including Markdown: mark the subtree for rendering in the second pass
            element = element.with_name(MARKDOWN_TAG)

        return element.with_children(self.resolve_all(element.children, child_context))

    def _content_for(
        self,
        raw: str,
        directive: IncludeDirective,
        source_format: SourceFormat,
        context: IncludeContext,
    ) -> str:
        target = directive.target
        content = raw
        if target.anchor:
            formatter = RAW if source_format is SourceFormat.MARKDOWN else HTML
            extracted = self.extractor.extract(raw, target.anchor, formatter=formatter, source=target.path)
            if extracted is None:
                self._warn(
                    f"Anchor '#{target.anchor}' not found in {target.path} "
                    f"(included from {context.current_file})"
                )
                extracted = ""
            content = extracted

        if source_format is SourceFormat.HTML:
            return content
        if context.mode is Mode.RENDER:
            if directive.inline:
                return self.renderer.render_inline(content)
            return self.renderer.render(content)
        return wrap_content(content, directive.inline)

    def _warn(self, message: str) -> None:
        logger.warning(message)
        if self.on_warning is not None:
            self.on_warning(message)


__all__ = ["IncludeResolver", "wrap_content", "MARKDOWN_TAG", "DYNAMIC_PANEL_TAG"]
