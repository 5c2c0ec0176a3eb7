from __future__ import annotations

from .renderer import KNOWN_PLUGINS, MarkdownRenderer, build_markdown_it

__all__ = ["MarkdownRenderer", "build_markdown_it", "KNOWN_PLUGINS"]
