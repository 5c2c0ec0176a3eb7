"""
Markdown rendering through markdown-it-py.

Raw HTML is allowed so that include directives and other markup written in
Markdown files survive rendering untouched.
"""

from __future__ import annotations

import importlib
import logging
from typing import Callable, Dict, Optional, Tuple

from markdown_it import MarkdownIt

from ..config.model import MarkdownCfg
from ..errors import ConfigError

logger = logging.getLogger(__name__)

# plugin name -> (module, callable) in mdit-py-plugins
KNOWN_PLUGINS: Dict[str, Tuple[str, str]] = {
    "footnote": ("mdit_py_plugins.footnote", "footnote_plugin"),
    "deflist": ("mdit_py_plugins.deflist", "deflist_plugin"),
    "tasklists": ("mdit_py_plugins.tasklists", "tasklists_plugin"),
    "dollarmath": ("mdit_py_plugins.dollarmath", "dollarmath_plugin"),
    "front_matter": ("mdit_py_plugins.front_matter", "front_matter_plugin"),
    "attrs": ("mdit_py_plugins.attrs", "attrs_plugin"),
    "anchors": ("mdit_py_plugins.anchors", "anchors_plugin"),
}


def _load_plugin(name: str) -> Callable:
    spec = KNOWN_PLUGINS.get(name)
    if spec is None:
        raise ConfigError(
            f"Unknown markdown plugin '{name}'. "
            f"Available plugins: {', '.join(sorted(KNOWN_PLUGINS))}"
        )
    module_name, attr = spec
    return getattr(importlib.import_module(module_name), attr)


def build_markdown_it(cfg: MarkdownCfg) -> MarkdownIt:
    """Configured MarkdownIt instance: CommonMark plus GFM tables and strikethrough."""
    md = MarkdownIt(
        "commonmark",
        {"html": cfg.html, "linkify": cfg.linkify, "typographer": cfg.typographer},
    ).enable(["table", "strikethrough"])
    if cfg.linkify:
        md.enable("linkify")
    if cfg.typographer:
        md.enable(["replacements", "smartquotes"])

    for name in cfg.plugins:
        md.use(_load_plugin(name))
        logger.debug(f"Enabled markdown plugin '{name}'")

    if cfg.table_class:
        table_class = cfg.table_class

        def table_open(tokens, idx, options, env):
            return f'<table class="{table_class}">\n'

        md.renderer.rules["table_open"] = table_open

    return md


class MarkdownRenderer:
    """Thin wrapper exposing block and inline rendering."""

    def __init__(self, cfg: Optional[MarkdownCfg] = None):
        self.cfg = cfg or MarkdownCfg()
        self._md = build_markdown_it(self.cfg)

    def render(self, text: str) -> str:
        return self._md.render(text)

    def render_inline(self, text: str) -> str:
        """Render without block wrappers, e.g. no surrounding <p>."""
        return self._md.renderInline(text)


__all__ = ["MarkdownRenderer", "build_markdown_it", "KNOWN_PLUGINS"]
