from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..errors import ConfigError

DEFAULT_PLUGINS = ["footnote", "deflist", "tasklists"]
DEFAULT_DYNAMIC_SUFFIX = "._include_.html"


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def _as_bool(value: Any, *, ctx: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{ctx}: expected a boolean, got {type(value).__name__}")
    return value


@dataclass
class MarkdownCfg:
    """
    Markdown renderer settings.
    """
    html: bool = True                 # raw HTML passes through (include directives live there)
    linkify: bool = True
    typographer: bool = False
    table_class: Optional[str] = "table"
    plugins: List[str] = field(default_factory=lambda: list(DEFAULT_PLUGINS))

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> MarkdownCfg:
        if not d:
            return MarkdownCfg()
        if not isinstance(d, dict):
            raise ConfigError("markdown: must be a mapping")
        _assert_only_keys(d, ["html", "linkify", "typographer", "table_class", "plugins"], ctx="markdown")

        plugins = d.get("plugins", DEFAULT_PLUGINS)
        if isinstance(plugins, str):
            plugins = [plugins]
        if not isinstance(plugins, list) or not all(isinstance(p, str) for p in plugins):
            raise ConfigError("markdown.plugins: expected a list of plugin names")

        table_class = d.get("table_class", "table")
        if table_class is not None and not isinstance(table_class, str):
            raise ConfigError("markdown.table_class: expected a string or null")

        return MarkdownCfg(
            html=_as_bool(d.get("html", True), ctx="markdown.html"),
            linkify=_as_bool(d.get("linkify", True), ctx="markdown.linkify"),
            typographer=_as_bool(d.get("typographer", False), ctx="markdown.typographer"),
            table_class=table_class or None,
            plugins=list(plugins),
        )


@dataclass
class ProcessorConfig:
    """
    Top-level configuration of a Processor.
    """
    encoding: str = "utf-8"
    # dynamic panels pointing at local files are renamed to <stem><suffix>
    dynamic_suffix: str = DEFAULT_DYNAMIC_SUFFIX
    markdown: MarkdownCfg = field(default_factory=MarkdownCfg)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> ProcessorConfig:
        if not d:
            return ProcessorConfig()
        _assert_only_keys(d, ["encoding", "dynamic_suffix", "markdown"], ctx="config")

        encoding = d.get("encoding", "utf-8")
        if not isinstance(encoding, str) or not encoding:
            raise ConfigError("encoding: expected a non-empty string")
        suffix = d.get("dynamic_suffix", DEFAULT_DYNAMIC_SUFFIX)
        if not isinstance(suffix, str) or not suffix:
            raise ConfigError("dynamic_suffix: expected a non-empty string")

        return ProcessorConfig(
            encoding=encoding,
            dynamic_suffix=suffix,
            markdown=MarkdownCfg.from_dict(d.get("markdown")),
        )
