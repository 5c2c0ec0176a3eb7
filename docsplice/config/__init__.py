from __future__ import annotations

from .load import CONFIG_FILE, find_config, load_config
from .model import DEFAULT_DYNAMIC_SUFFIX, DEFAULT_PLUGINS, MarkdownCfg, ProcessorConfig

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_DYNAMIC_SUFFIX",
    "DEFAULT_PLUGINS",
    "MarkdownCfg",
    "ProcessorConfig",
    "find_config",
    "load_config",
]
