"""
docsplice: assemble Markdown/HTML documentation trees linked by
`<include>` directives into one document.
"""

from __future__ import annotations

from .config import ProcessorConfig, load_config
from .context import IncludeContext, Mode, SourceFormat
from .errors import (
    ConfigError,
    DocspliceError,
    IncludeCycle,
    IncludeNotFound,
    ParseError,
    UnsupportedExtension,
)
from .processor import Processor, create_processor
from .version import tool_version

__version__ = tool_version()

__all__ = [
    "Processor",
    "create_processor",
    "ProcessorConfig",
    "load_config",
    "IncludeContext",
    "Mode",
    "SourceFormat",
    "DocspliceError",
    "IncludeNotFound",
    "UnsupportedExtension",
    "ParseError",
    "IncludeCycle",
    "ConfigError",
    "__version__",
]
