from __future__ import annotations

from .directive import INCLUDE_TAG, IncludeDirective
from .resolver import DYNAMIC_PANEL_TAG, MARKDOWN_TAG, IncludeResolver, wrap_content

__all__ = [
    "INCLUDE_TAG",
    "MARKDOWN_TAG",
    "DYNAMIC_PANEL_TAG",
    "IncludeDirective",
    "IncludeResolver",
    "wrap_content",
]
