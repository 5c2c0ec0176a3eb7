"""
Per-file processing context.

The context travels down the tree by value: crossing a file boundary builds a
new context instead of changing the one the siblings still use.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Tuple

from .errors import IncludeCycle, UnsupportedExtension
from .paths import HTML_EXT, MARKDOWN_EXT, absolute, get_ext_name


class SourceFormat(str, Enum):
    MARKDOWN = "md"
    HTML = "html"

    @classmethod
    def of(cls, path: Path) -> SourceFormat:
        """Format of an included file: Markdown by extension, HTML otherwise."""
        return cls.MARKDOWN if get_ext_name(path) == MARKDOWN_EXT else cls.HTML

    @classmethod
    def of_root(cls, path: Path) -> SourceFormat:
        """Format of a root file; only .md and .html are accepted."""
        ext = get_ext_name(path)
        if ext == MARKDOWN_EXT:
            return cls.MARKDOWN
        if ext == HTML_EXT:
            return cls.HTML
        raise UnsupportedExtension(path, ext)


class Mode(str, Enum):
    INCLUDE = "include"   # splice only, Markdown stays unrendered
    RENDER = "render"     # splice and render in one run


@dataclass(frozen=True)
class IncludeContext:
    """
    Immutable snapshot of where the resolver currently is.

    Attributes:
        current_file: Absolute path of the file owning the subtree
        source_format: Format of that file
        mode: Processing mode of the whole run
        stack: Files currently open on the include chain (root first)
    """
    current_file: Path
    source_format: SourceFormat
    mode: Mode
    stack: Tuple[Path, ...] = ()

    @classmethod
    def for_root(cls, root: Path, mode: Mode) -> IncludeContext:
        root = absolute(root)
        return cls(
            current_file=root,
            source_format=SourceFormat.of_root(root),
            mode=mode,
            stack=(root,),
        )

    def enter(self, file: Path, source_format: SourceFormat) -> IncludeContext:
        """
        Context for the subtree sourced from `file`.

        Raises:
            IncludeCycle: If `file` is already open on the include chain
        """
        if file in self.stack:
            raise IncludeCycle(self.stack + (file,))
        return replace(
            self,
            current_file=file,
            source_format=source_format,
            stack=self.stack + (file,),
        )


__all__ = ["SourceFormat", "Mode", "IncludeContext"]
