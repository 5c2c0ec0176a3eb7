"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from DocspliceError.

Programming errors and bugs should NOT inherit from DocspliceError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class DocspliceError(Exception):
    """
    Base class for all user-facing errors in docsplice.

    These errors indicate problems that the user can fix:
    missing include targets, unsupported files, broken markup, etc.
    """
    pass


class IncludeNotFound(DocspliceError):
    """Local include target (or root file) does not exist."""

    def __init__(self, path: Path, included_from: Optional[Path] = None):
        self.path = path
        self.included_from = included_from
        if included_from is not None:
            message = f"Include not found: '{path}' (included from '{included_from}')"
        else:
            message = f"File not found: '{path}'"
        super().__init__(message)


class UnsupportedExtension(DocspliceError):
    """Root file is neither Markdown nor HTML."""

    def __init__(self, path: Path, extension: str):
        self.path = path
        self.extension = extension
        super().__init__(f"Unsupported File Extension: '{extension}' ({path})")


class ParseError(DocspliceError):
    """Source that cannot be decoded or is rejected by the HTML parser."""

    def __init__(self, path: Optional[Path], cause: Optional[Exception] = None):
        self.path = path
        self.cause = cause
        where = f" in '{path}'" if path is not None else ""
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to parse markup{where}{detail}")


class IncludeCycle(DocspliceError):
    """A file transitively includes itself."""

    def __init__(self, chain: Sequence[Path]):
        self.chain = list(chain)
        rendered = " -> ".join(str(p) for p in self.chain)
        super().__init__(f"Include cycle detected: {rendered}")


class ConfigError(DocspliceError):
    """Invalid configuration file or value."""
    pass


__all__ = [
    "DocspliceError",
    "IncludeNotFound",
    "UnsupportedExtension",
    "ParseError",
    "IncludeCycle",
    "ConfigError",
]
