"""
Path helpers for include resolution.

Include sources are either absolute URLs (kept verbatim) or paths relative to
the directory of the file that contains the directive.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

MARKDOWN_EXT = "md"
HTML_EXT = "html"


def is_url(src: str) -> bool:
    """True for absolute URLs such as 'https://host/page.html'."""
    parts = urlsplit(src)
    return bool(parts.scheme and parts.netloc)


def get_ext_name(path: Path | str) -> str:
    """Extension without the leading dot, lowercased ('' if none)."""
    return Path(path).suffix[1:].lower()


def set_extension(filename: str, ext: str) -> str:
    """
    Replace the extension of a bare filename.

    Examples:
        >>> set_extension("part.md", "._include_.html")
        'part._include_.html'
    """
    stem, _ = os.path.splitext(filename)
    return stem + ext


def absolute(path: Path | str) -> Path:
    """Absolute, normalized path without resolving symlinks."""
    return Path(os.path.abspath(path))


@dataclass(frozen=True)
class IncludeTarget:
    """Where an include directive points to."""
    src: str                       # raw attribute value
    location: str                  # absolute path (as string) or the URL itself
    anchor: Optional[str] = None   # fragment identifier without '#'
    remote: bool = False

    @property
    def path(self) -> Path:
        if self.remote:
            raise ValueError(f"Remote include has no local path: {self.src}")
        return Path(self.location)


def resolve_include_target(src: str, current_file: Path) -> IncludeTarget:
    """
    Resolve an include `src` against the file that contains the directive.

    URLs are kept as-is. Local paths drop query and anchor parts and are
    resolved relative to the directory of `current_file`.
    """
    if is_url(src):
        anchor = urlsplit(src).fragment or None
        return IncludeTarget(src=src, location=src, anchor=anchor, remote=True)

    parts = urlsplit(src)
    rel = parts.path
    location = absolute(current_file.parent / rel) if rel else absolute(current_file)
    return IncludeTarget(
        src=src,
        location=str(location),
        anchor=parts.fragment or None,
        remote=False,
    )


__all__ = [
    "MARKDOWN_EXT",
    "HTML_EXT",
    "is_url",
    "get_ext_name",
    "set_extension",
    "absolute",
    "IncludeTarget",
    "resolve_include_target",
]
