from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from ..errors import IncludeNotFound, ParseError
from ..paths import absolute

logger = logging.getLogger(__name__)


class FileCache:
    """
    In-memory cache of raw file contents keyed by absolute path.

    Entries are written once, on first access, and never invalidated while a
    processor is running. Concurrent fills of the same key are harmless: both
    readers get the same bytes.
    """

    def __init__(self, *, encoding: str = "utf-8"):
        self.encoding = encoding
        self._entries: Dict[Path, str] = {}

    def get(self, path: Path, *, included_from: Optional[Path] = None) -> str:
        """
        Contents of `path`, loading it on first access.

        Args:
            path: File to read
            included_from: File holding the include directive, for error messages

        Raises:
            IncludeNotFound: If the file does not exist or is not a regular file
            ParseError: If the file is not valid in the configured encoding
        """
        key = absolute(path)
        cached = self._entries.get(key)
        if cached is not None:
            return cached

        if not key.is_file():
            raise IncludeNotFound(key, included_from)
        try:
            text = key.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise ParseError(key, e) from e
        logger.debug(f"Loaded {key} ({len(text)} chars)")
        self._entries[key] = text
        return text

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, path: Path) -> bool:
        return absolute(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["FileCache"]
