from __future__ import annotations

from .renderer import ContentRenderer

__all__ = ["ContentRenderer"]
