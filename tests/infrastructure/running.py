"""
Helpers for driving the processor coroutines from synchronous tests.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from docsplice import Processor


def render(path: Path, processor: Processor | None = None) -> str:
    return asyncio.run((processor or Processor()).render_file(path))


def include(path: Path, processor: Processor | None = None) -> str:
    return asyncio.run((processor or Processor()).include_file(path))
