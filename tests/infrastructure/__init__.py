"""
Shared test infrastructure for docsplice.

Modules:
- file_utils: creating files and documentation trees
- running: synchronous wrappers around the processor coroutines
"""

from .file_utils import write, write_tree
from .running import include, render

__all__ = ["write", "write_tree", "include", "render"]
