from __future__ import annotations

import re
from typing import Iterable, Tuple

from .nodes import Comment, Element, Node, Text

_NON_SPACE = re.compile(r"\S")


def _is_blank(node: Node) -> bool:
    if isinstance(node, Comment):
        return True
    return isinstance(node, Text) and not _NON_SPACE.search(node.content)


def trim(nodes: Iterable[Node]) -> Tuple[Node, ...]:
    """
    Drop comments and whitespace-only text nodes at every level.
    Only meant for the final rendered tree.
    """
    out = []
    for node in nodes:
        if _is_blank(node):
            continue
        if isinstance(node, Element):
            node = node.with_children(trim(node.children))
        out.append(node)
    return tuple(out)


__all__ = ["trim"]
