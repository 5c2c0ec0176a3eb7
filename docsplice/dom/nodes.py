"""
Document tree nodes.

A closed set of immutable node classes. Transformations build new nodes
instead of mutating existing ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


@dataclass(frozen=True)
class Doctype:
    content: str


@dataclass(frozen=True)
class ProcessingInstruction:
    content: str          # text between "<?" and ">"


@dataclass(frozen=True)
class Declaration:
    content: str


@dataclass(frozen=True)
class CData:
    content: str


@dataclass(frozen=True)
class Element:
    """
    Markup element.

    The tag name is lowercased on construction so that dispatch never
    depends on the spelling used in the source.
    """
    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.lower())
        object.__setattr__(self, "attributes", dict(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def has_attr(self, name: str) -> bool:
        return self.find_attr(name) is not None

    def find_attr(self, name: str) -> Optional[str]:
        """Attribute key matching `name` case-insensitively, if any."""
        wanted = name.lower()
        for key in self.attributes:
            if key.lower() == wanted:
                return key
        return None

    def get_attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        key = self.find_attr(name)
        return self.attributes[key] if key is not None else default

    def with_name(self, name: str) -> Element:
        return replace(self, name=name)

    def with_attributes(self, attributes: Mapping[str, str]) -> Element:
        return replace(self, attributes=dict(attributes))

    def with_children(self, children: Iterable[Node]) -> Element:
        return replace(self, children=tuple(children))

    def without_attrs(self, *names: str) -> Element:
        dropped = {n.lower() for n in names}
        return self.with_attributes(
            {k: v for k, v in self.attributes.items() if k.lower() not in dropped}
        )

    def set_attr(self, name: str, value: str) -> Element:
        """Set attribute, replacing any key spelled with a different case."""
        attrs = {k: v for k, v in self.attributes.items() if k.lower() != name.lower()}
        attrs[name] = value
        return self.with_attributes(attrs)


Node = Union[Text, Comment, Doctype, ProcessingInstruction, Declaration, CData, Element]


def iter_elements(nodes: Iterable[Node]):
    """Pre-order walk over all elements."""
    for node in nodes:
        if isinstance(node, Element):
            yield node
            yield from iter_elements(node.children)


__all__ = [
    "Text",
    "Comment",
    "Doctype",
    "ProcessingInstruction",
    "Declaration",
    "CData",
    "Element",
    "Node",
    "iter_elements",
]
