from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..dom.nodes import Element
from ..errors import ParseError
from ..paths import IncludeTarget, resolve_include_target

INCLUDE_TAG = "include"


@dataclass(frozen=True)
class IncludeDirective:
    """
    Parsed `<include>` element.

    `name` and `isOpen` are not interpreted here; they stay on the element
    and are consumed when a dynamic panel is rendered.
    """
    target: IncludeTarget
    inline: bool = False
    dynamic: bool = False

    @classmethod
    def from_element(cls, element: Element, current_file: Path) -> IncludeDirective:
        src = element.get_attr("src")
        if not src:
            raise ParseError(current_file, ValueError("<include> without a 'src' attribute"))
        return cls(
            target=resolve_include_target(src, current_file),
            inline=element.has_attr("inline"),
            dynamic=element.has_attr("dynamic"),
        )


__all__ = ["INCLUDE_TAG", "IncludeDirective"]
