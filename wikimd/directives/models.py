"""Directive vocabulary: which attribute to set and on which element."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wikimd.errors import UnknownDirectiveError


class AttributeKind(str, Enum):
    STYLE = "style"

    @classmethod
    def from_token(cls, token: str) -> AttributeKind:
        if token in ("s", "st", "sty", "styl", "style"):
            return cls.STYLE
        raise UnknownDirectiveError("attribute", token)


class ElementTarget(str, Enum):
    PARENT = "parent"

    @classmethod
    def from_token(cls, token: str) -> ElementTarget:
        if token in ("p", "pa", "par", "pare", "paren", "parent"):
            return cls.PARENT
        raise UnknownDirectiveError("element", token)


@dataclass(frozen=True)
class Directive:
    target: ElementTarget
    attribute: AttributeKind
    data: str


@dataclass(frozen=True)
class DirectiveMutation:
    """Set ``attribute`` to ``value`` on the node at ``node_index``."""

    node_index: int
    attribute: str
    value: str
