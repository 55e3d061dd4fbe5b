from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union


@dataclass(frozen=True)
class Leaf:
    """Terminal trie node holding the replacement for one placeholder."""
    replacement: str


@dataclass(frozen=True)
class Branch:
    """Internal trie node keyed by the next character of a placeholder.

    ``children`` is copied into a read-only view on construction, so the
    mapping handed in can be reused by the caller; merges build fresh
    branches along the path they touch.
    """
    children: Mapping[str, 'Node'] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'children', MappingProxyType(dict(self.children)))


# A missing node is represented by ``None``.
Node = Union[Branch, Leaf]
MaybeNode = Optional[Node]


@dataclass(frozen=True)
class LiteralRun:
    """Run of input text that contains no herald occurrence."""
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class PlaceholderMatch:
    """Herald plus the placeholder key it resolved to."""
    key: str
    replacement: str
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.replacement


Token = Union[LiteralRun, PlaceholderMatch]
