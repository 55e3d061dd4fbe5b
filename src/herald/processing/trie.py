"""
trie – Prefix tree of placeholders and the merge rules that guard it.

Each root-to-leaf path spells one registered placeholder key and the leaf
holds its replacement, e.g. ``foo → bar`` is stored as::

    Branch({'f': Branch({'o': Branch({'o': Leaf('bar')})})})

The set of leaves always forms an antichain under the prefix relation: no
key is a strict prefix of another and no key appears twice. That is what
makes resolution after a herald unambiguous, since at most one leaf can be
reached from any position in the text.

Nodes are immutable. A registration builds a fresh path from the root down
to the point where the new key leaves the existing tree and shares every
untouched subtree with the previous root, so a failed registration leaves
the previous trie intact.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from herald.core.models import Branch, Leaf, MaybeNode, Node
from herald.errors import (
    ConflictingPlaceholdersError,
    DuplicatePlaceholderError,
    IncompletePlaceholderError,
    InvalidPlaceholderError,
)
from herald.logging.helpers import get_logger


def build_chain(key: str, replacement: str) -> Node:
    """Turn *key* into a single-path tree ending in a leaf for *replacement*."""
    node: Node = Leaf(replacement)
    for char in reversed(key):
        node = Branch({char: node})
    return node


def pick_key(node: MaybeNode) -> str:
    """Follow the first child at every level until a leaf and return the path.

    Only used to name the other side of a conflict in error messages.
    """
    chars: List[str] = []
    while isinstance(node, Branch) and node.children:
        char, node = next(iter(node.children.items()))
        chars.append(char)
    return ''.join(chars)


class PlaceholderTrie:
    """Immutable-by-merge registry of placeholder keys and replacements."""

    def __init__(self, *, herald: str, logger: Optional[logging.Logger] = None) -> None:
        self._herald = herald
        self._root: MaybeNode = None
        self._log = logger or get_logger('trie')

    @property
    def root(self) -> MaybeNode:
        return self._root

    def merge(self, root: MaybeNode, key: str, replacement: str) -> Node:
        """Return a new root combining *root* with the chain for *key*.

        *root* is left untouched. Raises :class:`DuplicatePlaceholderError`
        or :class:`ConflictingPlaceholdersError` when the key would break
        the prefix antichain.
        """
        path: List[Tuple[Branch, str]] = []
        node = root
        depth = 0
        while True:
            if node is None:
                merged = build_chain(key[depth:], replacement)
                break
            if isinstance(node, Leaf):
                if depth == len(key):
                    self._log.debug('rejecting duplicate placeholder %r', key)
                    raise DuplicatePlaceholderError(key, herald=self._herald)
                # Existing key is a strict prefix of the new one.
                raise self._conflict(key[:depth], key)
            if depth == len(key):
                # New key is a strict prefix of an existing one.
                raise self._conflict(key + pick_key(node), key)
            path.append((node, key[depth]))
            node = node.children.get(key[depth])
            depth += 1

        for parent, char in reversed(path):
            children = dict(parent.children)
            children[char] = merged
            merged = Branch(children)
        return merged

    def _conflict(self, existing: str, incoming: str) -> ConflictingPlaceholdersError:
        self._log.debug('rejecting placeholder %r: conflicts with %r', incoming, existing)
        return ConflictingPlaceholdersError(existing, incoming, herald=self._herald)

    def insert(self, key: str, replacement: str) -> 'PlaceholderTrie':
        self._root = self.merge(self._root, key, replacement)
        return self

    def replace_root(self, root: MaybeNode) -> None:
        """Publish a root previously produced by :meth:`merge`."""
        self._root = root

    def resolve(self, text: str, start: int) -> Tuple[str, str, int]:
        """Descend the trie from *start*, one character per level.

        Called right after a herald has been consumed. Returns the matched
        key, its replacement and the index just past the key. The position
        after a failure is meaningless, so callers must stop scanning.
        """
        node = self._root
        pos = start
        end = len(text)
        while True:
            if node is None:
                raise InvalidPlaceholderError(text[start:pos], herald=self._herald)
            if isinstance(node, Leaf):
                return text[start:pos], node.replacement, pos
            if pos >= end:
                raise IncompletePlaceholderError(text[start:pos], herald=self._herald)
            node = node.children.get(text[pos])
            pos += 1

    def keys(self) -> Iterator[str]:
        """Yield every registered key, depth-first in insertion order."""
        if self._root is None:
            return
        stack: List[Tuple[str, Node]] = [('', self._root)]
        while stack:
            prefix, node = stack.pop()
            if isinstance(node, Leaf):
                yield prefix
                continue
            for char, child in reversed(list(node.children.items())):
                stack.append((prefix + char, child))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        node = self._root
        for char in key:
            if not isinstance(node, Branch):
                return False
            node = node.children.get(char)
        return isinstance(node, Leaf)

    def __len__(self) -> int:
        return sum(1 for _ in self.keys())
