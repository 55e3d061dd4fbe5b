"""
string_interpolator – Herald-driven placeholder interpolation.

Placeholders are introduced by a herald ('%' by default), much like
``git log --pretty=format:'%H %s'``:

  • %n          → replacement registered for "n"
  • %name       → replacement registered for "name" (keys can be long)
  • %%          → a literal "%" (the herald registered as its own key)
  • '%%foo'     → "%foo", '%%%foo' → "%" + replacement of "foo"

Usage::

    result = (
        StringInterpolator()
        .add(n='Bob', w='nice')
        .require('n')
        .interpolate("Hello, %n. The weather's %w today")
    )

Keys live in a prefix tree, so a key that is a prefix of another one is
rejected at registration time ("should %foobarbaz be one+barbaz or
two+baz?"). Scanning is a single pass that only descends the tree where a
herald occurs, which keeps long texts and large key sets cheap.
"""

from __future__ import annotations

import enum
import itertools
import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from herald.config import InterpolatorConfig, check_herald
from herald.constants import DEFAULT_HERALD
from herald.core.models import LiteralRun, Token
from herald.logging.helpers import get_logger
from herald.processing.required import RequiredKeyTracker
from herald.processing.scanner import HeraldScanner
from herald.processing.trie import PlaceholderTrie

Substitutions = Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]


def normalize_key(key: Any) -> str:
    """Return the text form of a placeholder key.

    Strings pass through untouched; enum members use their string value or
    their name; anything else goes through ``str()``.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, enum.Enum):
        return key.value if isinstance(key.value, str) else key.name
    return str(key)


class StringInterpolator:
    """Registry of placeholders plus the scanner that substitutes them.

    Instances follow a build-then-use lifecycle: register placeholders and
    required keys first, then call :meth:`interpolate` as often as needed.
    Scans only read the registry and may run from several threads once
    registration is over; registration itself is not synchronized.
    """

    def __init__(
        self,
        herald: str = DEFAULT_HERALD,
        *,
        literal: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._herald = check_herald(herald)
        self._literal = bool(literal)
        self._log = logger or get_logger('interpolator')
        self._trie = PlaceholderTrie(herald=herald, logger=logger)
        self._required = RequiredKeyTracker()
        self._scanner = HeraldScanner(herald=herald, trie=self._trie, logger=logger)

        # Two heralds in a row stand for one literal herald.
        if self._literal:
            self.add({herald: herald})

    @classmethod
    def from_config(
        cls, config: InterpolatorConfig, *, logger: Optional[logging.Logger] = None
    ) -> 'StringInterpolator':
        return cls(config.herald, literal=config.literal, logger=logger)

    @property
    def herald(self) -> str:
        return self._herald

    @property
    def literal(self) -> bool:
        return self._literal

    @property
    def required(self) -> Tuple[str, ...]:
        return self._required.keys

    def add(self, substitutions: Optional[Substitutions] = None, **kwargs: Any) -> 'StringInterpolator':
        """Register placeholders; keys become placeholders, values replacements.

        Accepts a mapping, an iterable of pairs and/or keyword arguments.
        Every entry reaches the trie, so a key repeated within one call is a
        duplicate like any other. The whole call is atomic: if any entry is
        a duplicate or conflicts with another key, none of the entries from
        this call are registered and the error propagates.
        """
        if substitutions is None:
            pairs: Iterable[Tuple[Any, Any]] = ()
        elif isinstance(substitutions, Mapping):
            pairs = substitutions.items()
        else:
            pairs = substitutions

        root = self._trie.root
        count = 0
        for key, replacement in itertools.chain(pairs, kwargs.items()):
            root = self._trie.merge(root, normalize_key(key), str(replacement))
            count += 1
        self._trie.replace_root(root)
        self._log.debug('registered %d placeholder(s)', count)
        return self

    def require(self, *placeholders: Any) -> 'StringInterpolator':
        """Mark placeholders that every interpolated text must contain."""
        self._required.add(normalize_key(p) for p in placeholders)
        return self

    def placeholders(self) -> Iterator[str]:
        """Iterate over registered keys, the herald escape included."""
        return self._trie.keys()

    def __contains__(self, key: Any) -> bool:
        return normalize_key(key) in self._trie

    def tokens(self, text: str) -> Iterator[Token]:
        """Yield literal runs and resolved placeholders without the required check."""
        return self._scanner.scan(text)

    def interpolate(self, text: str) -> str:
        """Replace every placeholder in *text* with its replacement.

        Raises an :class:`~herald.errors.InterpolationError` subclass for
        unknown placeholders, placeholders cut off by the end of the text and
        required placeholders that never appeared. No partial output is ever
        returned.
        """
        unused = self._required.pending()
        out: list[str] = []
        for token in self._scanner.scan(text):
            if isinstance(token, LiteralRun):
                out.append(token.text)
                continue
            unused.pop(token.key, None)
            out.append(token.replacement)

        self._required.check(unused, herald=self._herald)
        return ''.join(out)
