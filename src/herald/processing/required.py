from __future__ import annotations

"""Bookkeeping for placeholders that must appear in every interpolated text."""

from typing import Dict, Iterable, Tuple

from herald.errors import UnusedRequiredPlaceholdersError


class RequiredKeyTracker:
    """Ordered set of required placeholder keys.

    Keys need not be registered; a required key that was never added simply
    fails every scan. Each scan works on its own copy from :meth:`pending`.
    """

    def __init__(self) -> None:
        self._keys: Dict[str, None] = {}

    def add(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._keys.setdefault(key, None)

    def pending(self) -> Dict[str, None]:
        """Fresh working set for one scan; discard keys as they are matched."""
        return dict(self._keys)

    @staticmethod
    def check(unused: Dict[str, None], *, herald: str) -> None:
        if unused:
            raise UnusedRequiredPlaceholdersError(unused, herald=herald)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)
