from __future__ import annotations

"""Failure taxonomy for registration and interpolation.

Every error renders its keys with the herald prefixed so the message shows
exactly what the caller wrote (or would have to write) in the input text.
All of them derive from :class:`InterpolationError`, itself a ``ValueError``,
so callers can catch the whole family at once.
"""

from typing import Iterable, Tuple


class InterpolationError(ValueError):
    """Base class for every herald failure."""

    def __init__(self, message: str, *, herald: str) -> None:
        super().__init__(message)
        self.herald = herald


class DuplicatePlaceholderError(InterpolationError):
    """Raised when the same placeholder is registered twice."""

    def __init__(self, key: str, *, herald: str) -> None:
        super().__init__(f'duplicate placeholder: {herald}{key}', herald=herald)
        self.key = key


class ConflictingPlaceholdersError(InterpolationError):
    """Raised when one placeholder is a strict prefix of another."""

    def __init__(self, existing: str, incoming: str, *, herald: str) -> None:
        super().__init__(
            f'conflicting placeholders: {herald}{existing} and {herald}{incoming}',
            herald=herald,
        )
        self.existing = existing
        self.incoming = incoming

    @property
    def keys(self) -> Tuple[str, str]:
        return (self.existing, self.incoming)


class InvalidPlaceholderError(InterpolationError):
    """Raised when the text after a herald matches no registered placeholder."""

    def __init__(self, key: str, *, herald: str) -> None:
        super().__init__(f'invalid placeholder: {herald}{key}', herald=herald)
        self.key = key


class IncompletePlaceholderError(InterpolationError):
    """Raised when the input ends in the middle of a placeholder."""

    def __init__(self, key: str, *, herald: str) -> None:
        super().__init__(f'incomplete placeholder at end of string: {herald}{key}', herald=herald)
        self.key = key


class UnusedRequiredPlaceholdersError(InterpolationError):
    """Raised after a scan when required placeholders never showed up."""

    def __init__(self, keys: Iterable[str], *, herald: str) -> None:
        self.keys: Tuple[str, ...] = tuple(keys)
        described = ', '.join(f'{herald}{key}' for key in self.keys)
        super().__init__(f'required placeholders were unused: {described}', herald=herald)
