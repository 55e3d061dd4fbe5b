from __future__ import annotations

"""Typed configuration for building interpolators.

Optional convenience for callers that keep interpolation settings next to
the rest of their configuration; the constructor arguments of
:class:`~herald.processing.string_interpolator.StringInterpolator` remain the
primary surface.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from herald.constants import DEFAULT_HERALD

_FALSY = {'0', 'false', 'no', 'off'}


def check_herald(herald: str) -> str:
    """Return *herald* unchanged, or raise ValueError if it is not a non-empty string."""
    if not isinstance(herald, str) or not herald:
        raise ValueError('herald must be a non-empty string')
    return herald


@dataclass(frozen=True)
class InterpolatorConfig:
    """Herald and double-herald escape settings for one interpolator."""
    herald: str = DEFAULT_HERALD
    literal: bool = True

    def __post_init__(self) -> None:
        check_herald(self.herald)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'InterpolatorConfig':
        """Read HERALD_DEFAULT and HERALD_LITERAL, falling back to defaults."""
        env = os.environ if environ is None else environ
        herald = env.get('HERALD_DEFAULT') or DEFAULT_HERALD
        literal_raw = (env.get('HERALD_LITERAL') or '').strip().lower()
        return cls(herald=herald, literal=literal_raw not in _FALSY)
