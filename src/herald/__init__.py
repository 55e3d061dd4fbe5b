from __future__ import annotations

"""herald – placeholder interpolation driven by a herald marker.

    >>> from herald import StringInterpolator
    >>> StringInterpolator().add(a='one', b='two').interpolate('%a - %b')
    'one - two'
"""

from herald.config import InterpolatorConfig
from herald.constants import DEFAULT_HERALD
from herald.errors import (
    ConflictingPlaceholdersError,
    DuplicatePlaceholderError,
    IncompletePlaceholderError,
    InterpolationError,
    InvalidPlaceholderError,
    UnusedRequiredPlaceholdersError,
)
from herald.logging.helpers import get_logger, setup_base_logger
from herald.processing.string_interpolator import StringInterpolator, normalize_key
from herald.rendering.template_engine import HeraldTemplateEngine

__version__ = '1.0.0'


def interpolate(text: str, substitutions, *, herald: str = DEFAULT_HERALD, literal: bool = True) -> str:
    """Interpolate *text* with a throwaway interpolator built from *substitutions*."""
    return StringInterpolator(herald, literal=literal).add(substitutions).interpolate(text)


__all__ = [
    'DEFAULT_HERALD',
    'ConflictingPlaceholdersError',
    'DuplicatePlaceholderError',
    'HeraldTemplateEngine',
    'IncompletePlaceholderError',
    'InterpolationError',
    'InterpolatorConfig',
    'InvalidPlaceholderError',
    'StringInterpolator',
    'UnusedRequiredPlaceholdersError',
    'get_logger',
    'interpolate',
    'normalize_key',
    'setup_base_logger',
]
