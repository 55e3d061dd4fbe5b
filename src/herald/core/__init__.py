from __future__ import annotations

"""Public surface for herald.core.

Data models and protocol types shared by the processing and rendering
layers:

    from herald.core import Branch, Leaf, InterpolatorProtocol
"""

from herald.core.interfaces import (
    InterpolatorProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TemplateEngineProtocol,
)
from herald.core.models import (
    Branch,
    Leaf,
    LiteralRun,
    MaybeNode,
    Node,
    PlaceholderMatch,
    Token,
)

__all__ = [
    'Branch',
    'Leaf',
    'LiteralRun',
    'MaybeNode',
    'Node',
    'PlaceholderMatch',
    'Token',
    'InterpolatorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateEngineProtocol',
]
