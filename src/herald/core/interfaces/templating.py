from __future__ import annotations
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class InterpolatorProtocol(Protocol):
    """Protocol for herald-driven placeholder interpolators."""

    def add(self, substitutions: Any = ..., **kwargs: str) -> 'InterpolatorProtocol':
        ...

    def require(self, *placeholders: Any) -> 'InterpolatorProtocol':
        ...

    def interpolate(self, text: str) -> str:
        ...


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for one-shot, string-based template engines."""

    def render(self, template: str, variables: Mapping[str, str]) -> str:
        ...
