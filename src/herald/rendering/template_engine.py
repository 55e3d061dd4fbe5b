"""
template_engine – Concrete TemplateEngineProtocol implementation for herald.

Builds a fresh interpolator for every ``render`` call, so a single engine can
serve unrelated variable sets without sharing a registry between them.
"""

import logging
from typing import Iterable, Mapping, Optional

from herald.config import InterpolatorConfig
from herald.core.interfaces.templating import TemplateEngineProtocol
from herald.errors import InterpolationError
from herald.logging.helpers import get_logger
from herald.processing.string_interpolator import StringInterpolator


class HeraldTemplateEngine(TemplateEngineProtocol):
    """One-shot template engine on top of :class:`StringInterpolator`.

    Behaviour follows the interpolator exactly:
      • %name → variables["name"]
      • %%    → "%" (unless the config disables the escape)
    Failures are logged and re-raised; a template never renders partially.
    """

    def __init__(
        self,
        *,
        config: Optional[InterpolatorConfig] = None,
        required: Iterable[str] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config or InterpolatorConfig()
        self._required = tuple(required)
        self._log = logger or get_logger('templates')

    def render(self, template: str, variables: Mapping[str, str]) -> str:  # type: ignore[override]
        """Render *template* replacing placeholders via *variables*."""
        try:
            interp = StringInterpolator.from_config(self._config, logger=self._log)
            return interp.add(variables).require(*self._required).interpolate(template)
        except InterpolationError as exc:
            self._log.error('template rendering failed: %s', exc)
            raise
