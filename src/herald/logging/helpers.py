from __future__ import annotations

"""Logging helpers that keep herald logger names and output formats uniform.

This module provides:
    - JsonLogFormatter: compact JSON records with a stable field set.
    - setup_base_logger: one-time configuration of the 'herald' logger.
    - get_logger: namespaced logger factory ('herald.*').
    - trace_scan: per-token scan tracing gated by HERALD_TRACE_SCAN.

The library itself never calls setup_base_logger; embedding applications
decide whether herald output goes anywhere.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from herald.constants import LOGGER_NAME


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'herald.scanner').
        - msg: Formatted message string.
        - version: herald.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Imported lazily: herald/__init__ imports this module.
            from herald import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv('HERALD_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: Optional[bool] = None, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'herald' logger once and return it.

    Args:
        json_logs: JSON output when True, plain text when False. ``None``
            defers to the HERALD_JSON_LOGS environment flag.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    if json_logs is None:
        json_logs = os.getenv('HERALD_JSON_LOGS') == '1'

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'herald'."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{LOGGER_NAME}.{name}')


def is_trace_scan_enabled() -> bool:
    """Check if scan tracing is enabled via env flag."""
    return os.getenv('HERALD_TRACE_SCAN') == '1'


def trace_scan(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit a DEBUG scan trace, only when HERALD_TRACE_SCAN=1.

    Structured context is attached to the record as ``context`` so that
    :class:`JsonLogFormatter` can render it under ``ctx``.
    """
    if not is_trace_scan_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
