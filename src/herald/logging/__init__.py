"""Logging helpers for herald (namespaced loggers, JSON output, scan tracing)."""
from herald.logging.factory import DefaultLoggerFactory
from herald.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_scan_enabled,
    setup_base_logger,
    trace_scan,
)

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'is_trace_scan_enabled',
    'setup_base_logger',
    'trace_scan',
]
