from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Marker that opens a placeholder when no herald is given explicitly.
DEFAULT_HERALD: str = '%'

# Name of the base logger every component logger hangs from.
LOGGER_NAME: str = 'herald'
