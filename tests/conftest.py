import os
import sys
from pathlib import Path

# Make the src/ layout importable when the package is not installed.
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

# Tracing is opt-in; keep test runs independent of the caller's shell.
os.environ.pop("HERALD_TRACE_SCAN", None)
