"""
Root pytest configuration.

Declares the catalog plugin at the root level, which pytest 8.x+ requires for
plugins listed in `pytest_plugins`.
"""

import sys
from pathlib import Path

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parent / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

pytest_plugins = ("catalog_acceptance.pytest_plugin",)
