"""Version information."""

from __future__ import annotations

# Bumped at release time; printed by `sheets2json --version`.
__version__ = "1.0.0"

VERSION_STRING = f"sheets2json {__version__}"
