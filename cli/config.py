"""Environment-variable-based configuration for the command-line tool."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("FITPLAN_LOG_LEVEL", "INFO").upper()
JSON_INDENT: int = int(os.environ.get("FITPLAN_JSON_INDENT", "2"))
