from __future__ import annotations

from pathlib import Path

# Check-suite config and JSON report schema version.
SCHEMA_VERSION = "1"

DEFAULT_CONFIG_PATH = Path("diffable.yaml")

REPORT_FORMATS = ("text", "markdown", "json")

EXIT_SUCCESS = 0
EXIT_DIVERGENCE = 1
EXIT_INTERNAL_ERROR = 2
