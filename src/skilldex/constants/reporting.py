"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

LINT_REPORT_FILENAME: str = "lint-report.json"
CATALOG_FILENAME: str = "catalog.json"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"
INDEX_TEMP_PREFIX: str = ".tmp-index-"
INDEX_TEMP_SUFFIX: str = ".md"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

DESCRIPTION_PREVIEW_LENGTH: int = 60
TOP_RULES_LIMIT: int = 3

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
    "info": ANSI_DIM,
}
