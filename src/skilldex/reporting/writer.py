"""Output writers for lint-report and catalog JSON artifacts."""

from __future__ import annotations

from pathlib import Path

from skilldex.constants.reporting import (
    CATALOG_FILENAME,
    LINT_REPORT_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
)
from skilldex.io import write_json_atomic
from skilldex.model import Catalog, LintResult, SkillMatch
from skilldex.types import JsonObject


def build_lint_payload(result: LintResult) -> JsonObject:
    """Build the versioned JSON payload for a lint result."""
    return {"schema_version": SCHEMA_VERSION, **result.to_dict()}


def build_catalog_payload(catalog: Catalog) -> JsonObject:
    """Build the versioned JSON payload for a catalog."""
    return {"schema_version": SCHEMA_VERSION, **catalog.to_dict()}


def build_matches_payload(task: str, matches: list[SkillMatch]) -> JsonObject:
    """Build the JSON payload for ranked task matches."""
    return {
        "schema_version": SCHEMA_VERSION,
        "task": task,
        "matches": [match.to_dict() for match in matches],
    }


def write_lint_report(out_root: Path, result: LintResult) -> Path:
    """Write ``lint-report.json`` under *out_root* and return its path."""
    path = out_root / LINT_REPORT_FILENAME
    write_json_atomic(
        path=path,
        payload=build_lint_payload(result),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path


def write_catalog(out_root: Path, catalog: Catalog) -> Path:
    """Write ``catalog.json`` under *out_root* and return its path."""
    path = out_root / CATALOG_FILENAME
    write_json_atomic(
        path=path,
        payload=build_catalog_payload(catalog),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
