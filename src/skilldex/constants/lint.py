"""Rule identifiers, severities, and thresholds for lint checks."""

from __future__ import annotations

import re
from re import Pattern

PARSE_ERROR: str = "PARSE_ERROR"
FM_MISSING: str = "FM_MISSING"
FM_NAME_MISSING: str = "FM_NAME_MISSING"
FM_DESCRIPTION_MISSING: str = "FM_DESCRIPTION_MISSING"
FM_NAME_FOLDER_MISMATCH: str = "FM_NAME_FOLDER_MISMATCH"
FM_NAME_FORMAT: str = "FM_NAME_FORMAT"
FM_DESCRIPTION_LENGTH: str = "FM_DESCRIPTION_LENGTH"
FM_UNKNOWN_KEY: str = "FM_UNKNOWN_KEY"
NAME_DUPLICATE: str = "NAME_DUPLICATE"
BODY_EMPTY: str = "BODY_EMPTY"
REF_MISSING: str = "REF_MISSING"
INDEX_NOT_FOUND: str = "INDEX_NOT_FOUND"
INDEX_MISSING_SKILL: str = "INDEX_MISSING_SKILL"
INDEX_STALE_ENTRY: str = "INDEX_STALE_ENTRY"
INDEX_DUPLICATE_ENTRY: str = "INDEX_DUPLICATE_ENTRY"

SEVERITY_RANK: dict[str, int] = {"info": 1, "warning": 2, "error": 3}
DEFAULT_FAIL_ON: str = "error"

SKILL_NAME_MAX_LENGTH: int = 64
SKILL_NAME_FORMAT_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

FINDING_ID_LENGTH: int = 16

ALL_RULE_IDS: tuple[str, ...] = (
    PARSE_ERROR,
    FM_MISSING,
    FM_NAME_MISSING,
    FM_DESCRIPTION_MISSING,
    FM_NAME_FOLDER_MISMATCH,
    FM_NAME_FORMAT,
    FM_DESCRIPTION_LENGTH,
    FM_UNKNOWN_KEY,
    NAME_DUPLICATE,
    BODY_EMPTY,
    REF_MISSING,
    INDEX_NOT_FOUND,
    INDEX_MISSING_SKILL,
    INDEX_STALE_ENTRY,
    INDEX_DUPLICATE_ENTRY,
)
