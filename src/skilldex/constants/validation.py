"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config) or unreadable
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # contradictory settings
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skill_globs",
        "index_files",
        "index_heading",
        "index_required",
        "max_file_mb",
        "min_description_chars",
        "max_description_chars",
        "allowed_frontmatter_keys",
        "checks",
        "severity_overrides",
        "match_limit",
        "match_min_score",
    }
)

ALLOWED_CHECKS_KEYS: frozenset[str] = frozenset({"enabled", "disabled"})

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "skill_globs",
    "index_files",
    "allowed_frontmatter_keys",
)

POSITIVE_INT_KEYS: tuple[str, ...] = (
    "max_file_mb",
    "max_description_chars",
    "match_limit",
)
