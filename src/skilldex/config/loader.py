"""Config loading and normalization for Skilldex."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skilldex.config.model import SkilldexConfig
from skilldex.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_ALLOWED_FRONTMATTER_KEYS,
    DEFAULT_INDEX_FILES,
    DEFAULT_INDEX_HEADING,
    DEFAULT_MATCH_LIMIT,
    DEFAULT_MATCH_MIN_SCORE,
    DEFAULT_MAX_DESCRIPTION_CHARS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_MIN_DESCRIPTION_CHARS,
    DEFAULT_SKILL_GLOBS,
    VALID_SEVERITIES,
)
from skilldex.constants.lint import ALL_RULE_IDS
from skilldex.exceptions import ConfigError
from skilldex.types import ChecksConfig, Severity


def resolve_config_path(root: Path, config_path: Path | None) -> Path:
    """Return the explicit config path or the default ``skilldex.yaml`` under *root*."""
    return config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)


def load_config(root: Path, config_path: Path | None = None) -> SkilldexConfig:
    """Load and validate config from ``skilldex.yaml`` or an explicit path."""
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkilldexConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file at {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    checks_raw = raw.get("checks", {})
    if checks_raw is None:
        checks_raw = {}
    if not isinstance(checks_raw, dict):
        raise ConfigError("checks must be a mapping")

    checks = ChecksConfig(
        enabled=_ensure_rule_ids(checks_raw.get("enabled", []), "checks.enabled"),
        disabled=_ensure_rule_ids(checks_raw.get("disabled", []), "checks.disabled"),
    )
    overlap = sorted(set(checks.enabled) & set(checks.disabled))
    if overlap:
        raise ConfigError(f"check(s) in both checks.enabled and checks.disabled: {', '.join(overlap)}")

    index_heading = raw.get("index_heading", DEFAULT_INDEX_HEADING)
    if not isinstance(index_heading, str) or not index_heading.strip():
        raise ConfigError("index_heading must be a non-empty string")

    index_required = raw.get("index_required", False)
    if not isinstance(index_required, bool):
        raise ConfigError("index_required must be a boolean")

    max_file_mb = _ensure_int(raw.get("max_file_mb", DEFAULT_MAX_FILE_MB), "max_file_mb", minimum=1)
    min_chars = _ensure_int(
        raw.get("min_description_chars", DEFAULT_MIN_DESCRIPTION_CHARS),
        "min_description_chars",
        minimum=0,
    )
    max_chars = _ensure_int(
        raw.get("max_description_chars", DEFAULT_MAX_DESCRIPTION_CHARS),
        "max_description_chars",
        minimum=1,
    )
    if min_chars > max_chars:
        raise ConfigError("min_description_chars must not exceed max_description_chars")

    match_limit = _ensure_int(raw.get("match_limit", DEFAULT_MATCH_LIMIT), "match_limit", minimum=1)
    match_min_score = raw.get("match_min_score", DEFAULT_MATCH_MIN_SCORE)
    if isinstance(match_min_score, bool) or not isinstance(match_min_score, (int, float)):
        raise ConfigError("match_min_score must be a number")
    if not 0 <= match_min_score <= 1:
        raise ConfigError("match_min_score must be between 0 and 1")

    return SkilldexConfig(
        skill_globs=tuple(_ensure_string_list(raw.get("skill_globs", DEFAULT_SKILL_GLOBS), "skill_globs")),
        index_files=tuple(_ensure_string_list(raw.get("index_files", DEFAULT_INDEX_FILES), "index_files")),
        index_heading=index_heading.strip(),
        index_required=index_required,
        max_file_mb=max_file_mb,
        min_description_chars=min_chars,
        max_description_chars=max_chars,
        allowed_frontmatter_keys=tuple(
            _ensure_string_list(
                raw.get("allowed_frontmatter_keys", DEFAULT_ALLOWED_FRONTMATTER_KEYS),
                "allowed_frontmatter_keys",
            )
        ),
        checks=checks,
        severity_overrides=_build_severity_overrides(raw.get("severity_overrides")),
        match_limit=match_limit,
        match_min_score=float(match_min_score),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item for item in value if item.strip()]


def _ensure_rule_ids(value: Any, key_name: str) -> tuple[str, ...]:
    rule_ids = tuple(item.strip().upper() for item in _ensure_string_list(value, key_name))
    unknown = sorted(set(rule_ids) - set(ALL_RULE_IDS))
    if unknown:
        raise ConfigError(f"{key_name} contains unknown check(s): {', '.join(unknown)}")
    return rule_ids


def _ensure_int(value: Any, key_name: str, *, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key_name} must be an integer")
    if value < minimum:
        raise ConfigError(f"{key_name} must be >= {minimum}, got {value}")
    return value


def _build_severity_overrides(raw: Any) -> dict[str, Severity]:
    """Build the rule id to severity mapping from the raw ``severity_overrides`` block."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("severity_overrides must be a mapping")

    overrides: dict[str, Severity] = {}
    for rule_id, severity in raw.items():
        if not isinstance(rule_id, str) or rule_id.strip().upper() not in ALL_RULE_IDS:
            raise ConfigError(f"severity_overrides contains unknown check: {rule_id!r}")
        if not isinstance(severity, str) or severity not in VALID_SEVERITIES:
            raise ConfigError(
                f"severity_overrides.{rule_id} must be one of {sorted(VALID_SEVERITIES)}, got {severity!r}"
            )
        overrides[rule_id.strip().upper()] = severity  # type: ignore[assignment]
    return dict(sorted(overrides.items()))
