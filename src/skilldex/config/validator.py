"""Config file validation for Skilldex."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from skilldex.config.loader import resolve_config_path
from skilldex.constants.config import VALID_SEVERITIES
from skilldex.constants.lint import ALL_RULE_IDS
from skilldex.constants.validation import (
    ALLOWED_CHECKS_KEYS,
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    LIST_OF_STRINGS_KEYS,
    POSITIVE_INT_KEYS,
)
from skilldex.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skilldex.yaml file and return all validation errors.

    This is the collect-all entry point used by ``skilldex validate-config``
    and by every command's preflight. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    path = resolve_config_path(root, config_path)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"config file is not valid UTF-8: {exc}",
            )
        )
        return errors
    except OSError as exc:
        errors.append(
            ValidationError(
                code=CFG001,
                path=path_str,
                field="",
                message=f"cannot read config file: {exc}",
            )
        )
        return errors

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw and not _is_string_list(raw[key]):
            errors.append(_type_error(path_str, key, "expected a list of strings"))

    for key in POSITIVE_INT_KEYS:
        if key in raw:
            _validate_int(raw[key], key, path_str, errors, minimum=1)
    if "min_description_chars" in raw:
        _validate_int(raw["min_description_chars"], "min_description_chars", path_str, errors, minimum=0)

    min_chars = raw.get("min_description_chars")
    max_chars = raw.get("max_description_chars")
    if _is_int(min_chars) and _is_int(max_chars) and min_chars > max_chars:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="min_description_chars",
                message=f"min_description_chars ({min_chars}) exceeds max_description_chars ({max_chars})",
                hint="set min_description_chars <= max_description_chars",
            )
        )

    if "index_heading" in raw:
        val = raw["index_heading"]
        if not isinstance(val, str) or not val.strip():
            errors.append(_type_error(path_str, "index_heading", "expected a non-empty string"))

    if "index_required" in raw and not isinstance(raw["index_required"], bool):
        errors.append(_type_error(path_str, "index_required", "expected a boolean"))

    if "match_min_score" in raw:
        val = raw["match_min_score"]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(_type_error(path_str, "match_min_score", "expected a number between 0 and 1"))
        elif not 0 <= val <= 1:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="match_min_score",
                    message=f"`match_min_score` must be between 0 and 1, got {val}",
                )
            )

    _validate_checks_block(raw, path_str, errors)
    _validate_severity_overrides_block(raw, path_str, errors)

    return errors


def _validate_checks_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``checks`` nested mapping in skilldex.yaml."""
    if "checks" not in raw:
        return
    checks = raw["checks"]
    if checks is None:
        return
    if not isinstance(checks, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="checks",
                message="`checks` must be a mapping",
            )
        )
        return

    for key in sorted(checks.keys(), key=str):
        if key not in ALLOWED_CHECKS_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"checks.{key}",
                    message=f"unknown key `{key}` in `checks`",
                    hint=_suggest_key(str(key), ALLOWED_CHECKS_KEYS),
                )
            )

    valid_lists: dict[str, set[str]] = {}
    for sub_key in ("enabled", "disabled"):
        if sub_key not in checks or checks[sub_key] is None:
            continue
        val = checks[sub_key]
        if not _is_string_list(val):
            errors.append(_type_error(path_str, f"checks.{sub_key}", "expected a list of strings"))
            continue
        rule_ids = {item.strip().upper() for item in val if item.strip()}
        for rule_id in sorted(rule_ids - set(ALL_RULE_IDS)):
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"checks.{sub_key}",
                    message=f"unknown check `{rule_id}`",
                    hint=_suggest_key(rule_id, frozenset(ALL_RULE_IDS)),
                )
            )
        valid_lists[sub_key] = rule_ids

    overlap = sorted(valid_lists.get("enabled", set()) & valid_lists.get("disabled", set()))
    if overlap:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="checks",
                message=f"check(s) in both enabled and disabled: {', '.join(overlap)}",
                hint="remove duplicates from one list",
            )
        )


def _validate_severity_overrides_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the optional ``severity_overrides`` mapping in skilldex.yaml."""
    if "severity_overrides" not in raw:
        return
    overrides = raw["severity_overrides"]
    if overrides is None:
        return
    if not isinstance(overrides, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="severity_overrides",
                message="`severity_overrides` must be a mapping",
            )
        )
        return

    for rule_id, severity in overrides.items():
        if not isinstance(rule_id, str) or rule_id.strip().upper() not in ALL_RULE_IDS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"severity_overrides.{rule_id}",
                    message=f"unknown check `{rule_id}`",
                    hint=_suggest_key(str(rule_id), frozenset(ALL_RULE_IDS)),
                )
            )
            continue
        if not isinstance(severity, str) or severity not in VALID_SEVERITIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"severity_overrides.{rule_id}",
                    message="invalid severity",
                    hint=f"expected one of: {', '.join(sorted(VALID_SEVERITIES))}; got: {severity!r}",
                )
            )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _is_string_list(value: Any) -> bool:
    return value is None or (isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=key,
        message=f"invalid type for `{key}`",
        hint=hint,
    )


def _validate_int(
    value: Any,
    key: str,
    path_str: str,
    errors: list[ValidationError],
    *,
    minimum: int,
) -> None:
    if not _is_int(value):
        errors.append(_type_error(path_str, key, "expected an integer"))
    elif value < minimum:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=key,
                message=f"`{key}` must be >= {minimum}, got {value}",
            )
        )
