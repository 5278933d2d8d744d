"""Config data model for Skilldex."""

from __future__ import annotations

from dataclasses import dataclass, field

from skilldex.constants.config import (
    DEFAULT_ALLOWED_FRONTMATTER_KEYS,
    DEFAULT_INDEX_FILES,
    DEFAULT_INDEX_HEADING,
    DEFAULT_MATCH_LIMIT,
    DEFAULT_MATCH_MIN_SCORE,
    DEFAULT_MAX_DESCRIPTION_CHARS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_MIN_DESCRIPTION_CHARS,
    DEFAULT_SKILL_GLOBS,
)
from skilldex.types import ChecksConfig, Severity


@dataclass(frozen=True)
class SkilldexConfig:
    """Resolved workspace config."""

    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    index_files: tuple[str, ...] = DEFAULT_INDEX_FILES
    index_heading: str = DEFAULT_INDEX_HEADING
    index_required: bool = False
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    min_description_chars: int = DEFAULT_MIN_DESCRIPTION_CHARS
    max_description_chars: int = DEFAULT_MAX_DESCRIPTION_CHARS
    allowed_frontmatter_keys: tuple[str, ...] = DEFAULT_ALLOWED_FRONTMATTER_KEYS
    checks: ChecksConfig = ChecksConfig()
    severity_overrides: dict[str, Severity] = field(default_factory=dict)
    match_limit: int = DEFAULT_MATCH_LIMIT
    match_min_score: float = DEFAULT_MATCH_MIN_SCORE
