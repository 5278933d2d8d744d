"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skilldex.yaml"

DEFAULT_SKILL_GLOBS: tuple[str, ...] = ("skills/*/SKILL.md", "**/skills/*/SKILL.md")
DEFAULT_INDEX_FILES: tuple[str, ...] = ("CLAUDE.md", "**/CLAUDE.md")
DEFAULT_INDEX_HEADING: str = "Skills"
DEFAULT_MAX_FILE_MB: int = 2
DEFAULT_MIN_DESCRIPTION_CHARS: int = 20
DEFAULT_MAX_DESCRIPTION_CHARS: int = 1024
DEFAULT_MATCH_LIMIT: int = 5
DEFAULT_MATCH_MIN_SCORE: float = 0.1

DEFAULT_ALLOWED_FRONTMATTER_KEYS: tuple[str, ...] = (
    "name",
    "description",
    "license",
    "allowed-tools",
    "metadata",
    "version",
    "compatibility",
)

VALID_SEVERITIES: frozenset[str] = frozenset({"error", "warning", "info"})
