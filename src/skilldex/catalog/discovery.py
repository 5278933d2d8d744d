"""File discovery and skill naming helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from skilldex.constants.discovery import BYTES_PER_MB, SKILL_MARKDOWN_FILENAME
from skilldex.utils import relative_posix, sanitize_output_name

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path, skill_globs: tuple[str, ...], max_file_mb: int) -> list[Path]:
    """Discover SKILL.md files by configured glob patterns."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * BYTES_PER_MB
    resolved_root = root.resolve()

    for pattern in skill_globs:
        for path in resolved_root.glob(pattern):
            if not path.is_file() or path.name != SKILL_MARKDOWN_FILENAME:
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.debug("Skipping %s: larger than %d MB", path, max_file_mb)
                    continue
            except OSError:
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: relative_posix(path, resolved_root))


def discover_index_files(root: Path, index_globs: tuple[str, ...]) -> list[Path]:
    """Discover hand-maintained index files such as CLAUDE.md."""
    resolved_root = root.resolve()
    discovered: set[Path] = set()
    for pattern in index_globs:
        for path in resolved_root.glob(pattern):
            if path.is_file():
                discovered.add(path.resolve())
    return sorted(discovered, key=lambda path: relative_posix(path, resolved_root))


def derive_skill_name(file_path: Path) -> str:
    """Derive the skill identity from the folder holding its SKILL.md."""
    return sanitize_skill_name(file_path.parent.name)


def sanitize_skill_name(raw_name: str) -> str:
    """Normalize a skill name for identity comparisons."""
    return sanitize_output_name(raw_name)


def list_auxiliary_files(folder: Path) -> tuple[str, ...]:
    """List helper files shipped alongside a SKILL.md, relative to its folder.

    Hidden files and anything under a hidden directory are skipped.
    """
    files: list[str] = []
    for path in folder.rglob("*"):
        relative = path.relative_to(folder)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if not path.is_file() or relative.as_posix() == SKILL_MARKDOWN_FILENAME:
            continue
        files.append(relative.as_posix())
    return tuple(sorted(files))
