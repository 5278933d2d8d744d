"""Catalog construction and context rendering for discovered skills."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any

import yaml

from skilldex.catalog.discovery import derive_skill_name, discover_skill_files, list_auxiliary_files
from skilldex.config import SkilldexConfig
from skilldex.constants.parsing import FRONTMATTER_DELIMITER
from skilldex.exceptions import SkillParseError
from skilldex.io import file_sha256
from skilldex.model import Catalog, ParseFailure, Skill
from skilldex.parsers import parse_skill_markdown_file
from skilldex.utils import relative_posix

logger = logging.getLogger(__name__)


def load_catalog(root: Path, config: SkilldexConfig, *, max_file_mb: int | None = None) -> Catalog:
    """Discover and parse every skill under *root*.

    Unparseable files are recorded as failures and never abort the load.
    """
    root = root.resolve()
    resolved_max_file_mb = max_file_mb if max_file_mb is not None else config.max_file_mb
    skill_files = discover_skill_files(root, config.skill_globs, resolved_max_file_mb)
    logger.debug("Discovered %d SKILL.md files under %s", len(skill_files), root)

    skills: list[Skill] = []
    failures: list[ParseFailure] = []
    warnings: list[str] = []

    for path in skill_files:
        relative_path = relative_posix(path, root)
        name = derive_skill_name(path)
        try:
            skills.append(load_skill(path, root))
        except SkillParseError as exc:
            warning = f"Parse error in {relative_path}: {exc}"
            warnings.append(warning)
            logger.warning(warning)
            failures.append(ParseFailure(file_path=path, relative_path=relative_path, name=name, message=str(exc)))

    paths_by_name: dict[str, list[str]] = defaultdict(list)
    for skill in skills:
        paths_by_name[skill.name].append(skill.relative_path)
    for name, paths in sorted(paths_by_name.items()):
        if len(paths) > 1:
            warning = f"Skill folder name '{name}' is used by multiple files ({', '.join(paths)})"
            warnings.append(warning)
            logger.warning(warning)

    return Catalog(root=root, skills=tuple(skills), failures=tuple(failures), warnings=tuple(warnings))


def load_skill(path: Path, root: Path) -> Skill:
    """Parse a single SKILL.md into a :class:`Skill`."""
    document = parse_skill_markdown_file(path)
    try:
        sha256 = file_sha256(path)
    except OSError as exc:
        raise SkillParseError(f"Cannot hash {path}: {exc}") from exc

    frontmatter = document.frontmatter
    return Skill(
        name=derive_skill_name(path),
        folder=path.parent,
        file_path=path,
        relative_path=relative_posix(path, root.resolve()),
        declared_name=_frontmatter_string(frontmatter, "name"),
        description=_frontmatter_string(frontmatter, "description"),
        body=document.body,
        frontmatter=frontmatter,
        auxiliary_files=list_auxiliary_files(path.parent),
        sha256=sha256,
        document=document,
    )


def render_skill_context(skill: Skill, *, include_frontmatter: bool = False) -> str:
    """Render the text a host agent injects for *skill*."""
    if not include_frontmatter or not skill.frontmatter:
        return skill.body
    rendered = yaml.safe_dump(skill.frontmatter, sort_keys=False, allow_unicode=True).rstrip("\n")
    return f"{FRONTMATTER_DELIMITER}\n{rendered}\n{FRONTMATTER_DELIMITER}\n\n{skill.body}"


def _frontmatter_string(frontmatter: dict[str, Any] | None, key: str) -> str | None:
    if not frontmatter:
        return None
    value = frontmatter.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
