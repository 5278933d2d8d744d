"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture repository path: two clean skills and a CLAUDE.md index."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def skill_factory(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes ``skills/<folder>/SKILL.md`` under ``tmp_path``."""

    def _write(folder: str, frontmatter: str | None = None, body: str = "# Skill\n\nDo the thing.\n") -> Path:
        skill_dir = tmp_path / "skills" / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        content = f"---\n{frontmatter}---\n{body}" if frontmatter is not None else body
        path = skill_dir / "SKILL.md"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
