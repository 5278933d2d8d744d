"""Tests for SKILL.md discovery and skill-name derivation."""

from __future__ import annotations

from pathlib import Path

import pytest

from skilldex.catalog import (
    derive_skill_name,
    discover_index_files,
    discover_skill_files,
    list_auxiliary_files,
    sanitize_skill_name,
)
from skilldex.constants.config import DEFAULT_INDEX_FILES, DEFAULT_SKILL_GLOBS


def _write_skill(folder: Path, text: str = "---\nname: x\n---\nBody\n") -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "SKILL.md"
    path.write_text(text, encoding="utf-8")
    return path


def test_discovers_fixture_skills_in_path_order(basic_repo_root: Path) -> None:
    files = discover_skill_files(basic_repo_root, DEFAULT_SKILL_GLOBS, max_file_mb=2)

    assert [path.parent.name for path in files] == ["commit-helper", "pdf-tools"]


def test_nested_skills_directories_are_discovered(tmp_path: Path) -> None:
    _write_skill(tmp_path / "skills" / "top")
    _write_skill(tmp_path / "plugins" / "extra" / "skills" / "nested")
    _write_skill(tmp_path / "docs" / "not-a-skill")

    files = discover_skill_files(tmp_path, DEFAULT_SKILL_GLOBS, max_file_mb=2)

    assert [path.relative_to(tmp_path.resolve()).as_posix() for path in files] == [
        "plugins/extra/skills/nested/SKILL.md",
        "skills/top/SKILL.md",
    ]


def test_oversized_files_are_skipped(tmp_path: Path) -> None:
    _write_skill(tmp_path / "skills" / "small")
    _write_skill(tmp_path / "skills" / "huge", "x" * (1024 * 1024 + 1))

    files = discover_skill_files(tmp_path, DEFAULT_SKILL_GLOBS, max_file_mb=1)

    assert [path.parent.name for path in files] == ["small"]


def test_discovers_index_files(basic_repo_root: Path) -> None:
    files = discover_index_files(basic_repo_root, DEFAULT_INDEX_FILES)

    assert [path.name for path in files] == ["CLAUDE.md"]


def test_skill_identity_is_the_folder_name(tmp_path: Path) -> None:
    path = _write_skill(tmp_path / "skills" / "My Skill", "---\nname: other\n---\n")

    assert derive_skill_name(path) == "my-skill"


@pytest.mark.parametrize(
    ("raw_name", "expected"),
    [
        ("", "unnamed-skill"),
        ("....", "unnamed-skill"),
        (" @Org/My Skill ", "org-my-skill"),
        ("pdf--tools", "pdf-tools"),
    ],
)
def test_sanitize_skill_name(raw_name: str, expected: str) -> None:
    assert sanitize_skill_name(raw_name) == expected


def test_auxiliary_files_skip_hidden_entries_and_skill_md(tmp_path: Path) -> None:
    folder = tmp_path / "skills" / "demo"
    _write_skill(folder)
    (folder / "scripts").mkdir()
    (folder / "scripts" / "run.sh").write_text("echo hi\n", encoding="utf-8")
    (folder / "template.txt").write_text("t\n", encoding="utf-8")
    (folder / ".env").write_text("SECRET=1\n", encoding="utf-8")
    (folder / ".cache").mkdir()
    (folder / ".cache" / "blob").write_text("x\n", encoding="utf-8")

    assert list_auxiliary_files(folder) == ("scripts/run.sh", "template.txt")
