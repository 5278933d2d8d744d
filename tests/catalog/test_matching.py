"""Tests for ranking skills against a task description."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from skilldex.catalog import load_catalog, match_skills, tokenize
from skilldex.config import SkilldexConfig
from skilldex.model import Catalog


@pytest.fixture()
def basic_catalog(basic_repo_root: Path) -> Catalog:
    return load_catalog(basic_repo_root, SkilldexConfig())


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Extract tables from a PDF", ("extract", "table", "pdf")),
        ("Use the PDFs, please!", ("pdf",)),
        ("class access address", ("class", "access", "address")),
        ("git git GIT", ("git",)),
        ("", ()),
    ],
)
def test_tokenize(text: str, expected: tuple[str, ...]) -> None:
    assert tokenize(text) == expected


def test_name_terms_outweigh_description_terms(basic_catalog: Catalog) -> None:
    matches = match_skills(basic_catalog, "extract tables from a pdf", limit=5, min_score=0.0)

    assert [match.skill.name for match in matches] == ["pdf-tools"]
    assert matches[0].matched_terms == ("extract", "table", "pdf")
    assert matches[0].score == pytest.approx(0.6667)


def test_commit_task_matches_commit_helper(basic_catalog: Catalog) -> None:
    matches = match_skills(basic_catalog, "write a commit message", limit=5, min_score=0.0)

    assert [match.skill.name for match in matches] == ["commit-helper"]
    assert matches[0].matched_terms == ("write", "commit", "message")


def test_unrelated_or_stopword_tasks_match_nothing(basic_catalog: Catalog) -> None:
    assert match_skills(basic_catalog, "deploy kubernetes cluster", limit=5, min_score=0.0) == []
    assert match_skills(basic_catalog, "please use it", limit=5, min_score=0.0) == []


def test_min_score_filters_weak_matches(basic_catalog: Catalog) -> None:
    matches = match_skills(basic_catalog, "fill the form for taxes and payroll", limit=5, min_score=0.5)

    assert matches == []


def test_ties_sort_by_name_and_limit_applies(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    for folder in ("zeta", "alpha", "mid"):
        skill_factory(folder, f"name: {folder}\ndescription: Format markdown tables nicely.\n")
    catalog = load_catalog(tmp_path, SkilldexConfig())

    matches = match_skills(catalog, "markdown tables", limit=2, min_score=0.0)

    assert [match.skill.name for match in matches] == ["alpha", "mid"]
    assert all(match.score == 0.5 for match in matches)


def test_skills_without_description_match_on_name(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("release-notes", "name: release-notes\n")
    catalog = load_catalog(tmp_path, SkilldexConfig())

    matches = match_skills(catalog, "draft release notes", limit=5, min_score=0.0)

    assert [match.skill.name for match in matches] == ["release-notes"]
    assert matches[0].matched_terms == ("release", "note")
