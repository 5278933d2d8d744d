"""Tests for individual lint checks."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from skilldex.catalog import load_catalog
from skilldex.config import SkilldexConfig
from skilldex.lint import CHECK_CLASSES, Check, LintContext
from skilldex.lint.content import BodyEmptyCheck, ReferenceMissingCheck
from skilldex.lint.frontmatter import (
    DescriptionLengthCheck,
    DescriptionMissingCheck,
    FrontmatterMissingCheck,
    NameDuplicateCheck,
    NameFolderMismatchCheck,
    NameFormatCheck,
    NameMissingCheck,
    ParseErrorCheck,
    UnknownKeyCheck,
)
from skilldex.lint.index import (
    IndexDuplicateEntryCheck,
    IndexMissingSkillCheck,
    IndexNotFoundCheck,
    IndexStaleEntryCheck,
)
from skilldex.lint.runner import load_index_documents
from skilldex.model import FindingCandidate

DESCRIPTION = "A description that is comfortably long enough."


def _context(root: Path, config: SkilldexConfig | None = None) -> LintContext:
    config = config or SkilldexConfig()
    warnings: list[str] = []
    return LintContext(
        catalog=load_catalog(root, config),
        config=config,
        index_documents=load_index_documents(root.resolve(), config, warnings),
    )


def _run(check_cls: type[Check], context: LintContext) -> list[FindingCandidate]:
    return check_cls().run(context)


def test_fixture_repo_is_clean(basic_repo_root: Path) -> None:
    context = _context(basic_repo_root)

    for check_cls in CHECK_CLASSES:
        assert _run(check_cls, context) == [], check_cls.rule_id


def test_check_subclass_requires_rule_id() -> None:
    with pytest.raises(TypeError, match="rule_id"):

        class _NoRuleId(Check):
            default_severity = "error"

            def run(self, context: LintContext) -> list[FindingCandidate]:
                return []


def test_check_subclass_requires_upper_snake_case() -> None:
    with pytest.raises(TypeError, match="UPPER_SNAKE_CASE"):

        class _BadRuleId(Check):
            rule_id = "bad-id"
            default_severity = "error"

            def run(self, context: LintContext) -> list[FindingCandidate]:
                return []


def test_parse_error_reported(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("broken").write_text("---\nname: broken\n", encoding="utf-8")

    findings = _run(ParseErrorCheck, _context(tmp_path))

    assert [(f.path, f.skill, f.line) for f in findings] == [("skills/broken/SKILL.md", "broken", 1)]
    assert "Unterminated frontmatter" in findings[0].message


def test_frontmatter_missing(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("plain", body="# Just a body\n")

    context = _context(tmp_path)

    assert [f.skill for f in _run(FrontmatterMissingCheck, context)] == ["plain"]
    assert _run(NameMissingCheck, context) == []
    assert _run(DescriptionMissingCheck, context) == []


def test_name_and_description_missing(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("empty-block", "")
    skill_factory("no-name", f"description: {DESCRIPTION}\n")
    skill_factory("no-description", "name: no-description\nlicense: MIT\n")

    context = _context(tmp_path)

    assert sorted(f.skill for f in _run(NameMissingCheck, context)) == ["empty-block", "no-name"]
    assert sorted(f.skill for f in _run(DescriptionMissingCheck, context)) == ["empty-block", "no-description"]


def test_missing_key_line_defaults_to_first_line(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("no-name", f"license: MIT\ndescription: {DESCRIPTION}\n")

    findings = _run(NameMissingCheck, _context(tmp_path))

    assert findings[0].line == 1


def test_name_folder_mismatch(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("folder", f"description: {DESCRIPTION}\nname: different\n")
    skill_factory("same", f"name: Same\ndescription: {DESCRIPTION}\n")

    findings = _run(NameFolderMismatchCheck, _context(tmp_path))

    assert [(f.skill, f.line) for f in findings] == [("folder", 3)]
    assert "'different'" in findings[0].message


@pytest.mark.parametrize(
    ("name", "flagged"),
    [
        ("good-name", False),
        ("v2", False),
        ("Bad_Name", True),
        ("double--dash", True),
        ("-leading", True),
        ("a" * 65, True),
    ],
)
def test_name_format(skill_factory: Callable[..., Path], tmp_path: Path, name: str, flagged: bool) -> None:
    skill_factory("skill", f"name: '{name}'\ndescription: {DESCRIPTION}\n")

    findings = _run(NameFormatCheck, _context(tmp_path))

    assert bool(findings) is flagged


def test_description_length_bounds(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("short", "name: short\ndescription: Too short\n")
    skill_factory("long", f"name: long\ndescription: {'x' * 40}\n")
    skill_factory("ok", f"name: ok\ndescription: {'y' * 25}\n")
    config = SkilldexConfig(min_description_chars=20, max_description_chars=30)

    findings = _run(DescriptionLengthCheck, _context(tmp_path, config))

    messages = {f.skill: f.message for f in findings}
    assert messages == {
        "long": "description is 40 characters, longer than 30",
        "short": "description is 9 characters, shorter than 20",
    }


def test_unknown_frontmatter_keys(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("extra", f"name: extra\ndescription: {DESCRIPTION}\nowner: team-a\nlicense: MIT\n")

    findings = _run(UnknownKeyCheck, _context(tmp_path))

    assert [(f.message, f.line) for f in findings] == [("unknown frontmatter key `owner`", 4)]


def test_unknown_keys_respect_config(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("extra", f"name: extra\ndescription: {DESCRIPTION}\nowner: team-a\n")
    config = SkilldexConfig(allowed_frontmatter_keys=("name", "description", "owner"))

    assert _run(UnknownKeyCheck, _context(tmp_path, config)) == []


def test_duplicate_declared_names(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("alpha", f"name: alpha\ndescription: {DESCRIPTION}\n")
    skill_factory("copy", f"name: Alpha\ndescription: {DESCRIPTION}\n")
    skill_factory("unique", f"name: unique\ndescription: {DESCRIPTION}\n")

    findings = _run(NameDuplicateCheck, _context(tmp_path))

    assert sorted(f.skill for f in findings) == ["alpha", "copy"]
    by_skill = {f.skill: f.message for f in findings}
    assert by_skill["alpha"] == "skill name 'alpha' is also declared by skills/copy/SKILL.md"


def test_duplicate_check_ignores_skills_without_declared_name(
    skill_factory: Callable[..., Path], tmp_path: Path
) -> None:
    skill_factory("beta", f"description: {DESCRIPTION}\n")
    skill_factory("other", f"name: beta\ndescription: {DESCRIPTION}\n")

    assert _run(NameDuplicateCheck, _context(tmp_path)) == []


def test_body_empty(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("hollow", f"name: hollow\ndescription: {DESCRIPTION}\n", body="\n\n")
    skill_factory("full", f"name: full\ndescription: {DESCRIPTION}\n")

    findings = _run(BodyEmptyCheck, _context(tmp_path))

    assert [(f.skill, f.line) for f in findings] == [("hollow", 5)]


def test_reference_missing(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    body = "Read [guide](docs/guide.md).\nRun `scripts/run.sh` then [missing](docs/missing.md).\n"
    path = skill_factory("refs", f"name: refs\ndescription: {DESCRIPTION}\n", body=body)
    (path.parent / "docs").mkdir()
    (path.parent / "docs" / "guide.md").write_text("# Guide\n", encoding="utf-8")

    findings = _run(ReferenceMissingCheck, _context(tmp_path))

    assert [(f.message, f.line) for f in findings] == [
        ("referenced file 'docs/missing.md' does not exist", 6),
        ("referenced file 'scripts/run.sh' does not exist", 6),
    ]


def test_index_not_found_only_when_required(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("solo", f"name: solo\ndescription: {DESCRIPTION}\n")

    assert _run(IndexNotFoundCheck, _context(tmp_path)) == []
    findings = _run(IndexNotFoundCheck, _context(tmp_path, SkilldexConfig(index_required=True)))
    assert [f.path for f in findings] == ["."]


def test_index_divergence_checks(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("listed", f"name: listed\ndescription: {DESCRIPTION}\n")
    skill_factory("unlisted", f"name: unlisted\ndescription: {DESCRIPTION}\n")
    (tmp_path / "CLAUDE.md").write_text(
        "# Agents\n\n## Skills\n\n- **listed**: yes\n- **ghost**: removed\n- **listed**: again\n",
        encoding="utf-8",
    )
    context = _context(tmp_path)

    missing = _run(IndexMissingSkillCheck, context)
    stale = _run(IndexStaleEntryCheck, context)
    duplicates = _run(IndexDuplicateEntryCheck, context)

    assert [(f.skill, f.path, f.line) for f in missing] == [("unlisted", "CLAUDE.md", None)]
    assert [(f.skill, f.line) for f in stale] == [("ghost", 6)]
    assert [(f.skill, f.line) for f in duplicates] == [("listed", 7)]


def test_each_index_file_is_checked_separately(skill_factory: Callable[..., Path], tmp_path: Path) -> None:
    skill_factory("alpha", f"name: alpha\ndescription: {DESCRIPTION}\n")
    (tmp_path / "CLAUDE.md").write_text("- alpha: listed\n", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "CLAUDE.md").write_text("# Skills\n\nNothing yet.\n", encoding="utf-8")

    findings = _run(IndexMissingSkillCheck, _context(tmp_path))

    assert [(f.skill, f.path) for f in findings] == [("alpha", "sub/CLAUDE.md")]
