"""Tests for human-readable stdout rendering."""

from __future__ import annotations

from pathlib import Path

from skilldex.catalog import load_catalog, match_skills
from skilldex.config import SkilldexConfig
from skilldex.constants.reporting import ANSI_RED, ANSI_RESET
from skilldex.lint.conversion import candidate_to_finding, rule_counts, severity_counts
from skilldex.model import Catalog, Finding, FindingCandidate, LintResult
from skilldex.reporting.stdout import StdoutReporter, render_catalog_table, render_matches


def _finding(rule_id: str, severity: str, line: int | None = 3) -> Finding:
    candidate = FindingCandidate(
        rule_id=rule_id,
        message=f"{rule_id} message",
        path="skills/demo/SKILL.md",
        line=line,
        skill="demo",
    )
    return candidate_to_finding(candidate, severity)  # type: ignore[arg-type]


def _result(findings: list[Finding], *, disabled: tuple[str, ...] = ()) -> LintResult:
    return LintResult(
        root=Path("/repo"),
        skills_checked=3,
        index_files=("CLAUDE.md",),
        findings=tuple(findings),
        counts_by_severity=severity_counts(findings),
        counts_by_rule=rule_counts(findings),
        rules_executed=("FM_MISSING",),
        rules_disabled=disabled,
        warnings=("Parse error in skills/x/SKILL.md: boom",),
        duration_seconds=0.0421,
    )


def test_header_summarizes_result() -> None:
    findings = [_finding("FM_MISSING", "error"), _finding("BODY_EMPTY", "warning"), _finding("BODY_EMPTY", "info", 9)]

    output = StdoutReporter(_result(findings), color=False).render()

    assert ">_ SKILLDEX" in output
    assert "Skills      3 checked" in output
    assert "Indexes     CLAUDE.md" in output
    assert "Findings    3" in output
    assert "Severities  1 error · 1 warning · 1 info" in output
    assert "Top rules   BODY_EMPTY 2 · FM_MISSING 1" in output
    assert "Duration    0.042s" in output
    assert "Verdict" not in output
    assert "Warning" not in output


def test_verdict_and_disabled_rules() -> None:
    findings = [_finding("BODY_EMPTY", "warning")]
    result = _result(findings, disabled=("REF_MISSING",))

    failing = StdoutReporter(result, color=False, fail_on="warning").render()
    passing = StdoutReporter(result, color=False, fail_on="error").render()

    assert "Verdict     FAIL (1 finding(s) >= warning)" in failing
    assert "Verdict     PASS (no findings >= error)" in passing
    assert "Rules off   1 (REF_MISSING)" in failing


def test_verbose_shows_warnings() -> None:
    output = StdoutReporter(_result([]), color=False, verbose=True).render()

    assert "Warning     Parse error in skills/x/SKILL.md: boom" in output


def test_findings_table_rows() -> None:
    findings = [_finding("FM_MISSING", "error"), _finding("BODY_EMPTY", "warning", None)]

    lines = StdoutReporter(_result(findings), color=False).render().splitlines()

    table_rows = [line for line in lines if line.startswith("  │ ")]
    assert "Level" in table_rows[0] and "Message" in table_rows[0]
    assert "skills/demo/SKILL.md:3" in table_rows[1]
    assert table_rows[1].endswith("FM_MISSING message")
    assert "skills/demo/SKILL.md " in table_rows[2]
    assert any(line.startswith("  ┌") for line in lines)
    assert any(line.startswith("  └") for line in lines)


def test_min_severity_hides_findings() -> None:
    findings = [_finding("FM_MISSING", "error"), _finding("BODY_EMPTY", "info")]

    output = StdoutReporter(_result(findings), color=False, min_severity="warning").render()

    assert "Findings    1 shown / 2 total" in output
    assert "BODY_EMPTY message" not in output


def test_no_findings_renders_no_table() -> None:
    output = StdoutReporter(_result([]), color=False).render()

    assert "┌" not in output
    assert "Top rules   none" in output


def test_color_codes_only_when_enabled() -> None:
    findings = [_finding("FM_MISSING", "error")]

    colored = StdoutReporter(_result(findings), color=True).render()
    plain = StdoutReporter(_result(findings), color=False).render()

    assert f"{ANSI_RED}error{ANSI_RESET}" in colored
    assert "\033[" not in plain


def test_catalog_table(basic_repo_root: Path) -> None:
    output = render_catalog_table(load_catalog(basic_repo_root, SkilldexConfig()))

    lines = output.splitlines()
    assert lines[0].split() == ["Skill", "Files", "Description"]
    assert lines[1].split()[:2] == ["commit-helper", "0"]
    assert lines[2].split()[:2] == ["pdf-tools", "2"]
    assert lines[-1] == "2 skill(s), 0 unparseable"


def test_catalog_table_empty(tmp_path: Path) -> None:
    assert render_catalog_table(Catalog(root=tmp_path)) == "No skills found."


def test_render_matches(basic_repo_root: Path) -> None:
    catalog = load_catalog(basic_repo_root, SkilldexConfig())
    matches = match_skills(catalog, "extract pdf tables", limit=5, min_score=0.0)

    output = render_matches("extract pdf tables", matches)

    assert output.splitlines()[0] == "Skills matching: extract pdf tables"
    assert "0.67  pdf-tools" in output
    assert "matched: extract, pdf, table" in output


def test_render_matches_empty() -> None:
    assert render_matches("deploy", []) == "No skills match: deploy"
