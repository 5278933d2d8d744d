"""Dataclasses for parsed documents, catalogs, findings, and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skilldex.constants.lint import SEVERITY_RANK
from skilldex.exceptions import SkillNotFoundError
from skilldex.types import JsonObject, Severity
from skilldex.utils import sanitize_output_name


@dataclass(frozen=True)
class DocumentLine:
    """A non-blank body line with its 1-based file line number."""

    line: int
    value: str
    in_code_block: bool = False


@dataclass(frozen=True)
class DocumentReference:
    """A relative file path mentioned in a skill body."""

    target: str
    line: int
    snippet: str


@dataclass(frozen=True)
class SkillDocument:
    """Parsed SKILL.md content."""

    file_path: Path
    raw_text: str
    frontmatter: dict[str, Any] | None
    frontmatter_present: bool
    body: str
    body_start_line: int
    lines: tuple[DocumentLine, ...] = ()
    references: tuple[DocumentReference, ...] = ()


@dataclass(frozen=True)
class ParseFailure:
    """A SKILL.md file that was discovered but could not be parsed."""

    file_path: Path
    relative_path: str
    name: str
    message: str


@dataclass(frozen=True)
class Skill:
    """A discovered skill: folder identity plus its frontmatter contract."""

    name: str
    folder: Path
    file_path: Path
    relative_path: str
    declared_name: str | None
    description: str | None
    body: str
    frontmatter: dict[str, Any] | None
    auxiliary_files: tuple[str, ...]
    sha256: str
    document: SkillDocument = field(repr=False, compare=False)

    def to_dict(self) -> JsonObject:
        """Serialize the catalog entry without body text."""
        return {
            "name": self.name,
            "declared_name": self.declared_name,
            "description": self.description,
            "path": self.relative_path,
            "auxiliary_files": list(self.auxiliary_files),
            "sha256": self.sha256,
        }


@dataclass(frozen=True)
class Catalog:
    """All skills discovered under a root, in deterministic path order."""

    root: Path
    skills: tuple[Skill, ...] = ()
    failures: tuple[ParseFailure, ...] = ()
    warnings: tuple[str, ...] = ()

    def names(self) -> tuple[str, ...]:
        """Return skill identities in catalog order."""
        return tuple(skill.name for skill in self.skills)

    def get(self, name: str) -> Skill:
        """Look up a skill by folder identity, then by declared frontmatter name."""
        wanted = sanitize_output_name(name)
        for skill in self.skills:
            if skill.name == wanted:
                return skill
        for skill in self.skills:
            if skill.declared_name is not None and sanitize_output_name(skill.declared_name) == wanted:
                return skill
        raise SkillNotFoundError(name, tuple(sorted(self.names())))

    def to_dict(self) -> JsonObject:
        """Serialize the catalog for ``catalog.json``."""
        return {
            "root": str(self.root),
            "skills": [skill.to_dict() for skill in self.skills],
            "failures": [
                {"path": failure.relative_path, "name": failure.name, "message": failure.message}
                for failure in self.failures
            ],
        }


@dataclass(frozen=True)
class IndexEntry:
    """A skill name listed in an index document."""

    name: str
    line: int
    snippet: str


@dataclass(frozen=True)
class IndexDocument:
    """Skill entries extracted from a hand-maintained index file."""

    file_path: Path
    entries: tuple[IndexEntry, ...] = ()
    has_markers: bool = False

    def names(self) -> tuple[str, ...]:
        """Return distinct entry names in first-seen order."""
        return tuple(dict.fromkeys(entry.name for entry in self.entries))


@dataclass(frozen=True)
class IndexDiff:
    """Difference between an index document and the skills on disk."""

    missing: tuple[str, ...] = ()
    stale: tuple[IndexEntry, ...] = ()
    duplicates: tuple[IndexEntry, ...] = ()

    @property
    def in_sync(self) -> bool:
        """Whether the index lists exactly the catalog's skills once each."""
        return not (self.missing or self.stale or self.duplicates)


@dataclass(frozen=True)
class FindingCandidate:
    """A check result before severity resolution and id assignment."""

    rule_id: str
    message: str
    path: str
    line: int | None = None
    skill: str | None = None
    recommendation: str = ""


@dataclass(frozen=True)
class Finding:
    """A lint finding with stable identity."""

    id: str
    rule_id: str
    severity: Severity
    message: str
    path: str
    line: int | None
    skill: str | None
    recommendation: str

    def to_dict(self) -> JsonObject:
        """Serialize finding for JSON output."""
        return {
            "id": self.id,
            "rule_id": self.rule_id,
            "severity": self.severity,
            "message": self.message,
            "path": self.path,
            "line": self.line,
            "skill": self.skill,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class LintResult:
    """Result of linting a skills workspace."""

    root: Path
    skills_checked: int
    index_files: tuple[str, ...]
    findings: tuple[Finding, ...]
    counts_by_severity: dict[Severity, int]
    counts_by_rule: dict[str, int]
    rules_executed: tuple[str, ...]
    rules_disabled: tuple[str, ...]
    warnings: tuple[str, ...]
    duration_seconds: float

    @property
    def error_count(self) -> int:
        """Number of error-severity findings."""
        return self.counts_by_severity.get("error", 0)

    @property
    def warning_count(self) -> int:
        """Number of warning-severity findings."""
        return self.counts_by_severity.get("warning", 0)

    def fails(self, fail_on: Severity) -> bool:
        """Return True when any finding reaches the *fail_on* severity."""
        threshold = SEVERITY_RANK[fail_on]
        return any(SEVERITY_RANK[finding.severity] >= threshold for finding in self.findings)

    def to_dict(self) -> JsonObject:
        """Serialize result for ``lint-report.json``."""
        return {
            "root": str(self.root),
            "skills_checked": self.skills_checked,
            "index_files": list(self.index_files),
            "total_findings": len(self.findings),
            "counts_by_severity": dict(self.counts_by_severity),
            "counts_by_rule": dict(self.counts_by_rule),
            "rules_executed": list(self.rules_executed),
            "rules_disabled": list(self.rules_disabled),
            "warnings": list(self.warnings),
            "findings": [finding.to_dict() for finding in self.findings],
        }


@dataclass(frozen=True)
class SkillMatch:
    """A skill ranked against a task description."""

    skill: Skill
    score: float
    matched_terms: tuple[str, ...]

    def to_dict(self) -> JsonObject:
        """Serialize match for JSON output."""
        return {
            "name": self.skill.name,
            "description": self.skill.description,
            "path": self.skill.relative_path,
            "score": self.score,
            "matched_terms": list(self.matched_terms),
        }
