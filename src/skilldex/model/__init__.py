"""Core data models for Skilldex."""

from .entities import (
    Catalog,
    DocumentLine,
    DocumentReference,
    Finding,
    FindingCandidate,
    IndexDiff,
    IndexDocument,
    IndexEntry,
    LintResult,
    ParseFailure,
    Skill,
    SkillDocument,
    SkillMatch,
)

__all__ = [
    "Catalog",
    "DocumentLine",
    "DocumentReference",
    "Finding",
    "FindingCandidate",
    "IndexDiff",
    "IndexDocument",
    "IndexEntry",
    "LintResult",
    "ParseFailure",
    "Skill",
    "SkillDocument",
    "SkillMatch",
]
