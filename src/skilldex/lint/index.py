"""Checks that hand-maintained index files list exactly the skills on disk."""

from __future__ import annotations

from skilldex.catalog import compare_index
from skilldex.constants.lint import (
    INDEX_DUPLICATE_ENTRY,
    INDEX_MISSING_SKILL,
    INDEX_NOT_FOUND,
    INDEX_STALE_ENTRY,
)
from skilldex.lint.base import Check, LintContext
from skilldex.model import FindingCandidate


class IndexNotFoundCheck(Check):
    """Report a workspace that requires an index but has none."""

    rule_id = INDEX_NOT_FOUND
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        if not context.config.index_required or context.index_documents:
            return []
        patterns = ", ".join(context.config.index_files) or "(none configured)"
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                message=f"no index file found matching {patterns}",
                path=".",
                recommendation="Run `skilldex index --write CLAUDE.md` to generate one.",
            )
        ]


class IndexMissingSkillCheck(Check):
    """Every skill on disk must appear in each index file."""

    rule_id = INDEX_MISSING_SKILL
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for index in context.index_documents:
            diff = compare_index(index, context.catalog)
            for name in diff.missing:
                findings.append(
                    FindingCandidate(
                        rule_id=self.rule_id,
                        message=f"skill '{name}' exists on disk but is not listed",
                        path=context.relative(index.file_path),
                        skill=name,
                        recommendation="Regenerate the index with `skilldex index --write`.",
                    )
                )
        return findings


class IndexStaleEntryCheck(Check):
    """Index entries must name a skill that exists on disk."""

    rule_id = INDEX_STALE_ENTRY
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for index in context.index_documents:
            for entry in compare_index(index, context.catalog).stale:
                findings.append(
                    FindingCandidate(
                        rule_id=self.rule_id,
                        message=f"index lists '{entry.name}' but no such skill exists",
                        path=context.relative(index.file_path),
                        line=entry.line,
                        skill=entry.name,
                        recommendation="Remove the entry or restore the skill folder.",
                    )
                )
        return findings


class IndexDuplicateEntryCheck(Check):
    """A skill should be listed once per index file."""

    rule_id = INDEX_DUPLICATE_ENTRY
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for index in context.index_documents:
            for entry in compare_index(index, context.catalog).duplicates:
                findings.append(
                    FindingCandidate(
                        rule_id=self.rule_id,
                        message=f"'{entry.name}' is listed more than once",
                        path=context.relative(index.file_path),
                        line=entry.line,
                        skill=entry.name,
                        recommendation="Keep a single entry per skill.",
                    )
                )
        return findings


INDEX_CHECK_CLASSES: tuple[type[Check], ...] = (
    IndexNotFoundCheck,
    IndexMissingSkillCheck,
    IndexStaleEntryCheck,
    IndexDuplicateEntryCheck,
)
