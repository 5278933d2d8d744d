"""Checks for skill body content and auxiliary file references."""

from __future__ import annotations

from skilldex.constants.lint import BODY_EMPTY, REF_MISSING
from skilldex.lint.base import Check, LintContext
from skilldex.model import FindingCandidate


class BodyEmptyCheck(Check):
    """A skill with frontmatter but no instructions gives the host nothing to inject."""

    rule_id = BODY_EMPTY
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                message="SKILL.md has no body text after the frontmatter",
                path=skill.relative_path,
                line=skill.document.body_start_line,
                skill=skill.name,
                recommendation="Add the instructions the agent should follow when this skill is loaded.",
            )
            for skill in context.catalog.skills
            if not skill.body
        ]


class ReferenceMissingCheck(Check):
    """Relative files mentioned in a skill body must ship inside the skill folder."""

    rule_id = REF_MISSING
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            for reference in skill.document.references:
                if (skill.folder / reference.target).exists():
                    continue
                findings.append(
                    FindingCandidate(
                        rule_id=self.rule_id,
                        message=f"referenced file '{reference.target}' does not exist",
                        path=skill.relative_path,
                        line=reference.line,
                        skill=skill.name,
                        recommendation="Add the file next to SKILL.md or fix the reference.",
                    )
                )
        return findings


CONTENT_CHECK_CLASSES: tuple[type[Check], ...] = (
    BodyEmptyCheck,
    ReferenceMissingCheck,
)
