"""Checks for the SKILL.md frontmatter contract and name uniqueness."""

from __future__ import annotations

import re
from collections import defaultdict

from skilldex.constants.lint import (
    FM_DESCRIPTION_LENGTH,
    FM_DESCRIPTION_MISSING,
    FM_MISSING,
    FM_NAME_FOLDER_MISMATCH,
    FM_NAME_FORMAT,
    FM_NAME_MISSING,
    FM_UNKNOWN_KEY,
    NAME_DUPLICATE,
    PARSE_ERROR,
    SKILL_NAME_FORMAT_PATTERN,
    SKILL_NAME_MAX_LENGTH,
)
from skilldex.constants.parsing import FRONTMATTER_ALT_DELIMITER, FRONTMATTER_DELIMITER
from skilldex.lint.base import Check, LintContext
from skilldex.model import FindingCandidate, Skill
from skilldex.utils import sanitize_output_name


def frontmatter_key_line(skill: Skill, key: str) -> int:
    """Return the 1-based line declaring *key* in the frontmatter, or 1."""
    pattern = re.compile(rf"^{re.escape(key)}\s*:")
    lines = skill.document.raw_text.lstrip("\ufeff").splitlines()
    for index, line in enumerate(lines[1:], start=2):
        if line.strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            break
        if pattern.match(line):
            return index
    return 1


class ParseErrorCheck(Check):
    """Report SKILL.md files that could not be parsed at all."""

    rule_id = PARSE_ERROR
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                message=failure.message,
                path=failure.relative_path,
                line=1,
                skill=failure.name,
                recommendation="Fix the frontmatter block so it is a terminated YAML mapping in UTF-8 text.",
            )
            for failure in context.catalog.failures
        ]


class FrontmatterMissingCheck(Check):
    """Skill documents must open with a frontmatter block."""

    rule_id = FM_MISSING
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                message="SKILL.md has no frontmatter block",
                path=skill.relative_path,
                line=1,
                skill=skill.name,
                recommendation="Start the file with a `---` block declaring `name` and `description`.",
            )
            for skill in context.catalog.skills
            if not skill.document.frontmatter_present
        ]


class NameMissingCheck(Check):
    """Frontmatter must carry a non-empty string `name`."""

    rule_id = FM_NAME_MISSING
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            if not skill.document.frontmatter_present or skill.declared_name is not None:
                continue
            findings.append(
                FindingCandidate(
                    rule_id=self.rule_id,
                    message="frontmatter `name` is missing, empty or not a string",
                    path=skill.relative_path,
                    line=frontmatter_key_line(skill, "name"),
                    skill=skill.name,
                    recommendation=f"Add `name: {skill.name}` to the frontmatter.",
                )
            )
        return findings


class DescriptionMissingCheck(Check):
    """Frontmatter must carry a non-empty string `description` used for task matching."""

    rule_id = FM_DESCRIPTION_MISSING
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            if not skill.document.frontmatter_present or skill.description is not None:
                continue
            findings.append(
                FindingCandidate(
                    rule_id=self.rule_id,
                    message="frontmatter `description` is missing, empty or not a string",
                    path=skill.relative_path,
                    line=frontmatter_key_line(skill, "description"),
                    skill=skill.name,
                    recommendation="Describe what the skill does and when a host agent should load it.",
                )
            )
        return findings


class NameFolderMismatchCheck(Check):
    """The declared `name` should match the folder that identifies the skill."""

    rule_id = FM_NAME_FOLDER_MISMATCH
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            if skill.declared_name is None:
                continue
            if sanitize_output_name(skill.declared_name) == skill.name:
                continue
            findings.append(
                FindingCandidate(
                    rule_id=self.rule_id,
                    message=f"frontmatter name '{skill.declared_name}' does not match folder '{skill.folder.name}'",
                    path=skill.relative_path,
                    line=frontmatter_key_line(skill, "name"),
                    skill=skill.name,
                    recommendation="Rename the folder or the frontmatter `name` so both agree.",
                )
            )
        return findings


class NameFormatCheck(Check):
    """Declared names should be short lowercase hyphenated identifiers."""

    rule_id = FM_NAME_FORMAT
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            name = skill.declared_name
            if name is None:
                continue
            if SKILL_NAME_FORMAT_PATTERN.match(name) and len(name) <= SKILL_NAME_MAX_LENGTH:
                continue
            findings.append(
                FindingCandidate(
                    rule_id=self.rule_id,
                    message=(
                        f"name '{name}' should be lowercase letters, digits and single hyphens, "
                        f"at most {SKILL_NAME_MAX_LENGTH} characters"
                    ),
                    path=skill.relative_path,
                    line=frontmatter_key_line(skill, "name"),
                    skill=skill.name,
                    recommendation=f"Use `{sanitize_output_name(name)[:SKILL_NAME_MAX_LENGTH]}`.",
                )
            )
        return findings


class DescriptionLengthCheck(Check):
    """Descriptions must be long enough to match on and short enough to index."""

    rule_id = FM_DESCRIPTION_LENGTH
    default_severity = "warning"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        minimum = context.config.min_description_chars
        maximum = context.config.max_description_chars
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            if skill.description is None:
                continue
            length = len(skill.description)
            if length < minimum:
                message = f"description is {length} characters, shorter than {minimum}"
                recommendation = "Say what the skill covers and which tasks should trigger it."
            elif length > maximum:
                message = f"description is {length} characters, longer than {maximum}"
                recommendation = "Move detail into the body and keep the description to trigger text."
            else:
                continue
            findings.append(
                FindingCandidate(
                    rule_id=self.rule_id,
                    message=message,
                    path=skill.relative_path,
                    line=frontmatter_key_line(skill, "description"),
                    skill=skill.name,
                    recommendation=recommendation,
                )
            )
        return findings


class UnknownKeyCheck(Check):
    """Flag frontmatter keys outside the configured vocabulary."""

    rule_id = FM_UNKNOWN_KEY
    default_severity = "info"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        allowed = set(context.config.allowed_frontmatter_keys)
        findings: list[FindingCandidate] = []
        for skill in context.catalog.skills:
            for key in skill.frontmatter or {}:
                if str(key) in allowed:
                    continue
                findings.append(
                    FindingCandidate(
                        rule_id=self.rule_id,
                        message=f"unknown frontmatter key `{key}`",
                        path=skill.relative_path,
                        line=frontmatter_key_line(skill, str(key)),
                        skill=skill.name,
                        recommendation="Remove the key or add it to `allowed_frontmatter_keys`.",
                    )
                )
        return findings


class NameDuplicateCheck(Check):
    """Every declared `name` must be unique across the repository."""

    rule_id = NAME_DUPLICATE
    default_severity = "error"

    def run(self, context: LintContext) -> list[FindingCandidate]:
        skills_by_name: dict[str, list[Skill]] = defaultdict(list)
        for skill in context.catalog.skills:
            if skill.declared_name:
                skills_by_name[sanitize_output_name(skill.declared_name)].append(skill)

        findings: list[FindingCandidate] = []
        for name, skills in sorted(skills_by_name.items()):
            if len(skills) < 2:
                continue
            paths = [skill.relative_path for skill in skills]
            for skill in skills:
                others = ", ".join(path for path in paths if path != skill.relative_path)
                findings.append(
                    FindingCandidate(
                        rule_id=self.rule_id,
                        message=f"skill name '{name}' is also declared by {others}",
                        path=skill.relative_path,
                        line=frontmatter_key_line(skill, "name"),
                        skill=skill.name,
                        recommendation="Give each skill a unique name so hosts can resolve it unambiguously.",
                    )
                )
        return findings


FRONTMATTER_CHECK_CLASSES: tuple[type[Check], ...] = (
    ParseErrorCheck,
    FrontmatterMissingCheck,
    NameMissingCheck,
    DescriptionMissingCheck,
    NameFolderMismatchCheck,
    NameFormatCheck,
    DescriptionLengthCheck,
    UnknownKeyCheck,
    NameDuplicateCheck,
)
