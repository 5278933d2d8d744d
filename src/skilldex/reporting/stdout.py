"""Human-readable stdout rendering for lint results, catalogs, and matches."""

from __future__ import annotations

from skilldex.constants.branding import ASCII_LOGO_LINES, LINT_SUMMARY_TITLE
from skilldex.constants.lint import SEVERITY_RANK
from skilldex.constants.reporting import (
    ANSI_GREEN,
    ANSI_RESET,
    DESCRIPTION_PREVIEW_LENGTH,
    SEVERITY_COLORS,
    TOP_RULES_LIMIT,
)
from skilldex.model import Catalog, LintResult, SkillMatch
from skilldex.types import Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, color) if color else severity


def _preview(text: str | None, width: int = DESCRIPTION_PREVIEW_LENGTH) -> str:
    if not text:
        return "-"
    flat = " ".join(text.split())
    if len(flat) <= width:
        return flat
    return flat[: width - 3].rstrip() + "..."


class StdoutReporter:
    """Formats lint results as human-readable stdout output."""

    def __init__(
        self,
        result: LintResult,
        *,
        color: bool = True,
        verbose: bool = False,
        min_severity: Severity | None = None,
        fail_on: Severity | None = None,
    ) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose
        self._fail_on = fail_on
        threshold = SEVERITY_RANK[min_severity] if min_severity else 0
        self._shown_findings = [f for f in result.findings if SEVERITY_RANK[f.severity] >= threshold]

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_findings_table()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {LINT_SUMMARY_TITLE}",
            sep,
            "",
            f"  Skills      {r.skills_checked} checked",
            f"  Indexes     {', '.join(r.index_files) if r.index_files else 'none'}",
        ]

        shown = len(self._shown_findings)
        total = len(r.findings)
        if shown != total:
            lines.append(f"  Findings    {shown} shown / {total} total")
        else:
            lines.append(f"  Findings    {total}")
        lines.append(f"  Severities  {self._format_severity_breakdown(r.counts_by_severity)}")
        lines.append(f"  Top rules   {self._format_top_rules(r.counts_by_rule)}")
        if r.rules_disabled:
            lines.append(f"  Rules off   {len(r.rules_disabled)} ({', '.join(r.rules_disabled)})")

        verdict = self._render_verdict()
        if verdict is not None:
            lines.append(f"  Verdict     {verdict}")

        lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        if self._verbose:
            for warning in r.warnings:
                lines.append(f"  Warning     {warning}")
        lines.append("")
        return "\n".join(lines)

    def _render_findings_table(self) -> str:
        findings = self._shown_findings
        if not findings:
            return ""

        w_sev = 7
        w_rule = 23
        w_loc = max(8, min(40, max(len(self._location(f.path, f.line)) for f in findings)))

        def _hline(left: str, mid: str) -> str:
            return f"  {left}{'─' * (w_sev + 2)}{mid}{'─' * (w_rule + 2)}{mid}{'─' * (w_loc + 2)}{mid}{'─' * 9}"

        lines = [
            "  Findings",
            _hline("┌", "┬"),
            f"  │ {'Level':<{w_sev}} │ {'Rule':<{w_rule}} │ {'Location':<{w_loc}} │ Message",
            _hline("├", "┼"),
        ]
        for finding in findings:
            severity = _color_severity(finding.severity) if self._color else finding.severity
            pad = " " * (w_sev - len(finding.severity))
            location = self._location(finding.path, finding.line)[:w_loc]
            lines.append(
                f"  │ {severity}{pad} │ {finding.rule_id:<{w_rule}} │ {location:<{w_loc}} │ {finding.message}"
            )
        lines.append(_hline("└", "┴"))
        return "\n".join(lines)

    @staticmethod
    def _location(path: str, line: int | None) -> str:
        return f"{path}:{line}" if line is not None else path

    def _format_severity_breakdown(self, counts: dict[Severity, int]) -> str:
        """Render ``error/warning/info`` finding counts in fixed order."""
        parts: list[str] = []
        for severity in ("error", "warning", "info"):
            label = _color_severity(severity) if self._color else severity
            parts.append(f"{counts.get(severity, 0)} {label}")
        return " · ".join(parts)

    @staticmethod
    def _format_top_rules(counts: dict[str, int], limit: int = TOP_RULES_LIMIT) -> str:
        """Render top-N rules sorted by descending count, then rule id."""
        if not counts:
            return "none"
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        head = ranked[:limit]
        parts = [f"{rule_id} {count}" for rule_id, count in head]
        remaining = len(ranked) - len(head)
        if remaining > 0:
            parts.append(f"(+{remaining} more)")
        return " · ".join(parts)

    def _render_verdict(self) -> str | None:
        if self._fail_on is None:
            return None
        threshold = SEVERITY_RANK[self._fail_on]
        matched = sum(1 for f in self._result.findings if SEVERITY_RANK[f.severity] >= threshold)
        if matched:
            return f"FAIL ({matched} finding(s) >= {self._fail_on})"
        return f"PASS (no findings >= {self._fail_on})"


def render_catalog_table(catalog: Catalog) -> str:
    """Render one line per skill: identity, auxiliary file count, description preview."""
    if not catalog.skills and not catalog.failures:
        return "No skills found."

    width = max(len(name) for name in (*catalog.names(), *(f.name for f in catalog.failures)))
    lines = [f"{'Skill':<{width}}  Files  Description"]
    for skill in sorted(catalog.skills, key=lambda s: (s.name, s.relative_path)):
        lines.append(f"{skill.name:<{width}}  {len(skill.auxiliary_files):>5}  {_preview(skill.description)}")
    for failure in catalog.failures:
        lines.append(f"{failure.name:<{width}}  {'-':>5}  (unparseable: {failure.relative_path})")
    lines.append("")
    lines.append(f"{len(catalog.skills)} skill(s), {len(catalog.failures)} unparseable")
    return "\n".join(lines)


def render_matches(task: str, matches: list[SkillMatch], *, color: bool = False) -> str:
    """Render ranked task matches."""
    if not matches:
        return f"No skills match: {task}"
    width = max(len(match.skill.name) for match in matches)
    lines = [f"Skills matching: {task}", ""]
    for match in matches:
        score = f"{match.score:.2f}"
        if color:
            score = _colorize(score, ANSI_GREEN)
        lines.append(f"  {score}  {match.skill.name:<{width}}  {_preview(match.skill.description)}")
        lines.append(f"        {'':<{width}}  matched: {', '.join(match.matched_terms)}")
    return "\n".join(lines)
