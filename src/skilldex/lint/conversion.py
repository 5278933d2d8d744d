"""Candidate-to-finding conversion and ordering."""

from __future__ import annotations

import hashlib
from collections import Counter

from skilldex.constants.lint import FINDING_ID_LENGTH, SEVERITY_RANK
from skilldex.model import Finding, FindingCandidate
from skilldex.types import Severity


def candidate_to_finding(candidate: FindingCandidate, severity: Severity) -> Finding:
    """Convert a check candidate into a finding with a stable id."""
    identity = "|".join(
        [
            candidate.rule_id,
            candidate.path,
            str(candidate.line),
            candidate.skill or "",
            candidate.message,
        ]
    )
    finding_id = hashlib.sha256(identity.encode("utf-8")).hexdigest()[:FINDING_ID_LENGTH]
    return Finding(
        id=finding_id,
        rule_id=candidate.rule_id,
        severity=severity,
        message=candidate.message,
        path=candidate.path,
        line=candidate.line,
        skill=candidate.skill,
        recommendation=candidate.recommendation,
    )


def sort_findings(findings: list[Finding]) -> list[Finding]:
    """Order findings by severity (worst first), then location and rule."""
    return sorted(
        findings,
        key=lambda f: (-SEVERITY_RANK[f.severity], f.path, f.line or 0, f.rule_id, f.id),
    )


def severity_counts(findings: list[Finding]) -> dict[Severity, int]:
    """Count findings per severity, always reporting all three levels."""
    counts: dict[Severity, int] = {"error": 0, "warning": 0, "info": 0}
    for finding in findings:
        counts[finding.severity] += 1
    return counts


def rule_counts(findings: list[Finding]) -> dict[str, int]:
    """Count findings per rule id, sorted by rule id."""
    counter = Counter(finding.rule_id for finding in findings)
    return dict(sorted(counter.items()))
