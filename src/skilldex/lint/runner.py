"""End-to-end lint orchestration for a skills workspace."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from skilldex.catalog import discover_index_files, load_catalog
from skilldex.config import SkilldexConfig, load_config
from skilldex.exceptions import ConfigError, IndexParseError
from skilldex.lint.base import LintContext
from skilldex.lint.conversion import candidate_to_finding, rule_counts, severity_counts, sort_findings
from skilldex.lint.registry import CHECK_CLASSES, build_checks, select_rule_ids
from skilldex.model import Catalog, Finding, IndexDocument, LintResult
from skilldex.parsers import parse_index_markdown_file
from skilldex.utils import relative_posix

logger = logging.getLogger(__name__)


def load_index_documents(
    root: Path,
    config: SkilldexConfig,
    warnings: list[str],
) -> tuple[IndexDocument, ...]:
    """Parse every configured index file, turning read failures into warnings."""
    documents: list[IndexDocument] = []
    for path in discover_index_files(root, config.index_files):
        try:
            documents.append(parse_index_markdown_file(path, heading=config.index_heading))
        except IndexParseError as exc:
            warning = f"Skipping index {relative_posix(path, root)}: {exc}"
            warnings.append(warning)
            logger.warning(warning)
    return tuple(documents)


def run_checks(context: LintContext, rule_ids: tuple[str, ...]) -> list[Finding]:
    """Run the selected checks and resolve each candidate's severity."""
    defaults = {check_cls.rule_id: check_cls.default_severity for check_cls in CHECK_CLASSES}
    overrides = context.config.severity_overrides
    findings: list[Finding] = []
    seen_ids: set[str] = set()
    for check in build_checks(rule_ids):
        severity = overrides.get(check.rule_id, defaults[check.rule_id])
        for candidate in check.run(context):
            finding = candidate_to_finding(candidate, severity)
            if finding.id in seen_ids:
                continue
            seen_ids.add(finding.id)
            findings.append(finding)
    return sort_findings(findings)


def lint_workspace(
    *,
    root: Path,
    config_path: Path | None = None,
    out: Path | None = None,
    max_file_mb: int | None = None,
) -> LintResult:
    """Lint every skill and index under *root*, optionally writing JSON reports."""
    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Root does not exist or is not a directory: {root}")
    if out is not None:
        out = out.resolve()
        try:
            out.mkdir(parents=True, exist_ok=True)
            probe = out / ".skilldex_write_probe"
            probe.touch()
            probe.unlink()
        except OSError as exc:
            raise ConfigError(f"Output directory is not writable: {out} ({exc})") from exc

    config = load_config(root, config_path)
    catalog = load_catalog(root, config, max_file_mb=max_file_mb)
    warnings = list(catalog.warnings)
    index_documents = load_index_documents(root, config, warnings)
    logger.info(
        "Linting %d skills and %d index files under %s",
        len(catalog.skills) + len(catalog.failures),
        len(index_documents),
        root,
    )

    rules_executed, rules_disabled = select_rule_ids(config)
    context = LintContext(catalog=catalog, config=config, index_documents=index_documents)
    findings = run_checks(context, rules_executed)

    result = LintResult(
        root=root,
        skills_checked=len(catalog.skills) + len(catalog.failures),
        index_files=tuple(relative_posix(document.file_path, root) for document in index_documents),
        findings=tuple(findings),
        counts_by_severity=severity_counts(findings),
        counts_by_rule=rule_counts(findings),
        rules_executed=rules_executed,
        rules_disabled=rules_disabled,
        warnings=tuple(warnings),
        duration_seconds=time.perf_counter() - started_at,
    )

    if out is not None:
        _write_reports(out, result, catalog)
    return result


def _write_reports(out: Path, result: LintResult, catalog: Catalog) -> None:
    from skilldex.reporting.writer import write_catalog, write_lint_report

    write_lint_report(out, result)
    write_catalog(out, catalog)
