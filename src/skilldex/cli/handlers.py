"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from skilldex.catalog import (
    compare_index,
    discover_index_files,
    load_catalog,
    match_skills,
    render_index_block,
    render_skill_context,
    update_index_file,
)
from skilldex.config import SkilldexConfig, load_config
from skilldex.exceptions import IndexParseError, SkillNotFoundError
from skilldex.exceptions.validation import format_errors
from skilldex.lint.runner import lint_workspace
from skilldex.model import Catalog
from skilldex.parsers import parse_index_markdown_file
from skilldex.reporting.stdout import StdoutReporter, render_catalog_table, render_matches
from skilldex.reporting.writer import build_catalog_payload, build_lint_payload, build_matches_payload
from skilldex.types import JsonObject
from skilldex.utils import relative_posix
from skilldex.validation import preflight_validate


def _print_json(payload: JsonObject) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def handle_lint(args: argparse.Namespace) -> int:
    """Lint the workspace and return 1 when a finding reaches ``--fail-on``."""
    result = lint_workspace(
        root=args.root,
        config_path=args.config,
        out=args.output_dir,
        max_file_mb=args.max_file_mb,
    )

    if args.format == "json":
        _print_json(build_lint_payload(result))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(result, color=use_color, verbose=args.verbose, fail_on=args.fail_on)
        print(reporter.render())

    return 1 if result.fails(args.fail_on) else 0


def handle_list(args: argparse.Namespace) -> int:
    """Print every discovered skill."""
    root = args.root.resolve()
    catalog = load_catalog(root, load_config(root, args.config))
    if args.format == "json":
        _print_json(build_catalog_payload(catalog))
    else:
        print(render_catalog_table(catalog))
    return 0


def handle_show(args: argparse.Namespace) -> int:
    """Print the context a host agent would load for one skill."""
    root = args.root.resolve()
    catalog = load_catalog(root, load_config(root, args.config))
    try:
        skill = catalog.get(args.name)
    except SkillNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(render_skill_context(skill, include_frontmatter=args.frontmatter))
    return 0


def handle_match(args: argparse.Namespace) -> int:
    """Rank skills against a task description."""
    root = args.root.resolve()
    config = load_config(root, args.config)
    catalog = load_catalog(root, config)
    matches = match_skills(
        catalog,
        args.task,
        limit=args.limit if args.limit is not None else config.match_limit,
        min_score=args.min_score if args.min_score is not None else config.match_min_score,
    )
    if args.format == "json":
        _print_json(build_matches_payload(args.task, matches))
    else:
        print(render_matches(args.task, matches, color=sys.stdout.isatty()))
    return 0


def handle_index(args: argparse.Namespace) -> int:
    """Print, write, or check the generated skills index."""
    root = args.root.resolve()
    config = load_config(root, args.config)
    catalog = load_catalog(root, config)

    if args.check:
        return _check_indexes(root, catalog, config)

    if args.write is None:
        print(render_index_block(catalog))
        return 0

    target = args.write if args.write.is_absolute() else root / args.write
    changed = update_index_file(target, catalog)
    status = "Updated" if changed else "Unchanged"
    print(f"{status}: {target}")
    return 0


def _check_indexes(root: Path, catalog: Catalog, config: SkilldexConfig) -> int:
    index_paths = discover_index_files(root, config.index_files)
    if not index_paths:
        print("No index files found.", file=sys.stderr)
        return 1 if config.index_required else 0

    out_of_sync = 0
    for path in index_paths:
        relative = relative_posix(path, root)
        try:
            document = parse_index_markdown_file(path, heading=config.index_heading)
        except IndexParseError as exc:
            print(f"{relative}: {exc}", file=sys.stderr)
            out_of_sync += 1
            continue
        diff = compare_index(document, catalog)
        if diff.in_sync:
            print(f"{relative}: in sync")
            continue
        out_of_sync += 1
        print(f"{relative}: out of sync")
        for name in diff.missing:
            print(f"  missing  {name}")
        for entry in diff.stale:
            print(f"  stale    {entry.name} (line {entry.line})")
        for entry in diff.duplicates:
            print(f"  repeated {entry.name} (line {entry.line})")
    return 1 if out_of_sync else 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run root and config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
