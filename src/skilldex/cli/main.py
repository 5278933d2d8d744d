"""CLI entrypoint for Skilldex."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skilldex import __version__
from skilldex.cli.handlers import (
    handle_index,
    handle_lint,
    handle_list,
    handle_match,
    handle_show,
    handle_validate_config,
)
from skilldex.constants.branding import CLI_DESCRIPTION
from skilldex.constants.config import VALID_SEVERITIES
from skilldex.constants.lint import DEFAULT_FAIL_ON
from skilldex.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from skilldex.exceptions import ConfigError, SkilldexError
from skilldex.exceptions.validation import format_errors
from skilldex.validation import preflight_validate

HANDLERS = {
    "lint": handle_lint,
    "list": handle_list,
    "show": handle_show,
    "match": handle_match,
    "index": handle_index,
}


def _add_workspace_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, required=True, help="Repository root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format: text or json (default: {DEFAULT_OUTPUT_FORMAT})",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skilldex",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lint = subparsers.add_parser("lint", help="Check skills and index files for problems")
    _add_workspace_arguments(lint)
    lint.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Write lint-report.json and catalog.json here (no files written if omitted)",
    )
    lint.add_argument(
        "--fail-on",
        choices=sorted(VALID_SEVERITIES),
        default=DEFAULT_FAIL_ON,
        help=f"Exit 1 when any finding is at or above this severity (default: {DEFAULT_FAIL_ON})",
    )
    lint.add_argument("--max-file-mb", type=int, help="Skip SKILL.md files larger than this size")
    _add_format_argument(lint)
    lint.add_argument("--no-color", action="store_true", help="Disable colored output")
    lint.add_argument("-v", "--verbose", action="store_true", help="Show warnings and debug logging")

    list_cmd = subparsers.add_parser("list", help="List discovered skills")
    _add_workspace_arguments(list_cmd)
    _add_format_argument(list_cmd)

    show = subparsers.add_parser("show", help="Print the context loaded for one skill")
    _add_workspace_arguments(show)
    show.add_argument("name", help="Skill name (folder name or declared frontmatter name)")
    show.add_argument("--frontmatter", action="store_true", help="Include the frontmatter block")

    match = subparsers.add_parser("match", help="Rank skills against a task description")
    _add_workspace_arguments(match)
    match.add_argument("task", help="Free-text task description")
    match.add_argument("-n", "--limit", type=int, default=None, help="Maximum number of matches")
    match.add_argument("--min-score", type=float, default=None, help="Minimum score between 0 and 1")
    _add_format_argument(match)

    index = subparsers.add_parser("index", help="Generate or check the skills index block")
    _add_workspace_arguments(index)
    index_mode = index.add_mutually_exclusive_group()
    index_mode.add_argument("--write", type=Path, default=None, help="Write the index block into this file")
    index_mode.add_argument("--check", action="store_true", help="Exit 1 when an index file is out of sync")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without linting")
    _add_workspace_arguments(validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    handler = HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    if getattr(args, "max_file_mb", None) is not None and args.max_file_mb < 1:
        print("Configuration error: --max-file-mb must be >= 1", file=sys.stderr)
        return 2
    if getattr(args, "limit", None) is not None and args.limit < 1:
        print("Configuration error: --limit must be >= 1", file=sys.stderr)
        return 2
    if getattr(args, "min_score", None) is not None and not 0 <= args.min_score <= 1:
        print("Configuration error: --min-score must be between 0 and 1", file=sys.stderr)
        return 2

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkilldexError as exc:
        print(f"Skilldex error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
