"""Lint checks for skill documents and index files."""

from __future__ import annotations

from typing import Any

from .base import Check, LintContext
from .registry import CHECK_CLASSES, build_checks, select_rule_ids

__all__ = ["CHECK_CLASSES", "Check", "LintContext", "build_checks", "lint_workspace", "select_rule_ids"]


def __getattr__(name: str) -> Any:
    """Lazily expose the lint runner to avoid import cycles at package import time."""
    if name == "lint_workspace":
        from .runner import lint_workspace

        return lint_workspace
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
