"""Reporting package for Skilldex outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["StdoutReporter", "write_catalog", "write_lint_report"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name in {"write_catalog", "write_lint_report"}:
        from .writer import write_catalog, write_lint_report

        exports = {
            "write_catalog": write_catalog,
            "write_lint_report": write_lint_report,
        }
        return exports[name]
    if name == "StdoutReporter":
        from .stdout import StdoutReporter

        return StdoutReporter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
