"""Typed configuration structures for Skilldex settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChecksConfig:
    """Lint check enablement toggles."""

    enabled: tuple[str, ...] = ()
    disabled: tuple[str, ...] = ()
