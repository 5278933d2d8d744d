"""Shared utility helpers."""

from __future__ import annotations

from .naming import relative_posix, sanitize_output_name

__all__ = ["relative_posix", "sanitize_output_name"]
