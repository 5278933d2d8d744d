"""Parsing-related exceptions."""

from __future__ import annotations

from skilldex.exceptions.base import SkilldexError


class SkillParseError(SkilldexError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""


class IndexParseError(SkilldexError, ValueError):
    """Raised when a skill index file cannot be read."""
