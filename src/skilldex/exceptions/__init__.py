"""Shared exception hierarchy for Skilldex."""

from __future__ import annotations

from .base import SkilldexError
from .catalog import IndexWriteError, SkillNotFoundError
from .config import ConfigError
from .parsing import IndexParseError, SkillParseError

__all__ = [
    "ConfigError",
    "IndexParseError",
    "IndexWriteError",
    "SkillNotFoundError",
    "SkillParseError",
    "SkilldexError",
]
