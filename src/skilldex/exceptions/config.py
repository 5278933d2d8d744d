"""Configuration-related exceptions."""

from __future__ import annotations

from skilldex.exceptions.base import SkilldexError


class ConfigError(SkilldexError, ValueError):
    """Raised when configuration or command arguments are invalid."""
