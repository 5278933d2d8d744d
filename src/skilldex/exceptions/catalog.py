"""Catalog lookup and index write exceptions."""

from __future__ import annotations

from skilldex.exceptions.base import SkilldexError


class SkillNotFoundError(SkilldexError, LookupError):
    """Raised when a skill name does not resolve to a discovered skill."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        message = f"Unknown skill: {name!r}"
        if available:
            message = f"{message} (available: {', '.join(available)})"
        super().__init__(message)


class IndexWriteError(SkilldexError, OSError):
    """Raised when the generated index block cannot be written to disk."""
