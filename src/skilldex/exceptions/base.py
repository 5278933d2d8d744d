"""Root exception type for Skilldex."""

from __future__ import annotations


class SkilldexError(Exception):
    """Base class for all Skilldex errors."""
