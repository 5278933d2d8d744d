"""Configuration loading and validation for Skilldex.

This package facade re-exports the public names so callers can use
``from skilldex.config import ...``.
"""

from __future__ import annotations

from skilldex.config.loader import load_config, resolve_config_path
from skilldex.config.model import SkilldexConfig
from skilldex.config.validator import validate_config_file

__all__ = [
    "SkilldexConfig",
    "load_config",
    "resolve_config_path",
    "validate_config_file",
]
