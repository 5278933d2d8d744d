"""Shared type aliases for Skilldex."""

from .common import JsonObject, JsonScalar, JsonValue, Severity
from .config import ChecksConfig

__all__ = [
    "ChecksConfig",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Severity",
]
