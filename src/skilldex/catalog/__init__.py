"""Skill discovery, loading, matching, and index generation."""

from __future__ import annotations

from .discovery import (
    derive_skill_name,
    discover_index_files,
    discover_skill_files,
    list_auxiliary_files,
    sanitize_skill_name,
)
from .index import compare_index, render_index_block, splice_index_block, update_index_file
from .loader import load_catalog, load_skill, render_skill_context
from .matching import match_skills, tokenize

__all__ = [
    "compare_index",
    "derive_skill_name",
    "discover_index_files",
    "discover_skill_files",
    "list_auxiliary_files",
    "load_catalog",
    "load_skill",
    "match_skills",
    "render_index_block",
    "render_skill_context",
    "sanitize_skill_name",
    "splice_index_block",
    "tokenize",
    "update_index_file",
]
