"""Markdown parsers for skill documents and index files."""

from __future__ import annotations

from .index_markdown import parse_index_markdown_file, parse_index_markdown_text
from .skill_markdown import parse_skill_markdown_file, parse_skill_markdown_text

__all__ = [
    "parse_index_markdown_file",
    "parse_index_markdown_text",
    "parse_skill_markdown_file",
    "parse_skill_markdown_text",
]
