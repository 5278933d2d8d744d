"""Constants for parsing behavior."""

from __future__ import annotations

import re
from re import Pattern

SNIPPET_MAX_LENGTH: int = 200
FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

FENCED_CODE_BLOCK_PATTERN: Pattern[str] = re.compile(r"^(`{3,}|~{3,})")

MARKDOWN_LINK_PATTERN: Pattern[str] = re.compile(r"!?\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
INLINE_CODE_PATTERN: Pattern[str] = re.compile(r"`([^`\n]+)`")
# Backticked tokens count as file references only when they name a file inside a subdirectory.
FILE_REFERENCE_PATTERN: Pattern[str] = re.compile(r"^(?:\./)?(?:[A-Za-z0-9_.-]+/)+[A-Za-z0-9_-][A-Za-z0-9_.-]*\.[A-Za-z0-9]{1,8}$")
URL_SCHEME_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

INDEX_MARKER_START: str = "<!-- skilldex:index:start -->"
INDEX_MARKER_END: str = "<!-- skilldex:index:end -->"
HEADING_PATTERN: Pattern[str] = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
INDEX_ENTRY_PATTERN: Pattern[str] = re.compile(
    r"^\s*(?:[-*+]|\d+[.)])\s+"
    r"(?:\*\*|__)?`?\[?"
    r"([A-Za-z0-9][A-Za-z0-9._-]*)"
    r"\]?(?:\([^)]*\))?`?(?:\*\*|__)?"
    r"\s*(?:$|[:(—–]|-\s)"
)
