"""Parser for hand-maintained skill index files such as CLAUDE.md."""

from __future__ import annotations

import re
from pathlib import Path

from skilldex.constants.parsing import (
    HEADING_PATTERN,
    INDEX_ENTRY_PATTERN,
    INDEX_MARKER_END,
    INDEX_MARKER_START,
    SNIPPET_MAX_LENGTH,
)
from skilldex.exceptions import IndexParseError
from skilldex.model import IndexDocument, IndexEntry
from skilldex.parsers.skill_markdown import extract_fence_char, read_markdown_text
from skilldex.utils import sanitize_output_name


def parse_index_markdown_file(path: Path, *, heading: str) -> IndexDocument:
    """Extract skill entries from an index file.

    Entry scope is chosen in this order:

    1. lines between the ``skilldex:index`` start/end markers,
    2. the section under the first heading that contains *heading* as a word,
    3. the whole file.
    """
    text = read_markdown_text(path, IndexParseError)
    return parse_index_markdown_text(text, path, heading=heading)


def parse_index_markdown_text(text: str, path: Path, *, heading: str) -> IndexDocument:
    """Extract skill entries from index content already loaded from *path*."""
    lines = text.lstrip("\ufeff").splitlines()
    scope = _marker_scope(lines)
    has_markers = scope is not None
    if scope is None:
        scope = _heading_scope(lines, heading)
    if scope is None:
        scope = (0, len(lines))

    start, end = scope
    entries: list[IndexEntry] = []
    active_fence_char: str | None = None
    for index in range(start, end):
        stripped = lines[index].strip()
        active_fence_char, is_code = _advance_fence(active_fence_char, stripped)
        if is_code:
            continue
        match = INDEX_ENTRY_PATTERN.match(lines[index])
        if not match:
            continue
        entries.append(
            IndexEntry(
                name=sanitize_output_name(match.group(1)),
                line=index + 1,
                snippet=stripped[:SNIPPET_MAX_LENGTH],
            )
        )

    return IndexDocument(file_path=path, entries=tuple(entries), has_markers=has_markers)


def _marker_scope(lines: list[str]) -> tuple[int, int] | None:
    start: int | None = None
    for index, line in enumerate(lines):
        stripped = line.strip()
        if stripped == INDEX_MARKER_START and start is None:
            start = index + 1
        elif stripped == INDEX_MARKER_END and start is not None:
            return start, index
    return None


def _heading_scope(lines: list[str], heading: str) -> tuple[int, int] | None:
    wanted = re.compile(rf"\b{re.escape(heading.strip())}\b", re.IGNORECASE)
    start: int | None = None
    level = 0
    active_fence_char: str | None = None
    for index, line in enumerate(lines):
        stripped = line.strip()
        active_fence_char, is_code = _advance_fence(active_fence_char, stripped)
        if is_code:
            continue
        match = HEADING_PATTERN.match(stripped)
        if not match:
            continue
        current_level = len(match.group(1))
        if start is None:
            if wanted.search(match.group(2)):
                start = index + 1
                level = current_level
        elif current_level <= level:
            return start, index
    if start is None:
        return None
    return start, len(lines)


def _advance_fence(active_fence_char: str | None, stripped: str) -> tuple[str | None, bool]:
    """Return the fence state after *stripped* and whether that line is code.

    A fence opened with one character only closes on a fence of the same character.
    """
    fence_char = extract_fence_char(stripped)
    if fence_char is None:
        return active_fence_char, active_fence_char is not None
    if active_fence_char is None:
        return fence_char, True
    if fence_char == active_fence_char:
        return None, True
    return active_fence_char, True
