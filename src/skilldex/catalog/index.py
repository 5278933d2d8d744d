"""Generate, compare, and rewrite the skills index block in files like CLAUDE.md."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from skilldex.constants.parsing import INDEX_MARKER_END, INDEX_MARKER_START
from skilldex.constants.reporting import INDEX_TEMP_PREFIX, INDEX_TEMP_SUFFIX
from skilldex.exceptions import IndexParseError, IndexWriteError
from skilldex.io import write_text_atomic
from skilldex.model import Catalog, IndexDiff, IndexDocument
from skilldex.parsers.skill_markdown import read_markdown_text

logger = logging.getLogger(__name__)

NEW_INDEX_HEADING: str = "# Skills"


def render_index_block(catalog: Catalog) -> str:
    """Render the marker-delimited skill list, one entry per skill sorted by name."""
    lines = [INDEX_MARKER_START]
    for skill in sorted(catalog.skills, key=lambda skill: (skill.name, skill.relative_path)):
        if skill.description:
            summary = " ".join(skill.description.split())
            lines.append(f"- **{skill.name}**: {summary}")
        else:
            lines.append(f"- **{skill.name}**")
    lines.append(INDEX_MARKER_END)
    return "\n".join(lines)


def compare_index(index: IndexDocument, catalog: Catalog) -> IndexDiff:
    """Compare entries of *index* with the skills present on disk."""
    on_disk = set(catalog.names()) | {failure.name for failure in catalog.failures}
    listed = set(index.names())

    seen: Counter[str] = Counter()
    duplicates = []
    stale = []
    for entry in index.entries:
        seen[entry.name] += 1
        if seen[entry.name] > 1:
            duplicates.append(entry)
        elif entry.name not in on_disk:
            stale.append(entry)

    missing = tuple(sorted(on_disk - listed))
    return IndexDiff(missing=missing, stale=tuple(stale), duplicates=tuple(duplicates))


def splice_index_block(existing: str | None, block: str) -> str:
    """Return *existing* text with its marker block replaced by *block*.

    Text without markers gets the block appended; ``None`` starts a new file.
    A start marker with no matching end marker is replaced through the end
    of the text.
    """
    if existing is None:
        return f"{NEW_INDEX_HEADING}\n\n{block}\n"

    start = existing.find(INDEX_MARKER_START)
    end = existing.find(INDEX_MARKER_END, start + len(INDEX_MARKER_START)) if start != -1 else -1
    if start != -1 and end != -1:
        return existing[:start] + block + existing[end + len(INDEX_MARKER_END) :]
    if start != -1:
        return f"{existing[:start]}{block}\n"

    stripped = existing.rstrip("\n")
    if not stripped:
        return f"{block}\n"
    return f"{stripped}\n\n{block}\n"


def update_index_file(path: Path, catalog: Catalog) -> bool:
    """Write the generated block into *path*; return True when the file changed."""
    existing = read_markdown_text(path, IndexParseError) if path.exists() else None
    updated = splice_index_block(existing, render_index_block(catalog))
    if updated == existing:
        logger.info("Index %s already up to date", path)
        return False
    try:
        write_text_atomic(path=path, content=updated, temp_prefix=INDEX_TEMP_PREFIX, temp_suffix=INDEX_TEMP_SUFFIX)
    except OSError as exc:
        raise IndexWriteError(f"Cannot write index {path}: {exc}") from exc
    logger.info("Wrote %d skill entries to %s", len(catalog.skills), path)
    return True
