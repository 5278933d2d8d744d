"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skilldex.constants.parsing import (
    FENCED_CODE_BLOCK_PATTERN,
    FILE_REFERENCE_PATTERN,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    INLINE_CODE_PATTERN,
    MARKDOWN_LINK_PATTERN,
    SNIPPET_MAX_LENGTH,
    URL_SCHEME_PATTERN,
)
from skilldex.exceptions import SkillParseError
from skilldex.model import DocumentLine, DocumentReference, SkillDocument


def parse_skill_markdown_file(path: Path) -> SkillDocument:
    """Parse a SKILL.md file and extract frontmatter plus line metadata."""
    raw_text = read_markdown_text(path, SkillParseError)
    return parse_skill_markdown_text(raw_text, path)


def parse_skill_markdown_text(raw_text: str, path: Path) -> SkillDocument:
    """Parse SKILL.md content already loaded from *path*."""
    normalized = raw_text.lstrip("\ufeff")
    lines = normalized.splitlines()

    frontmatter: dict[str, Any] | None = None
    frontmatter_present = False
    body_lines = lines

    if lines and lines[0].strip() == FRONTMATTER_DELIMITER:
        frontmatter_end = _find_frontmatter_end(lines)
        if frontmatter_end is None:
            raise SkillParseError(f"Unterminated frontmatter block in {path}")

        frontmatter_present = True
        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        try:
            frontmatter_payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
        except yaml.YAMLError as exc:
            raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

        if frontmatter_payload is None:
            frontmatter = None
        elif isinstance(frontmatter_payload, dict):
            frontmatter = frontmatter_payload
        else:
            raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping")

        body_lines = lines[frontmatter_end + 1 :]

    body_start = len(lines) - len(body_lines) + 1
    document_lines: list[DocumentLine] = []
    references: list[DocumentReference] = []
    seen_targets: set[str] = set()

    active_fence_char: str | None = None
    for offset, line in enumerate(body_lines):
        index = body_start + offset
        stripped = line.strip()
        fence_char = extract_fence_char(stripped)
        in_code_block = active_fence_char is not None
        if fence_char is not None:
            in_code_block = True
            if active_fence_char is None:
                active_fence_char = fence_char
            elif fence_char == active_fence_char:
                active_fence_char = None
        if not stripped:
            continue
        document_lines.append(DocumentLine(line=index, value=stripped, in_code_block=in_code_block))
        if in_code_block:
            continue
        for target in _extract_references(stripped):
            if target in seen_targets:
                continue
            seen_targets.add(target)
            references.append(DocumentReference(target=target, line=index, snippet=stripped[:SNIPPET_MAX_LENGTH]))

    return SkillDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        frontmatter_present=frontmatter_present,
        body="\n".join(body_lines).strip(),
        body_start_line=body_start,
        lines=tuple(document_lines),
        references=tuple(references),
    )


def read_markdown_text(path: Path, error_type: type[Exception]) -> str:
    """Read a Markdown file as UTF-8, raising *error_type* on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise error_type(f"{path} is not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise error_type(f"Cannot read {path}: {exc}") from exc


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def extract_fence_char(line: str) -> str | None:
    """Return the fence character when *line* opens or closes a fenced block."""
    match = FENCED_CODE_BLOCK_PATTERN.match(line)
    if not match:
        return None
    return match.group(1)[0]


def _extract_references(line: str) -> list[str]:
    """Return relative file targets from Markdown links and backticked paths."""
    targets: list[str] = []
    for match in MARKDOWN_LINK_PATTERN.finditer(line):
        target = _normalize_target(match.group(1))
        if target is not None:
            targets.append(target)
    for match in INLINE_CODE_PATTERN.finditer(line):
        candidate = match.group(1).strip()
        if FILE_REFERENCE_PATTERN.match(candidate):
            target = _normalize_target(candidate)
            if target is not None:
                targets.append(target)
    return targets


def _normalize_target(raw_target: str) -> str | None:
    target = raw_target.strip()
    if not target or target.startswith(("#", "/", "~")) or URL_SCHEME_PATTERN.match(target):
        return None
    target = target.split("#", 1)[0].split("?", 1)[0]
    if not target or any(char in target for char in "*{}<> \t"):
        return None
    if target.startswith("./"):
        target = target[2:]
    return target.rstrip("/") or None
