"""Tests for extracting skill entries from index files such as CLAUDE.md."""

from __future__ import annotations

from pathlib import Path

import pytest

from skilldex.exceptions import IndexParseError
from skilldex.parsers import parse_index_markdown_file, parse_index_markdown_text


def _names(text: str, heading: str = "Skills") -> list[str]:
    document = parse_index_markdown_text(text, Path("CLAUDE.md"), heading=heading)
    return [entry.name for entry in document.entries]


def test_reads_entries_under_skills_heading(basic_repo_root: Path) -> None:
    document = parse_index_markdown_file(basic_repo_root / "CLAUDE.md", heading="Skills")

    assert document.has_markers is False
    assert [(entry.name, entry.line) for entry in document.entries] == [
        ("commit-helper", 7),
        ("pdf-tools", 8),
    ]
    assert document.entries[1].snippet.startswith("- **pdf-tools**")


def test_marker_block_takes_precedence_over_heading() -> None:
    text = (
        "## Skills\n"
        "- **outside**: not in the generated block\n"
        "<!-- skilldex:index:start -->\n"
        "- **inside**: generated\n"
        "<!-- skilldex:index:end -->\n"
    )

    document = parse_index_markdown_text(text, Path("CLAUDE.md"), heading="Skills")

    assert document.has_markers is True
    assert [entry.name for entry in document.entries] == ["inside"]


def test_heading_section_ends_at_same_level_heading() -> None:
    text = (
        "# Notes\n"
        "- general: not a skill\n"
        "## Available skills\n"
        "- alpha: first\n"
        "### Details\n"
        "- beta: nested subsection still counts\n"
        "## Other\n"
        "- gamma: outside\n"
    )

    assert _names(text) == ["alpha", "beta"]


def test_whole_file_used_without_heading_or_markers() -> None:
    assert _names("- alpha: first\n- beta: second\n", heading="Catalog") == ["alpha", "beta"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        pytest.param("- **pdf-tools**: Extract text", "pdf-tools", id="bold-colon"),
        pytest.param("* `pdf-tools` - Extract text", "pdf-tools", id="backtick-dash"),
        pytest.param("- [pdf-tools](skills/pdf-tools/SKILL.md) — Extract", "pdf-tools", id="link-emdash"),
        pytest.param("1. pdf-tools (PDF handling)", "pdf-tools", id="numbered-paren"),
        pytest.param("- PDF_Tools", "pdf_tools", id="bare-name-sanitized"),
    ],
)
def test_entry_formats(line: str, expected: str) -> None:
    assert _names(f"## Skills\n{line}\n") == [expected]


def test_prose_bullets_are_not_entries() -> None:
    assert _names("## Skills\n- Use these skills when asked.\n") == []


def test_code_blocks_are_skipped() -> None:
    text = "## Skills\n```\n- fake: inside fence\n```\n- real: listed\n"

    assert _names(text) == ["real"]


def test_fence_closes_only_on_matching_character() -> None:
    text = "# Skills\n```\n~~~\n- **ghost**: in code\n```\n- **real**: x\n"

    assert _names(text) == ["real"]


def test_heading_inside_mixed_fence_does_not_end_section() -> None:
    text = "## Skills\n- alpha: a\n~~~\n```\n## Other\n~~~\n- beta: b\n## Next\n- gamma: c\n"

    assert _names(text) == ["alpha", "beta"]


def test_names_are_distinct_in_first_seen_order() -> None:
    document = parse_index_markdown_text(
        "- beta: b\n- alpha: a\n- beta: again\n", Path("CLAUDE.md"), heading="Skills"
    )

    assert document.names() == ("beta", "alpha")
    assert len(document.entries) == 3


def test_unreadable_index_raises(tmp_path: Path) -> None:
    path = tmp_path / "CLAUDE.md"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(IndexParseError, match="not valid UTF-8"):
        parse_index_markdown_file(path, heading="Skills")
