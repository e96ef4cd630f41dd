from __future__ import annotations

from adapters.scope_matcher import PatternScopeMatcher
from adapters.statistics import build_statistics, export_with_trailer, format_statistics_trailer
from adapters.text_area_surface import location_to_offset, offset_to_location
from core.config import LimitConfig


def test_scope_matcher_uses_pattern() -> None:
    matcher = PatternScopeMatcher(r"\.(txt|md)$")
    assert matcher.is_in_scope("/home/me/drafts/story.txt")
    assert matcher.is_in_scope("NOTES.MD")
    assert not matcher.is_in_scope("script.py")


def test_location_offset_conversion() -> None:
    lines = ["ab", "", "cde"]
    assert location_to_offset(lines, (0, 0)) == 0
    assert location_to_offset(lines, (1, 0)) == 3
    assert location_to_offset(lines, (2, 2)) == 6

    assert offset_to_location(lines, 2) == (0, 2)
    assert offset_to_location(lines, 3) == (1, 0)
    assert offset_to_location(lines, 6) == (2, 2)


def test_offset_conversion_clamps() -> None:
    lines = ["ab", "cd"]
    assert offset_to_location(lines, -4) == (0, 0)
    assert offset_to_location(lines, 99) == (1, 2)
    assert offset_to_location([], 3) == (0, 0)


def test_offset_conversion_with_crlf() -> None:
    lines = ["ab", "cd"]
    assert location_to_offset(lines, (1, 1), newline_length=2) == 5
    assert offset_to_location(lines, 5, newline_length=2) == (1, 1)
    # Inside the two-character newline lands at the end of the line.
    assert offset_to_location(lines, 3, newline_length=2) == (0, 2)


def test_statistics() -> None:
    config = LimitConfig(max_chars=20, max_words=5)
    stats = build_statistics("one two three", config)
    assert stats["characters"] == 13
    assert stats["words"] == 3
    assert stats["remaining"] == 7
    assert stats["percent"] == 65.0

    trailer = format_statistics_trailer("one two three", config)
    assert "Characters: 13/20" in trailer
    assert "Words:      3/5" in trailer


def test_export_appends_trailer() -> None:
    exported = export_with_trailer("Body text.\n\n", LimitConfig())
    assert exported.startswith("Body text.\n\n──")
    assert exported.endswith("remaining\n")
