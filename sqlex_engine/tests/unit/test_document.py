"""Unit tests for sqlex_engine.source -- line offsets and position mapping."""

from __future__ import annotations

import pytest

from sqlex_engine.source.document import (
    SourceDocument,
    build_line_offsets,
    split_lines,
    to_byte_offset,
    to_line_col,
)


class TestBuildLineOffsets:
    @pytest.mark.parametrize("text", ["", "SELECT 1", "a\nb\n", "\n\n\n", "x\r\ny"])
    def test_first_offset_is_zero(self, text):
        assert build_line_offsets(text)[0] == 0

    def test_offsets_follow_each_newline(self):
        assert build_line_offsets("ab\ncd\n\nef") == (0, 3, 6, 7)

    def test_trailing_newline_starts_a_line(self):
        assert build_line_offsets("SELECT 1;\n") == (0, 10)

    def test_strictly_increasing(self):
        offsets = build_line_offsets("a\n\nbb\n\n\nccc")
        assert all(b > a for a, b in zip(offsets, offsets[1:]))


class TestToByteOffset:
    def test_origin(self):
        assert to_byte_offset(build_line_offsets("SELECT 1"), 1, 1) == 0

    def test_second_line(self):
        offsets = build_line_offsets("SELECT id\nFROM users")
        assert to_byte_offset(offsets, 2, 1) == 10
        assert to_byte_offset(offsets, 2, 6) == 15

    def test_line_past_end_falls_back_to_last_line_start(self):
        offsets = build_line_offsets("a\nb\nc")
        assert to_byte_offset(offsets, 99, 5) == offsets[-1]

    def test_non_positive_values_are_clamped(self):
        offsets = build_line_offsets("a\nb")
        assert to_byte_offset(offsets, 0, 0) == 0
        assert to_byte_offset(offsets, 2, -3) == 2

    def test_empty_table(self):
        assert to_byte_offset((), 3, 3) == 0


class TestRoundTrip:
    TEXT = "SELECT\n  id,\n  name\nFROM users\nWHERE active = 1;\n"

    def test_every_position_round_trips(self):
        offsets = build_line_offsets(self.TEXT)
        lines = self.TEXT.split("\n")
        for line_no, content in enumerate(lines, start=1):
            for col in range(1, len(content) + 2):
                if line_no == len(lines) and col > 1:
                    continue
                offset = to_byte_offset(offsets, line_no, col)
                assert to_line_col(offsets, offset) == (line_no, col)

    def test_every_offset_round_trips(self):
        offsets = build_line_offsets(self.TEXT)
        for offset in range(len(self.TEXT) + 1):
            line, col = to_line_col(offsets, offset)
            assert to_byte_offset(offsets, line, col) == offset

    def test_non_ascii_text_uses_code_points(self):
        text = "SELECT 'héllo'\nFROM t"
        offsets = build_line_offsets(text)
        assert to_byte_offset(offsets, 2, 1) == text.index("FROM")


class TestSplitLines:
    def test_newline_only(self):
        assert split_lines("SELECT 'a\x0cb',\nFROM t") == ["SELECT 'a\x0cb',", "FROM t"]

    def test_lone_carriage_return_stays_in_line(self):
        assert split_lines("SELECT 'a\rb' FROM t") == ["SELECT 'a\rb' FROM t"]

    def test_crlf_terminator_is_stripped(self):
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_final_newline_adds_no_line(self):
        assert split_lines("a\n") == ["a"]
        assert split_lines("a\n\n") == ["a", ""]

    def test_empty(self):
        assert split_lines("") == []

    @pytest.mark.parametrize("text", ["x\x0by", "x y\nz", "x\x85y\n\x1cz\n"])
    def test_line_count_matches_offset_table(self, text):
        assert len(split_lines(text)) == len(build_line_offsets(text.rstrip("\n")))


class TestSourceDocument:
    def test_offsets_are_derived(self):
        doc = SourceDocument("a\nb")
        assert doc.line_offsets == (0, 2)

    def test_immutable(self):
        doc = SourceDocument("SELECT 1")
        with pytest.raises(AttributeError):
            doc.text = "SELECT 2"  # type: ignore[misc]

    def test_lines_and_line_lookup(self):
        doc = SourceDocument("SELECT id\r\nFROM users\n")
        assert doc.lines == ["SELECT id", "FROM users"]
        assert doc.line_count == 2
        assert doc.line(2) == "FROM users"
        assert doc.line(0) == ""
        assert doc.line(3) == ""

    def test_offset_and_position_helpers(self):
        doc = SourceDocument("SELECT id\nFROM users", path="q.sql")
        assert doc.path == "q.sql"
        assert doc.offset_of(2, 1) == 10
        assert doc.position_of(10) == (2, 1)

    def test_equality_ignores_derived_table(self):
        assert SourceDocument("x") == SourceDocument("x")

    def test_form_feed_does_not_split_lines(self):
        doc = SourceDocument("SELECT 'a\x0cb' FROM t")
        assert doc.line_count == 1
        assert doc.line_count == len(doc.line_offsets)
