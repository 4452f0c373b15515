"""Source documents and line/column <-> offset mapping.

A :class:`SourceDocument` pairs the raw text of one SQL file with a table of
line-start offsets so that (line, column) coordinates reported by the
front-end or recovered from error messages can be translated into positions
in the text, and back.

Offsets index the decoded Python ``str`` (one unit per code point), which is
the unit the front-end reports spans in.  Lines and columns are 1-based.

Out-of-range coordinates never raise: callers such as the hint engine work
with approximate locations scraped from error text, so every conversion
degrades to the nearest safe offset instead.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field


def build_line_offsets(text: str) -> tuple[int, ...]:
    """Return the offset of every line start in *text*.

    Index 0 is always ``0`` (line 1).  Every ``\\n`` starts a new line at
    the offset immediately after it, so the result is strictly increasing.
    """
    offsets = [0]
    idx = text.find("\n")
    while idx != -1:
        offsets.append(idx + 1)
        idx = text.find("\n", idx + 1)
    return tuple(offsets)


def split_lines(text: str) -> list[str]:
    """Split *text* into lines on ``\\n`` only, without terminators.

    One ``\\r`` before each ``\\n`` is dropped so CRLF files read the same as
    LF files.  Other control characters (form feed, lone ``\\r``, Unicode
    line separators) stay inside their line, which keeps line numbers in
    step with :func:`build_line_offsets` and the front-end's error text.
    A final terminator does not start an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def to_byte_offset(line_offsets: tuple[int, ...], line: int, column: int) -> int:
    """Convert a 1-based (line, column) pair into an offset.

    A line past the end of the document maps to the last recorded line
    start.  Line and column values below 1 are treated as 1.
    """
    if not line_offsets:
        return 0
    if line > len(line_offsets):
        return line_offsets[-1]
    line = max(line, 1)
    column = max(column, 1)
    return line_offsets[line - 1] + (column - 1)


def to_line_col(line_offsets: tuple[int, ...], offset: int) -> tuple[int, int]:
    """Convert an offset back into a 1-based (line, column) pair."""
    if not line_offsets:
        return 1, 1
    offset = max(offset, 0)
    index = bisect_right(line_offsets, offset) - 1
    return index + 1, offset - line_offsets[index] + 1


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """Immutable SQL text plus its derived line-offset table.

    Created once per file read and discarded after the check, fix or lint
    pass that consumes it.
    """

    text: str
    path: str | None = None
    line_offsets: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_offsets", build_line_offsets(self.text))

    @property
    def lines(self) -> list[str]:
        """The document split into lines without terminators."""
        return split_lines(self.text)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line(self, number: int) -> str:
        """Return line *number* (1-based) without its terminator, or ``""``."""
        lines = self.lines
        if 1 <= number <= len(lines):
            return lines[number - 1]
        return ""

    def offset_of(self, line: int, column: int) -> int:
        return to_byte_offset(self.line_offsets, line, column)

    def position_of(self, offset: int) -> tuple[int, int]:
        return to_line_col(self.line_offsets, offset)
