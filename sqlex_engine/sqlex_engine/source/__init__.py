"""Source text handling: documents and coordinate mapping."""

from sqlex_engine.source.document import (
    SourceDocument,
    build_line_offsets,
    split_lines,
    to_byte_offset,
    to_line_col,
)

__all__ = [
    "SourceDocument",
    "build_line_offsets",
    "split_lines",
    "to_byte_offset",
    "to_line_col",
]
