"""Map front-end tokens onto offsets in a :class:`SourceDocument`."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sqlex_engine.source.document import SourceDocument
from sqlex_engine.sql_toolkit import SqlToken


def locate_tokens(
    document: SourceDocument,
    tokens: Iterable[SqlToken],
) -> Iterator[tuple[SqlToken, int]]:
    """Yield each token with its offset in *document*.

    Tokens carrying a span are located exactly.  Tokens without one are
    located by searching forward for their literal text from a cursor that
    advances past every match; this is approximate and can land on an
    earlier occurrence of the same text.
    """
    cursor = 0
    for token in tokens:
        if token.span is not None:
            offset = document.offset_of(token.span.start.line, token.span.start.column)
        else:
            found = document.text.find(token.text, cursor)
            offset = found if found != -1 else cursor
        yield token, offset
        cursor = max(cursor, offset + len(token.text))
