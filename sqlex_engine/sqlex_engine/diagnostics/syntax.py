"""Syntax checking: parse a document and turn failures into diagnostics."""

from __future__ import annotations

import logging
import re

from sqlex_engine.diagnostics.hints import analyze_error
from sqlex_engine.diagnostics.models import SyntaxDiagnostic
from sqlex_engine.i18n import Messages
from sqlex_engine.source.document import SourceDocument
from sqlex_engine.sql_toolkit import Dialect, SqlParseError, get_sql_toolkit

logger = logging.getLogger(__name__)

# "... at Line: 3, Column: 14" / "... at Line: 3, Column 14"
_LINE_RE = re.compile(r"Line: (\d+)")
_COLUMN_RE = re.compile(r"Column[:\s]*(\d+)")


def extract_location(message: str) -> tuple[int, int]:
    """Recover the (line, column) pair embedded in a parser error message.

    Either part defaults to ``1`` when its marker is missing.
    """
    line_match = _LINE_RE.search(message)
    column_match = _COLUMN_RE.search(message)
    line = int(line_match.group(1)) if line_match else 1
    column = int(column_match.group(1)) if column_match else 1
    return max(line, 1), max(column, 1)


def diagnose_failure(
    message: str,
    document: SourceDocument,
    messages: Messages | None = None,
) -> SyntaxDiagnostic:
    """Build a located diagnostic, with an optional hint, from an error message."""
    line, column = extract_location(message)
    hint = analyze_error(message, document.text, line, messages)
    return SyntaxDiagnostic(line=line, column=column, message=message, hint=hint)


def check_document(
    document: SourceDocument,
    dialect: Dialect = Dialect.GENERIC,
    messages: Messages | None = None,
) -> list[SyntaxDiagnostic]:
    """Parse *document* and return its syntax diagnostics.

    Returns an empty list when the document parses.  The front-end stops at
    the first error, so at most one diagnostic is produced.
    """
    try:
        get_sql_toolkit().parser.parse(document.text, dialect)
    except SqlParseError as exc:
        logger.debug("Parse failed for %s: %s", document.path or "<text>", exc.failure.message)
        return [diagnose_failure(exc.failure.message, document, messages)]
    return []
