"""SQLGlot-backed implementation of the SQL toolkit protocols.

This is the ONLY file in the entire codebase that imports ``sqlglot`` directly.
All consumer code goes through the protocol interfaces defined in
:mod:`sqlex_engine.sql_toolkit._protocols`.

Supports SQLGlot v25.x (pinned at v25.34.1).
"""

from __future__ import annotations

import logging
import re

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError, TokenError
from sqlglot.tokens import Token, TokenType

from sqlex_engine.source.document import build_line_offsets, to_line_col

from .._types import (
    Dialect,
    ParseFailure,
    ParseResult,
    Position,
    Span,
    SqlParseError,
    SqlToken,
    SqlTokenizeError,
    StatementShape,
    TableSource,
    TokenKind,
    WildcardRef,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Internal: dialect and token classification
# ---------------------------------------------------------------------------

# sqlglot has no named "generic" dialect; ``None`` selects its base dialect.
_SQLGLOT_DIALECTS: dict[Dialect, str | None] = {
    Dialect.GENERIC: None,
    Dialect.MYSQL: "mysql",
    Dialect.POSTGRES: "postgres",
    Dialect.SQLITE: "sqlite",
    Dialect.BIGQUERY: "bigquery",
}

# String literal token types.  Some only exist in newer sqlglot versions.
_STRING_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    getattr(TokenType, name)
    for name in (
        "STRING",
        "NATIONAL_STRING",
        "RAW_STRING",
        "BIT_STRING",
        "HEX_STRING",
        "BYTE_STRING",
        "HEREDOC_STRING",
        "UNICODE_STRING",
    )
    if hasattr(TokenType, name)
)

_PUNCTUATION_CHARS = frozenset("(),;.[]{}")

_WORD_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_$]*$")
_MULTI_WORD_RE = re.compile(r"\S+")


def _dialect_value(dialect: Dialect) -> str | None:
    """Return the sqlglot dialect name for a :class:`Dialect` enum member."""
    return _SQLGLOT_DIALECTS[dialect]


def _classify_token(token: Token, raw_text: str) -> TokenKind:
    if token.token_type in _STRING_TOKEN_TYPES:
        return TokenKind.STRING
    if token.token_type == TokenType.NUMBER:
        return TokenKind.NUMBER
    if token.token_type == TokenType.IDENTIFIER:
        return TokenKind.WORD
    if raw_text.strip() and all(_WORD_RE.match(part) for part in raw_text.split()):
        return TokenKind.WORD
    if raw_text in _PUNCTUATION_CHARS:
        return TokenKind.PUNCTUATION
    if raw_text and not raw_text[0].isalnum():
        return TokenKind.OPERATOR
    return TokenKind.OTHER


def _span(line_offsets: tuple[int, ...], start: int, end: int) -> Span:
    """Build a span from an inclusive ``[start, end]`` offset range."""
    start_line, start_col = to_line_col(line_offsets, start)
    end_line, end_col = to_line_col(line_offsets, max(end, start))
    return Span(
        start=Position(line=start_line, column=start_col),
        end=Position(line=end_line, column=end_col),
    )


def _convert_token(token: Token, sql: str, line_offsets: tuple[int, ...]) -> list[SqlToken]:
    """Convert one sqlglot token into one or more :class:`SqlToken`.

    sqlglot folds multi-word keywords such as ``ORDER BY`` into a single
    token with normalised, uppercased text.  Those are split back into one
    word token per source word so each keeps its own span and casing.
    """
    raw_text = sql[token.start : token.end + 1]
    kind = _classify_token(token, raw_text)
    quoted = token.token_type == TokenType.IDENTIFIER

    if kind == TokenKind.WORD and not quoted and any(c.isspace() for c in raw_text):
        return [
            SqlToken(
                kind=TokenKind.WORD,
                text=match.group(0),
                span=_span(
                    line_offsets,
                    token.start + match.start(),
                    token.start + match.end() - 1,
                ),
            )
            for match in _MULTI_WORD_RE.finditer(raw_text)
        ]

    return [
        SqlToken(
            kind=kind,
            text=raw_text,
            span=_span(line_offsets, token.start, token.end),
            quoted=quoted,
        )
    ]


# ---------------------------------------------------------------------------
# Internal: AST inspection helpers
# ---------------------------------------------------------------------------


# sqlglot v25 records no source positions on tree nodes, so wildcards and
# table sources keep the (1, 1) placeholder location of their types.


def _table_name(table: exp.Table) -> str:
    """Render ``catalog.db.name`` for a table node, omitting missing parts."""
    parts = []
    for key in ("catalog", "db"):
        part = table.args.get(key)
        if part is not None and getattr(part, "name", ""):
            parts.append(part.name)
    parts.append(table.name or "")
    return ".".join(p for p in parts if p)


def _is_direct_table(relation: exp.Expression | None) -> bool:
    """True for plain named tables (not subqueries, table functions or VALUES)."""
    return isinstance(relation, exp.Table) and isinstance(relation.this, exp.Identifier)


def _extract_wildcards(select: exp.Select) -> list[WildcardRef]:
    wildcards: list[WildcardRef] = []
    for projection in select.expressions:
        if isinstance(projection, exp.Star):
            wildcards.append(WildcardRef(qualifier=None))
        elif isinstance(projection, exp.Column) and isinstance(projection.this, exp.Star):
            wildcards.append(WildcardRef(qualifier=projection.table or ""))
    return wildcards


def _extract_table_sources(select: exp.Select) -> list[TableSource]:
    relations: list[exp.Expression] = []
    from_clause = select.args.get("from")
    if from_clause is not None and from_clause.this is not None:
        relations.append(from_clause.this)
    for join in select.args.get("joins") or []:
        relations.append(join.this)

    return [
        TableSource(name=_table_name(relation), alias=relation.alias or None)
        for relation in relations
        if _is_direct_table(relation)
    ]


def _statement_shape(node: exp.Expression) -> StatementShape:
    if not isinstance(node, exp.Select):
        return StatementShape(kind=type(node).__name__.lower(), raw=node)
    return StatementShape(
        kind="select",
        is_plain_select=True,
        wildcards=tuple(_extract_wildcards(node)),
        tables=tuple(_extract_table_sources(node)),
        raw=node,
    )


def _parse_failure(exc: ParseError) -> ParseFailure:
    """Render a sqlglot ``ParseError`` into the location-bearing message contract."""
    if not exc.errors:
        return ParseFailure(message=str(exc))

    first = exc.errors[0]
    description = first.get("description") or str(exc)
    line = first.get("line")
    col = first.get("col")
    if line is None or col is None:
        return ParseFailure(message=description)

    # sqlglot reports the column of the *last* character of the offending
    # token; step back to its first character when it fits on one line.
    highlight = first.get("highlight") or ""
    column = int(col)
    if highlight and "\n" not in highlight:
        column = max(column - len(highlight) + 1, 1)

    return ParseFailure(
        message=f"{description} at Line: {line}, Column: {column}",
        line=int(line),
        column=column,
    )


# ---------------------------------------------------------------------------
# SqlGlotTokenizer
# ---------------------------------------------------------------------------


class SqlGlotTokenizer:
    """SQLGlot-backed :class:`SqlTokenizer` implementation."""

    def tokenize(
        self,
        sql: str,
        dialect: Dialect = Dialect.GENERIC,
    ) -> list[SqlToken]:
        """Tokenize SQL, preserving exact source spans."""
        try:
            raw_tokens = sqlglot.tokenize(sql, read=_dialect_value(dialect))
        except TokenError as exc:
            raise SqlTokenizeError(str(exc)) from exc

        line_offsets = build_line_offsets(sql)
        tokens: list[SqlToken] = []
        for token in raw_tokens:
            tokens.extend(_convert_token(token, sql, line_offsets))
        return tokens


# ---------------------------------------------------------------------------
# SqlGlotParser
# ---------------------------------------------------------------------------


class SqlGlotParser:
    """SQLGlot-backed :class:`SqlParser` implementation."""

    def parse(
        self,
        sql: str,
        dialect: Dialect = Dialect.GENERIC,
    ) -> ParseResult:
        """Parse potentially multi-statement SQL."""
        try:
            asts = sqlglot.parse(sql, read=_dialect_value(dialect))
        except ParseError as exc:
            raise SqlParseError(_parse_failure(exc)) from exc
        except TokenError as exc:
            raise SqlParseError(ParseFailure(message=str(exc))) from exc

        statements: list[StatementShape] = []
        for ast in asts:
            if ast is None:
                logger.debug("Empty statement encountered")
                continue
            statements.append(_statement_shape(ast))

        return ParseResult(statements=tuple(statements), dialect=dialect)


# ---------------------------------------------------------------------------
# Composite Toolkit
# ---------------------------------------------------------------------------


class SqlGlotToolkit:
    """Composite :class:`SqlToolkit` backed by SQLGlot.

    This is the default implementation returned by :func:`get_sql_toolkit`.
    """

    def __init__(self) -> None:
        self._tokenizer = SqlGlotTokenizer()
        self._parser = SqlGlotParser()

    @property
    def tokenizer(self) -> SqlGlotTokenizer:
        return self._tokenizer

    @property
    def parser(self) -> SqlGlotParser:
        return self._parser
