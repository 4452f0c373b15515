"""SQL toolkit shared types.

Every type here is implementation-agnostic. Consumer code operates on these
types exclusively. The backing implementation (SQLGlot, sqlparser, custom)
converts to/from its native types internally.

ZERO dependency on any SQL parsing library.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Dialect
# ---------------------------------------------------------------------------


class Dialect(str, enum.Enum):
    """Supported SQL dialects."""

    GENERIC = "generic"
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite"
    BIGQUERY = "bigquery"

    @classmethod
    def from_name(cls, name: str) -> Dialect:
        """Resolve a user-supplied dialect name.

        Matching is case-insensitive and ``postgresql`` is accepted as an
        alias for ``postgres``.

        Raises:
            UnsupportedDialectError: If *name* is not a known dialect.
        """
        key = name.strip().lower()
        key = _DIALECT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedDialectError(name) from None


_DIALECT_ALIASES: dict[str, str] = {
    "postgresql": "postgres",
}


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class TokenKind(str, enum.Enum):
    """Coarse token categories.

    This is NOT a 1:1 mapping to any tokenizer's internal types -- it is the
    subset that sqlex actually inspects.
    """

    WORD = "word"
    STRING = "string"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    OPERATOR = "operator"
    OTHER = "other"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A 1-based (line, column) coordinate in source text."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source span of a token.  ``start`` is inclusive."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class SqlToken:
    """A single token produced by the front-end tokenizer.

    ``text`` is the literal source text of the token, delimiters included
    for quoted identifiers and string literals.  ``span`` is ``None`` when
    the backing tokenizer cannot report source positions.
    """

    kind: TokenKind
    text: str
    span: Span | None = None
    quoted: bool = False

    @property
    def is_word(self) -> bool:
        return self.kind == TokenKind.WORD


# ---------------------------------------------------------------------------
# Statement shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class WildcardRef:
    """A ``*`` or ``table.*`` entry in a projection list."""

    qualifier: str | None = None
    line: int = 1
    column: int = 1

    @property
    def is_qualified(self) -> bool:
        return self.qualifier is not None

    def __str__(self) -> str:
        if self.qualifier:
            return f"{self.qualifier}.*"
        return "*"


@dataclass(frozen=True, slots=True)
class TableSource:
    """A direct table reference in a FROM or JOIN clause."""

    name: str
    alias: str | None = None
    line: int = 1
    column: int = 1

    @property
    def has_alias(self) -> bool:
        return bool(self.alias)


@dataclass(frozen=True, slots=True)
class StatementShape:
    """The parts of a parsed statement that the lint rules inspect.

    ``wildcards`` and ``tables`` are only populated when
    ``is_plain_select`` is ``True`` (a query whose body is a single SELECT,
    not a set operation).  ``raw`` holds the implementation-specific tree
    for escape-hatch operations and is excluded from equality.
    """

    kind: str
    is_plain_select: bool = False
    wildcards: tuple[WildcardRef, ...] = ()
    tables: tuple[TableSource, ...] = ()
    raw: Any = field(default=None, repr=False, compare=False, hash=False)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Result of parsing a SQL document.

    ``statements`` handles multi-statement SQL (separated by ``;``).  Empty
    statements are dropped.
    """

    statements: tuple[StatementShape, ...]
    dialect: Dialect


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Structured view of a parse failure.

    ``message`` follows the ``"<description> at Line: <n>, Column: <m>"``
    contract whenever the backend reports a location.
    """

    message: str
    line: int = 1
    column: int = 1


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SqlToolkitError(Exception):
    """Base exception for all sql_toolkit errors."""


class SqlParseError(SqlToolkitError):
    """SQL could not be parsed."""

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class SqlTokenizeError(SqlToolkitError):
    """SQL could not be tokenized."""


class UnsupportedDialectError(SqlToolkitError):
    """The requested dialect name is not supported."""

    def __init__(self, name: str) -> None:
        supported = ", ".join(d.value for d in Dialect)
        super().__init__(f"Unsupported dialect: {name} (supported: {supported})")
        self.name = name
