"""SQL toolkit: implementation-agnostic SQL tokenizing and parsing.

Usage::

    from sqlex_engine.sql_toolkit import get_sql_toolkit, Dialect

    tk = get_sql_toolkit()
    tokens = tk.tokenizer.tokenize("select id from users", Dialect.GENERIC)
    result = tk.parser.parse("SELECT * FROM users;", Dialect.POSTGRES)

The default implementation delegates to SQLGlot.  A different backend can be
swapped in via ``register_implementation()`` without touching consumer code.
"""

from ._factory import get_sql_toolkit, register_implementation, reset_toolkit
from ._protocols import SqlParser, SqlTokenizer, SqlToolkit
from ._types import (
    Dialect,
    ParseFailure,
    ParseResult,
    Position,
    Span,
    SqlParseError,
    SqlToken,
    SqlTokenizeError,
    SqlToolkitError,
    StatementShape,
    TableSource,
    TokenKind,
    UnsupportedDialectError,
    WildcardRef,
)

__all__ = [
    # Factory
    "get_sql_toolkit",
    "register_implementation",
    "reset_toolkit",
    # Protocols
    "SqlToolkit",
    "SqlTokenizer",
    "SqlParser",
    # Types
    "Dialect",
    "TokenKind",
    "Position",
    "Span",
    "SqlToken",
    "WildcardRef",
    "TableSource",
    "StatementShape",
    "ParseResult",
    "ParseFailure",
    # Exceptions
    "SqlToolkitError",
    "SqlParseError",
    "SqlTokenizeError",
    "UnsupportedDialectError",
]
