"""SQL toolkit protocol definitions.

These define the interface contract that ANY implementation must satisfy.
Consumer code depends on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ._types import Dialect, ParseResult, SqlToken


# ---------------------------------------------------------------------------
# Individual Capability Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class SqlTokenizer(Protocol):
    """Split SQL text into tokens with source spans."""

    def tokenize(
        self,
        sql: str,
        dialect: Dialect = Dialect.GENERIC,
    ) -> list[SqlToken]:
        """Tokenize *sql* according to *dialect*.

        Args:
            sql: The SQL text to tokenize.
            dialect: Source dialect.

        Returns:
            Tokens in source order.  Comments and whitespace are not tokens.

        Raises:
            SqlTokenizeError: If the text cannot be tokenized (for example
                an unterminated string literal).
        """
        ...


@runtime_checkable
class SqlParser(Protocol):
    """Parse SQL documents into statement shapes."""

    def parse(
        self,
        sql: str,
        dialect: Dialect = Dialect.GENERIC,
    ) -> ParseResult:
        """Parse potentially multi-statement SQL (separated by ``;``).

        Returns:
            ``ParseResult`` with zero or more statements.

        Raises:
            SqlParseError: If the document is invalid.  The attached
                ``ParseFailure`` carries the rendered message and location.
        """
        ...


# ---------------------------------------------------------------------------
# Composite Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class SqlToolkit(Protocol):
    """Composite protocol: a complete SQL front-end implementation.

    This is what consumer code receives from the factory.
    """

    @property
    def tokenizer(self) -> SqlTokenizer:
        ...

    @property
    def parser(self) -> SqlParser:
        ...
