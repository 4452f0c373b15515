"""Data models for the sqlex lint engine.

Defines the lint configuration shared read-only across every file of a run,
and the per-document :class:`LintContext` handed to each rule.
"""

from __future__ import annotations

import logging
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field

from sqlex_engine.i18n import Messages
from sqlex_engine.keywords import KeywordCase
from sqlex_engine.source.document import SourceDocument
from sqlex_engine.sql_toolkit import (
    Dialect,
    ParseFailure,
    ParseResult,
    SqlParseError,
    SqlToken,
    SqlTokenizeError,
    get_sql_toolkit,
)

logger = logging.getLogger(__name__)


class LintConfig(BaseModel):
    """Which lint rules run and how they are parameterised.

    Immutable; one instance is shared by every file in a run.
    """

    model_config = ConfigDict(frozen=True)

    keyword_case: KeywordCase = Field(
        default=KeywordCase.UPPER,
        description="Required keyword casing, or IGNORE to disable the keyword-case rule.",
    )
    no_select_star: bool = Field(default=True, description="Report `*` and `table.*` projections.")
    require_table_alias: bool = Field(
        default=False,
        description="Report FROM/JOIN table references without an alias.",
    )
    trailing_semicolon: bool = Field(
        default=True,
        description="Report documents that do not end with `;`.",
    )


class LintContext:
    """Everything a rule needs to inspect one document.

    The token stream and the parse result are computed lazily and at most
    once, so rules that do not need them never pay for them.
    """

    def __init__(
        self,
        document: SourceDocument,
        dialect: Dialect,
        config: LintConfig,
        messages: Messages | None = None,
    ) -> None:
        self.document = document
        self.dialect = dialect
        self.config = config
        self.messages = messages or Messages()
        self.parse_failure: ParseFailure | None = None

    @cached_property
    def tokens(self) -> list[SqlToken] | None:
        """Token stream, or ``None`` if the document cannot be tokenized."""
        try:
            return get_sql_toolkit().tokenizer.tokenize(self.document.text, self.dialect)
        except SqlTokenizeError as exc:
            logger.debug("Tokenization failed for %s: %s", self.document.path or "<text>", exc)
            return None

    @cached_property
    def parse_result(self) -> ParseResult | None:
        """Parse result, or ``None`` if the document has a syntax error."""
        try:
            return get_sql_toolkit().parser.parse(self.document.text, self.dialect)
        except SqlParseError as exc:
            self.parse_failure = exc.failure
            return None

    @property
    def parses(self) -> bool:
        return self.parse_result is not None
