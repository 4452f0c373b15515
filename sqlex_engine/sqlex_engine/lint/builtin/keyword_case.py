"""Built-in rule: reserved keywords must follow the configured casing."""

from __future__ import annotations

from sqlex_engine.diagnostics.models import LintWarning
from sqlex_engine.keywords import KeywordCase, apply_case, is_reserved_keyword, matches_case
from sqlex_engine.lint.base import BaseLintRule
from sqlex_engine.lint.models import LintConfig, LintContext
from sqlex_engine.source.locate import locate_tokens


class KeywordCaseRule(BaseLintRule):
    """Report reserved keywords whose casing differs from the policy.

    Works on the token stream, so it runs even when the document does not
    parse.  Quoted identifiers are skipped.  Locations come from token spans
    when the front-end provides them and from a forward text search
    otherwise.
    """

    @property
    def rule_id(self) -> str:
        return "keyword-case"

    def enabled(self, config: LintConfig) -> bool:
        return config.keyword_case != KeywordCase.IGNORE

    def check(self, context: LintContext) -> list[LintWarning]:
        tokens = context.tokens
        if tokens is None:
            return []

        policy = context.config.keyword_case
        warnings: list[LintWarning] = []
        for token, offset in locate_tokens(context.document, tokens):
            if not token.is_word or token.quoted or not is_reserved_keyword(token.text):
                continue
            if matches_case(token.text, policy):
                continue
            line, column = context.document.position_of(offset)
            warnings.append(
                self.warning(
                    context.messages.keyword_case_error(token.text, apply_case(token.text, policy)),
                    line=line,
                    column=column,
                )
            )
        return warnings
