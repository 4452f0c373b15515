"""Lint engine -- runs every enabled rule against one document.

The :class:`Linter` discovers registered rules, filters them by the
:class:`LintConfig`, executes each one and accumulates the warnings.  Rules
are independent: a rule that crashes is reported as an error-severity
warning and never suppresses the others.  Rules that need a parse tree are
skipped when the document has a syntax error, while token- and text-level
rules still run.
"""

from __future__ import annotations

import logging

from sqlex_engine.diagnostics.models import LintWarning, Severity
from sqlex_engine.i18n import Messages
from sqlex_engine.lint.base import BaseLintRule
from sqlex_engine.lint.models import LintConfig, LintContext
from sqlex_engine.lint.registry import LintRuleRegistry
from sqlex_engine.source.document import SourceDocument
from sqlex_engine.sql_toolkit import Dialect

logger = logging.getLogger(__name__)


class Linter:
    """Unified orchestrator for running lint rules.

    Parameters
    ----------
    config:
        Rule selection and parameters, shared read-only across documents.
    registry:
        Optional pre-configured registry.  When ``None``, a new empty
        registry is created.
    messages:
        Message catalog used for warning text.  Defaults to English.
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        registry: LintRuleRegistry | None = None,
        messages: Messages | None = None,
    ) -> None:
        self._config = config or LintConfig()
        self._registry = registry or LintRuleRegistry()
        self._messages = messages or Messages()

    @property
    def config(self) -> LintConfig:
        return self._config

    @property
    def registry(self) -> LintRuleRegistry:
        """The rule registry backing this linter."""
        return self._registry

    def register(self, rule: BaseLintRule) -> None:
        """Register a rule implementation with the linter."""
        self._registry.register(rule)

    def lint(
        self,
        document: SourceDocument,
        dialect: Dialect = Dialect.GENERIC,
        config: LintConfig | None = None,
    ) -> list[LintWarning]:
        """Run all enabled rules against *document*.

        Parameters
        ----------
        document:
            The SQL document to lint.
        dialect:
            Dialect used to tokenize and parse the document.
        config:
            Overrides the linter's configuration for this call.

        Returns
        -------
        list[LintWarning]
            Warnings grouped by rule, rules in rule-id order.
        """
        context = LintContext(document, dialect, config or self._config, self._messages)
        warnings: list[LintWarning] = []

        for rule in self._registry.get_all():
            if not rule.enabled(context.config):
                continue
            if rule.requires_parse and not context.parses:
                logger.debug(
                    "Skipping %s for %s: document does not parse",
                    rule.rule_id,
                    document.path or "<text>",
                )
                continue

            logger.debug("Running lint rule: %s", rule.rule_id)
            try:
                warnings.extend(rule.check(context))
            except Exception as exc:
                logger.error("Lint rule %s raised an unhandled exception: %s", rule.rule_id, exc)
                warnings.append(
                    LintWarning(
                        rule_id=rule.rule_id,
                        message=f"Unhandled error in {rule.rule_id}: {exc}",
                        severity=Severity.ERROR,
                    )
                )

        return warnings


def create_default_linter(
    config: LintConfig | None = None,
    messages: Messages | None = None,
) -> Linter:
    """Create a :class:`Linter` with all built-in rules registered."""
    from sqlex_engine.lint.builtin.keyword_case import KeywordCaseRule
    from sqlex_engine.lint.builtin.select_star import NoSelectStarRule
    from sqlex_engine.lint.builtin.table_alias import RequireTableAliasRule
    from sqlex_engine.lint.builtin.trailing_semicolon import TrailingSemicolonRule

    linter = Linter(config=config, messages=messages)
    linter.register(KeywordCaseRule())
    linter.register(NoSelectStarRule())
    linter.register(RequireTableAliasRule())
    linter.register(TrailingSemicolonRule())
    return linter


def lint(
    document: SourceDocument,
    dialect: Dialect = Dialect.GENERIC,
    config: LintConfig | None = None,
    messages: Messages | None = None,
) -> list[LintWarning]:
    """Lint *document* with the built-in rules."""
    return create_default_linter(config, messages).lint(document, dialect)
