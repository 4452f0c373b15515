"""Abstract base class for lint rule implementations.

All lint rules must subclass :class:`BaseLintRule` and implement
:attr:`rule_id`, :meth:`enabled` and :meth:`check`.
"""

from __future__ import annotations

import abc

from sqlex_engine.diagnostics.models import LintWarning, Severity
from sqlex_engine.lint.models import LintConfig, LintContext


class BaseLintRule(abc.ABC):
    """Abstract base for all lint rules.

    Rules should be stateless; all required data is passed via the
    :class:`LintContext`.  Rules that set :attr:`requires_parse` only run
    when the whole document parses.
    """

    requires_parse: bool = False

    @property
    @abc.abstractmethod
    def rule_id(self) -> str:
        """Stable identifier reported with every warning."""

    @abc.abstractmethod
    def enabled(self, config: LintConfig) -> bool:
        """Whether *config* turns this rule on."""

    @abc.abstractmethod
    def check(self, context: LintContext) -> list[LintWarning]:
        """Run the rule against one document.

        Parameters
        ----------
        context:
            The document, dialect, configuration and message catalog.

        Returns
        -------
        list[LintWarning]
            Warnings in source order.
        """

    def warning(
        self,
        message: str,
        *,
        line: int = 1,
        column: int = 1,
        severity: Severity = Severity.WARNING,
    ) -> LintWarning:
        return LintWarning(
            rule_id=self.rule_id,
            line=max(line, 1),
            column=max(column, 1),
            message=message,
            severity=severity,
        )
