"""Built-in rule: no wildcard projections."""

from __future__ import annotations

from sqlex_engine.diagnostics.models import LintWarning
from sqlex_engine.lint.base import BaseLintRule
from sqlex_engine.lint.models import LintConfig, LintContext


class NoSelectStarRule(BaseLintRule):
    """One warning per ``*`` or ``table.*`` in a plain SELECT's projection.

    Only top-level statements whose body is a single SELECT are inspected;
    set operations, CTE bodies and subqueries are not.
    """

    requires_parse = True

    @property
    def rule_id(self) -> str:
        return "no-select-star"

    def enabled(self, config: LintConfig) -> bool:
        return config.no_select_star

    def check(self, context: LintContext) -> list[LintWarning]:
        result = context.parse_result
        if result is None:
            return []

        warnings: list[LintWarning] = []
        for statement in result.statements:
            if not statement.is_plain_select:
                continue
            for wildcard in statement.wildcards:
                warnings.append(
                    self.warning(
                        context.messages.no_select_star_error(),
                        line=wildcard.line,
                        column=wildcard.column,
                    )
                )
        return warnings
