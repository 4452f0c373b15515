"""Built-in rule: every direct table reference needs an alias."""

from __future__ import annotations

from sqlex_engine.diagnostics.models import LintWarning
from sqlex_engine.lint.base import BaseLintRule
from sqlex_engine.lint.models import LintConfig, LintContext


class RequireTableAliasRule(BaseLintRule):
    """Report FROM and JOIN tables that have no alias.

    Derived tables (subqueries), table functions and VALUES lists are not
    direct table references and are ignored.
    """

    requires_parse = True

    @property
    def rule_id(self) -> str:
        return "require-table-alias"

    def enabled(self, config: LintConfig) -> bool:
        return config.require_table_alias

    def check(self, context: LintContext) -> list[LintWarning]:
        result = context.parse_result
        if result is None:
            return []

        warnings: list[LintWarning] = []
        for statement in result.statements:
            if not statement.is_plain_select:
                continue
            for table in statement.tables:
                if table.has_alias:
                    continue
                warnings.append(
                    self.warning(
                        context.messages.require_table_alias_error(table.name),
                        line=table.line,
                        column=table.column,
                    )
                )
        return warnings
