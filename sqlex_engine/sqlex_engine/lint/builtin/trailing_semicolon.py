"""Built-in rule: the document must end with a semicolon."""

from __future__ import annotations

from sqlex_engine.diagnostics.models import LintWarning
from sqlex_engine.lint.base import BaseLintRule
from sqlex_engine.lint.models import LintConfig, LintContext


class TrailingSemicolonRule(BaseLintRule):
    """At most one warning, placed at the end of the last line."""

    @property
    def rule_id(self) -> str:
        return "trailing-semicolon"

    def enabled(self, config: LintConfig) -> bool:
        return config.trailing_semicolon

    def check(self, context: LintContext) -> list[LintWarning]:
        text = context.document.text
        trimmed = text.strip()
        if not trimmed or trimmed.endswith(";"):
            return []

        lines = context.document.lines
        return [
            self.warning(
                context.messages.trailing_semicolon_error(),
                line=len(lines),
                column=max(len(lines[-1]), 1),
            )
        ]
