"""sqlex lint engine -- configurable, independent style rules.

Quick start::

    from sqlex_engine.lint import LintConfig, create_default_linter
    from sqlex_engine.source import SourceDocument

    linter = create_default_linter(LintConfig(require_table_alias=True))
    for warning in linter.lint(SourceDocument("select * from users")):
        print(warning.rule_id, warning.line, warning.column, warning.message)
"""

from sqlex_engine.lint.base import BaseLintRule
from sqlex_engine.lint.engine import Linter, create_default_linter, lint
from sqlex_engine.lint.models import LintConfig, LintContext
from sqlex_engine.lint.registry import LintRuleRegistry

__all__ = [
    "BaseLintRule",
    "LintConfig",
    "LintContext",
    "LintRuleRegistry",
    "Linter",
    "create_default_linter",
    "lint",
]
