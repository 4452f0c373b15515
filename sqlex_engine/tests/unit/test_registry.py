"""Unit tests for the lint rule registry."""

from __future__ import annotations

import pytest

from sqlex_engine.lint.builtin.keyword_case import KeywordCaseRule
from sqlex_engine.lint.builtin.select_star import NoSelectStarRule
from sqlex_engine.lint.builtin.table_alias import RequireTableAliasRule
from sqlex_engine.lint.builtin.trailing_semicolon import TrailingSemicolonRule
from sqlex_engine.lint.engine import create_default_linter
from sqlex_engine.lint.registry import LintRuleRegistry


class TestLintRuleRegistry:
    def test_register_and_get(self):
        registry = LintRuleRegistry()
        rule = NoSelectStarRule()
        registry.register(rule)
        assert registry.get("no-select-star") is rule
        assert "no-select-star" in registry
        assert len(registry) == 1

    def test_duplicate_rejected(self):
        registry = LintRuleRegistry()
        registry.register(NoSelectStarRule())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(NoSelectStarRule())

    def test_unregister(self):
        registry = LintRuleRegistry()
        registry.register(TrailingSemicolonRule())
        registry.unregister("trailing-semicolon")
        assert registry.get("trailing-semicolon") is None
        assert len(registry) == 0

    def test_unregister_unknown_raises(self):
        with pytest.raises(KeyError):
            LintRuleRegistry().unregister("nope")

    def test_get_all_sorted_by_id(self):
        registry = LintRuleRegistry()
        for rule in (TrailingSemicolonRule(), RequireTableAliasRule(), KeywordCaseRule(), NoSelectStarRule()):
            registry.register(rule)
        assert [r.rule_id for r in registry.get_all()] == registry.get_ids()
        assert registry.get_ids() == [
            "keyword-case",
            "no-select-star",
            "require-table-alias",
            "trailing-semicolon",
        ]

    def test_default_linter_has_builtin_rules(self):
        linter = create_default_linter()
        assert len(linter.registry) == 4


class TestRuleMetadata:
    def test_tree_rules_require_parse(self):
        assert NoSelectStarRule().requires_parse
        assert RequireTableAliasRule().requires_parse

    def test_token_and_text_rules_do_not(self):
        assert not KeywordCaseRule().requires_parse
        assert not TrailingSemicolonRule().requires_parse
