"""Unit tests for the lint engine and the built-in lint rules."""

from __future__ import annotations

import pytest

from sqlex_engine.diagnostics.models import LintWarning, Severity
from sqlex_engine.i18n import Messages
from sqlex_engine.keywords import KeywordCase
from sqlex_engine.lint import (
    BaseLintRule,
    LintConfig,
    LintContext,
    LintRuleRegistry,
    Linter,
    create_default_linter,
    lint,
)
from sqlex_engine.source.document import SourceDocument
from sqlex_engine.sql_toolkit import (
    Dialect,
    SqlToken,
    TokenKind,
    register_implementation,
    reset_toolkit,
)


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_toolkit()
    yield
    reset_toolkit()


def _rule_ids(warnings: list[LintWarning]) -> list[str]:
    return [w.rule_id for w in warnings]


def _only(rule: str, **overrides) -> LintConfig:
    """Config with every rule off except *rule*."""
    values = {
        "keyword_case": KeywordCase.IGNORE,
        "no_select_star": False,
        "require_table_alias": False,
        "trailing_semicolon": False,
    }
    values[rule] = overrides.pop("value", True)
    values.update(overrides)
    return LintConfig(**values)


class _SpanlessTokenizer:
    """Tokenizer that reports words without spans."""

    def tokenize(self, sql, dialect=Dialect.GENERIC):
        return [SqlToken(kind=TokenKind.WORD, text=word) for word in sql.split()]


class _SpanlessToolkit:
    def __init__(self) -> None:
        from sqlex_engine.sql_toolkit.impl.sqlglot_impl import SqlGlotParser

        self.tokenizer = _SpanlessTokenizer()
        self.parser = SqlGlotParser()


class _ExplodingRule(BaseLintRule):
    @property
    def rule_id(self) -> str:
        return "aaa-exploding"

    def enabled(self, config: LintConfig) -> bool:
        return True

    def check(self, context: LintContext) -> list[LintWarning]:
        raise RuntimeError("kaboom")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestLintConfig:
    def test_defaults(self):
        config = LintConfig()
        assert config.keyword_case == KeywordCase.UPPER
        assert config.no_select_star is True
        assert config.require_table_alias is False
        assert config.trailing_semicolon is True

    def test_frozen(self):
        config = LintConfig()
        with pytest.raises(Exception):
            config.no_select_star = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Built-in rules
# ---------------------------------------------------------------------------


class TestNoSelectStar:
    def test_select_star_warns_once(self):
        warnings = lint(SourceDocument("SELECT * FROM users;"), config=_only("no_select_star"))
        assert _rule_ids(warnings) == ["no-select-star"]
        assert warnings[0].severity == Severity.WARNING

    def test_explicit_columns_are_clean(self):
        assert lint(SourceDocument("SELECT id, name FROM users;"), config=_only("no_select_star")) == []

    def test_one_warning_per_wildcard(self):
        sql = "SELECT u.*, o.* FROM users u JOIN orders o ON u.id = o.user_id;"
        warnings = lint(SourceDocument(sql), config=_only("no_select_star"))
        assert _rule_ids(warnings) == ["no-select-star", "no-select-star"]

    def test_every_statement_is_inspected(self):
        warnings = lint(SourceDocument("SELECT * FROM a;\nSELECT * FROM b;"), config=_only("no_select_star"))
        assert len(warnings) == 2

    def test_count_star_is_allowed(self):
        assert lint(SourceDocument("SELECT COUNT(*) FROM users;"), config=_only("no_select_star")) == []

    def test_disabled(self):
        config = _only("no_select_star", value=False)
        assert lint(SourceDocument("SELECT * FROM users;"), config=config) == []


class TestRequireTableAlias:
    def test_missing_alias_names_the_table(self):
        warnings = lint(SourceDocument("SELECT id FROM users;"), config=_only("require_table_alias"))
        assert _rule_ids(warnings) == ["require-table-alias"]
        assert "users" in warnings[0].message

    def test_aliased_tables_are_clean(self):
        sql = "SELECT u.id FROM users u JOIN orders AS o ON u.id = o.user_id;"
        assert lint(SourceDocument(sql), config=_only("require_table_alias")) == []

    def test_join_without_alias(self):
        sql = "SELECT u.id FROM users u JOIN orders ON u.id = orders.user_id;"
        warnings = lint(SourceDocument(sql), config=_only("require_table_alias"))
        assert len(warnings) == 1
        assert "orders" in warnings[0].message

    def test_subquery_is_not_a_direct_table(self):
        sql = "SELECT s.x FROM (SELECT 1 AS x) s;"
        assert lint(SourceDocument(sql), config=_only("require_table_alias")) == []


class TestTrailingSemicolon:
    def test_missing_semicolon_on_last_line(self):
        warnings = lint(SourceDocument("SELECT id FROM users"), config=_only("trailing_semicolon"))
        assert _rule_ids(warnings) == ["trailing-semicolon"]
        assert warnings[0].line == 1
        assert warnings[0].column == len("SELECT id FROM users")

    def test_multiline_reports_last_line(self):
        warnings = lint(SourceDocument("SELECT id\nFROM users\n"), config=_only("trailing_semicolon"))
        assert len(warnings) == 1
        assert warnings[0].line == 2
        assert warnings[0].column == len("FROM users")

    def test_lone_carriage_return_is_not_a_line_break(self):
        warnings = lint(SourceDocument("SELECT 'a\rb' FROM t"), config=_only("trailing_semicolon"))
        assert warnings[0].line == 1
        assert warnings[0].column == len("SELECT 'a\rb' FROM t")

    def test_blank_last_line_reports_column_one(self):
        warnings = lint(SourceDocument("SELECT 1\n\n"), config=_only("trailing_semicolon"))
        assert (warnings[0].line, warnings[0].column) == (2, 1)

    def test_present_semicolon_with_trailing_whitespace(self):
        assert lint(SourceDocument("SELECT 1;  \n\n"), config=_only("trailing_semicolon")) == []

    def test_empty_document(self):
        assert lint(SourceDocument("   \n"), config=_only("trailing_semicolon")) == []

    def test_runs_on_unparsable_document(self):
        warnings = lint(SourceDocument("SELECT (1 FROM"), config=_only("trailing_semicolon"))
        assert _rule_ids(warnings) == ["trailing-semicolon"]


class TestKeywordCase:
    def test_lowercase_keywords_under_upper_policy(self):
        warnings = lint(
            SourceDocument("select id from users;"),
            config=_only("keyword_case", value=KeywordCase.UPPER),
        )
        assert _rule_ids(warnings) == ["keyword-case", "keyword-case"]
        assert [(w.line, w.column) for w in warnings] == [(1, 1), (1, 11)]
        assert "SELECT" in warnings[0].message

    def test_lower_policy(self):
        warnings = lint(
            SourceDocument("SELECT id\nFROM users;"),
            config=_only("keyword_case", value=KeywordCase.LOWER),
        )
        assert [(w.line, w.column) for w in warnings] == [(1, 1), (2, 1)]
        assert "from" in warnings[1].message

    def test_mixed_case_is_reported(self):
        warnings = lint(SourceDocument("Select 1;"), config=_only("keyword_case", value=KeywordCase.UPPER))
        assert len(warnings) == 1

    def test_quoted_identifiers_are_skipped(self):
        warnings = lint(
            SourceDocument('SELECT "select" FROM t;'),
            config=_only("keyword_case", value=KeywordCase.UPPER),
        )
        assert warnings == []

    def test_exact_spans_beat_repeated_text(self):
        # "from" first appears inside the identifier; the span still points
        # at the keyword itself.
        warnings = lint(
            SourceDocument("SELECT from_date from t;"),
            config=_only("keyword_case", value=KeywordCase.UPPER),
        )
        assert [(w.line, w.column) for w in warnings] == [(1, 18)]

    def test_forward_search_when_spans_are_missing(self):
        register_implementation(_SpanlessToolkit)  # type: ignore[arg-type]
        warnings = lint(
            SourceDocument("SELECT id\nfrom users;"),
            config=_only("keyword_case", value=KeywordCase.UPPER),
        )
        assert [(w.line, w.column) for w in warnings] == [(2, 1)]

    def test_runs_on_unparsable_document(self):
        warnings = lint(
            SourceDocument("select (1 from"),
            config=_only("keyword_case", value=KeywordCase.UPPER),
        )
        assert _rule_ids(warnings) == ["keyword-case", "keyword-case"]

    def test_ignore_policy_disables_rule(self):
        assert lint(SourceDocument("select 1;"), config=_only("keyword_case", value=KeywordCase.IGNORE)) == []


# ---------------------------------------------------------------------------
# Engine behaviour
# ---------------------------------------------------------------------------


class TestLinter:
    def test_rule_order_is_fixed(self):
        config = LintConfig(require_table_alias=True)
        warnings = create_default_linter(config).lint(SourceDocument("select * from users"))
        assert _rule_ids(warnings) == [
            "keyword-case",
            "keyword-case",
            "no-select-star",
            "require-table-alias",
            "trailing-semicolon",
        ]

    def test_syntax_error_suppresses_tree_rules_only(self):
        config = LintConfig(require_table_alias=True)
        warnings = create_default_linter(config).lint(SourceDocument("select * from users where (a"))
        ids = set(_rule_ids(warnings))
        assert "no-select-star" not in ids
        assert "require-table-alias" not in ids
        assert "keyword-case" in ids
        assert "trailing-semicolon" in ids

    def test_per_call_config_override(self):
        linter = create_default_linter()
        assert linter.lint(SourceDocument("SELECT * FROM t;")) != []
        override = LintConfig(no_select_star=False)
        assert linter.lint(SourceDocument("SELECT * FROM t;"), Dialect.GENERIC, override) == []

    def test_raising_rule_does_not_suppress_others(self):
        linter = create_default_linter()
        linter.register(_ExplodingRule())
        warnings = linter.lint(SourceDocument("SELECT * FROM users"))
        assert warnings[0].rule_id == "aaa-exploding"
        assert warnings[0].severity == Severity.ERROR
        assert "kaboom" in warnings[0].message
        assert _rule_ids(warnings)[1:] == ["no-select-star", "trailing-semicolon"]

    def test_empty_linter(self):
        assert Linter().lint(SourceDocument("select * from t")) == []

    def test_custom_registry(self):
        registry = LintRuleRegistry()
        registry.register(_ExplodingRule())
        linter = Linter(registry=registry)
        assert linter.registry is registry
        assert len(linter.lint(SourceDocument("SELECT 1;"))) == 1

    def test_japanese_messages(self):
        warnings = lint(
            SourceDocument("SELECT id FROM users"),
            config=_only("trailing_semicolon"),
            messages=Messages("ja"),
        )
        assert warnings[0].message == Messages("ja").trailing_semicolon_error()


class TestLintContext:
    def test_parse_failure_is_recorded(self):
        context = LintContext(SourceDocument("SELECT (1"), Dialect.GENERIC, LintConfig())
        assert not context.parses
        assert context.parse_failure is not None

    def test_tokens_are_cached(self):
        context = LintContext(SourceDocument("SELECT 1"), Dialect.GENERIC, LintConfig())
        assert context.tokens is context.tokens

    def test_tokenize_failure_yields_none(self):
        context = LintContext(SourceDocument("SELECT 'abc"), Dialect.GENERIC, LintConfig())
        assert context.tokens is None
