"""Unit tests for sqlex_engine.config."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sqlex_engine.config import Settings, detect_language, load_settings
from sqlex_engine.keywords import KeywordCase
from sqlex_engine.sql_toolkit import Dialect, UnsupportedDialectError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's locale, SQLEX_* variables and .env file."""
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(var, raising=False)
    for var in ("SQLEX_LANG", "SQLEX_DIALECT", "SQLEX_KEYWORD_CASE", "SQLEX_DEBUG", "SQLEX_STRUCTURED_LOGGING"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_lang(self):
        assert Settings().lang == "en"

    def test_default_dialect(self):
        assert Settings().dialect == Dialect.GENERIC

    def test_default_keyword_case(self):
        assert Settings().keyword_case == KeywordCase.UPPER

    def test_default_logging(self):
        settings = Settings()
        assert settings.debug is False
        assert settings.structured_logging is False

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.lang = "ja"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Locale detection
# ---------------------------------------------------------------------------


class TestDetectLanguage:
    def test_lang_variable(self, monkeypatch):
        monkeypatch.setenv("LANG", "ja_JP.UTF-8")
        assert detect_language() == "ja"

    def test_lc_all_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("LANG", "ja_JP.UTF-8")
        monkeypatch.setenv("LC_ALL", "en_US.UTF-8")
        assert detect_language() == "en"

    def test_lc_messages_before_lang(self, monkeypatch):
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        monkeypatch.setenv("LC_MESSAGES", "ja_JP")
        assert detect_language() == "ja"

    def test_unknown_locale_falls_back_to_english(self, monkeypatch):
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        assert detect_language() == "en"

    def test_settings_use_locale(self, monkeypatch):
        monkeypatch.setenv("LANG", "ja_JP.UTF-8")
        assert Settings().lang == "ja"


# ---------------------------------------------------------------------------
# Environment variables and overrides
# ---------------------------------------------------------------------------


class TestSettingsFromEnv:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SQLEX_DIALECT", "postgresql")
        monkeypatch.setenv("SQLEX_KEYWORD_CASE", "LOWER")
        monkeypatch.setenv("SQLEX_LANG", "ja")
        settings = Settings()
        assert settings.dialect == Dialect.POSTGRES
        assert settings.keyword_case == KeywordCase.LOWER
        assert settings.lang == "ja"

    def test_unknown_dialect_raises(self, monkeypatch):
        monkeypatch.setenv("SQLEX_DIALECT", "oracle")
        with pytest.raises(UnsupportedDialectError):
            Settings()

    def test_invalid_keyword_case(self):
        with pytest.raises(ValidationError):
            Settings(keyword_case="camel")


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(dialect="mysql", keyword_case="ignore", lang="ja")
        assert settings.dialect == Dialect.MYSQL
        assert settings.keyword_case == KeywordCase.IGNORE
        assert settings.lang == "ja"

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("SQLEX_DIALECT", "sqlite")
        settings = load_settings(dialect=None, lang=None)
        assert settings.dialect == Dialect.SQLITE
        assert settings.lang == "en"

    def test_debug_logging(self, caplog):
        with caplog.at_level("INFO", logger="sqlex_engine.config"):
            load_settings(debug=True)
        assert "Loaded settings" in caplog.text
