"""sqlex configuration loaded from environment variables.

Process-wide state (locale, environment overrides) is read exactly once by
:func:`load_settings`; the resulting immutable :class:`Settings` value is
passed explicitly to everything that needs it.
"""

from __future__ import annotations

import logging
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlex_engine.i18n import normalize_language
from sqlex_engine.keywords import KeywordCase
from sqlex_engine.sql_toolkit import Dialect

logger = logging.getLogger(__name__)

# POSIX precedence for message-language selection.
_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")


def detect_language() -> str:
    """Resolve the message language from the process locale environment."""
    for var in _LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return normalize_language(value)
    return "en"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with SQLEX_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="SQLEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    lang: str = Field(default_factory=detect_language)
    dialect: Dialect = Dialect.GENERIC
    keyword_case: KeywordCase = KeywordCase.UPPER

    # Logging
    structured_logging: bool = False
    debug: bool = False

    @field_validator("lang", mode="before")
    @classmethod
    def normalise_lang(cls, v: str | None) -> str:
        return normalize_language(v)

    @field_validator("dialect", mode="before")
    @classmethod
    def resolve_dialect(cls, v: str | Dialect) -> Dialect:
        if isinstance(v, Dialect):
            return v
        # Raises UnsupportedDialectError, which is fatal at startup.
        return Dialect.from_name(str(v))

    @field_validator("keyword_case", mode="before")
    @classmethod
    def resolve_keyword_case(cls, v: str | KeywordCase) -> KeywordCase:
        if isinstance(v, KeywordCase):
            return v
        return KeywordCase(str(v).strip().lower())


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded settings: lang=%s dialect=%s keyword_case=%s",
            settings.lang,
            settings.dialect.value,
            settings.keyword_case.value,
        )

    return settings
