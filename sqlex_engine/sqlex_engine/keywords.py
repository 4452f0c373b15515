"""Keyword tables shared by the corrector, the lint rules and the hint engine."""

from __future__ import annotations

import enum

# Reserved words subject to keyword-case normalisation.
RESERVED_KEYWORDS: frozenset[str] = frozenset(
    {
        "SELECT", "FROM", "WHERE", "AND", "OR", "NOT", "IN", "IS", "NULL",
        "LIKE", "BETWEEN", "JOIN", "LEFT", "RIGHT", "INNER", "OUTER", "FULL",
        "CROSS", "ON", "AS", "ORDER", "BY", "ASC", "DESC", "GROUP", "HAVING",
        "LIMIT", "OFFSET", "UNION", "ALL", "DISTINCT", "INSERT", "INTO",
        "VALUES", "UPDATE", "SET", "DELETE", "CREATE", "TABLE", "INDEX",
        "VIEW", "DROP", "ALTER", "ADD", "COLUMN", "PRIMARY", "KEY", "FOREIGN",
        "REFERENCES", "CONSTRAINT", "DEFAULT", "UNIQUE", "CHECK", "CASCADE",
        "RESTRICT", "IF", "EXISTS", "CASE", "WHEN", "THEN", "ELSE", "END",
        "CAST", "COALESCE", "NULLIF", "TRUE", "FALSE", "WITH", "RECURSIVE",
        "WINDOW", "OVER", "PARTITION", "ROWS", "RANGE", "UNBOUNDED",
        "PRECEDING", "FOLLOWING", "CURRENT", "ROW", "EXCEPT", "INTERSECT",
        "FETCH", "FIRST", "NEXT", "ONLY", "PERCENT", "TIES", "FOR", "SHARE",
        "NOWAIT", "SKIP", "LOCKED",
    }
)  # fmt: skip

# Keywords that conventionally begin a new clause on their own line.
CLAUSE_KEYWORDS: tuple[str, ...] = (
    "SELECT", "FROM", "WHERE", "JOIN", "LEFT", "RIGHT", "INNER", "OUTER",
    "FULL", "CROSS", "ON", "AND", "OR", "ORDER", "GROUP", "HAVING", "LIMIT",
    "OFFSET", "UNION", "INSERT", "UPDATE", "DELETE", "SET", "VALUES", "INTO",
)  # fmt: skip


class KeywordCase(str, enum.Enum):
    """Keyword casing policy."""

    UPPER = "upper"
    LOWER = "lower"
    IGNORE = "ignore"


def is_reserved_keyword(word: str) -> bool:
    """Case-insensitive membership test against :data:`RESERVED_KEYWORDS`."""
    return word.upper() in RESERVED_KEYWORDS


def apply_case(word: str, policy: KeywordCase) -> str:
    """Return *word* cased according to *policy*."""
    if policy == KeywordCase.UPPER:
        return word.upper()
    if policy == KeywordCase.LOWER:
        return word.lower()
    return word


def matches_case(word: str, policy: KeywordCase) -> bool:
    """True when every cased character of *word* already follows *policy*."""
    if policy == KeywordCase.UPPER:
        return word == word.upper()
    if policy == KeywordCase.LOWER:
        return word == word.lower()
    return True
