"""Minimal, order-safe text rewrites (keyword case, trailing terminator)."""

from sqlex_engine.fixer.corrector import (
    FixResult,
    Replacement,
    apply_replacements,
    compute_keyword_replacements,
    fix,
    fix_document,
    normalize_terminator,
)

__all__ = [
    "FixResult",
    "Replacement",
    "apply_replacements",
    "compute_keyword_replacements",
    "fix",
    "fix_document",
    "normalize_terminator",
]
