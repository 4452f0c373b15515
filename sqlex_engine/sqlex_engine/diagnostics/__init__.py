"""Syntax diagnostics, lint warning models and the hint engine.

Quick start::

    from sqlex_engine.diagnostics import check_document
    from sqlex_engine.source import SourceDocument

    diagnostics = check_document(SourceDocument("SELECT id FROM users WHERE;"))
    for d in diagnostics:
        print(d.line, d.column, d.message, d.hint)
"""

from sqlex_engine.diagnostics.hints import analyze_error
from sqlex_engine.diagnostics.models import Hint, LintWarning, Severity, SyntaxDiagnostic
from sqlex_engine.diagnostics.syntax import check_document, diagnose_failure, extract_location

__all__ = [
    "Hint",
    "LintWarning",
    "Severity",
    "SyntaxDiagnostic",
    "analyze_error",
    "check_document",
    "diagnose_failure",
    "extract_location",
]
