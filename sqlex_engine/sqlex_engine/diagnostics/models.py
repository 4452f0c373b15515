"""Diagnostic models produced by the check and lint passes.

Defines the severity levels and the Pydantic models handed to the
presentation layer: syntax diagnostics (with an optional hint) and lint
warnings.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Hint(BaseModel):
    """A probable root cause inferred from a parser error."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human-readable hint text.")
    suspect_line: int | None = Field(
        default=None,
        description="1-based line most likely responsible for the error, if identified.",
    )
    suspect_pattern: str | None = Field(
        default=None,
        description="The character sequence suspected of causing the error (e.g. ',' or '(').",
    )


class SyntaxDiagnostic(BaseModel):
    """A parse failure located in the source text."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="1-based line of the error.")
    column: int = Field(..., ge=1, description="1-based column of the error.")
    message: str = Field(..., description="Rendered parser error message.")
    hint: Hint | None = Field(default=None, description="At most one inferred hint.")

    @property
    def severity(self) -> Severity:
        return Severity.ERROR


class LintWarning(BaseModel):
    """A style violation reported by a lint rule."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., description="Stable identifier of the rule that fired.")
    line: int = Field(default=1, ge=1, description="1-based line of the violation.")
    column: int = Field(default=1, ge=1, description="1-based column of the violation.")
    message: str = Field(default="", description="Human-readable description of the violation.")
    severity: Severity = Field(default=Severity.WARNING, description="How serious the violation is.")
