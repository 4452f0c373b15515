"""Heuristic hints for parser errors.

The front-end's error objects do not expose consistent structured fields
across dialects, so the hint engine works from the rendered error message
plus the raw source text.  Heuristics are an ordered decision list: the
first rule that produces a hint wins, and at most one hint is returned.

Rules, in priority order:

1. *Trailing comma before a clause* -- the message names what was expected
   and what was found.  The nearest clause-keyword line at or above the
   error line is located; if the line before it ends with a comma, that
   line is the suspect.  Otherwise the line right before the error line is
   checked for a trailing comma.
2. *Mismatched parentheses* -- a closing parenthesis was expected.
3. *Missing call parentheses* -- an opening parenthesis was expected.
4. *Unexpected end of input* -- reports unbalanced ``(`` counts, then an odd
   number of single quotes.

Rule 1 falls through to the later rules when its line-level preconditions
do not hold, so a message matching several triggers resolves in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sqlex_engine.diagnostics.models import Hint
from sqlex_engine.i18n import Messages
from sqlex_engine.keywords import CLAUSE_KEYWORDS
from sqlex_engine.source.document import split_lines

logger = logging.getLogger(__name__)

# Both phrasing families are recognised: ``Expected: X, found: Y`` and the
# sqlglot forms ``Expecting X`` / ``Expected X but got Y`` / ``Unexpected token``.
_EXPECTED_MARKERS: tuple[str, ...] = ("Expected:", "Expected ", "Expecting ")
_FOUND_MARKERS: tuple[str, ...] = ("found:", "but got", "Unexpected token")
_CLOSING_PAREN_MARKERS: tuple[str, ...] = ("Expected: )", "Expecting )")
_OPENING_PAREN_MARKERS: tuple[str, ...] = ("Expected: (", "Expecting (")
_END_OF_INPUT_MARKERS: tuple[str, ...] = ("EOF", "end of", "Error tokenizing")


@dataclass(frozen=True, slots=True)
class _ErrorContext:
    message: str
    source: str
    lines: list[str]
    error_line: int
    messages: Messages


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)


def _ends_with_comma(line: str) -> bool:
    return line.strip().endswith(",")


def _trailing_comma_hint(ctx: _ErrorContext, line: int) -> Hint:
    return Hint(
        message=ctx.messages.hint_trailing_comma(line),
        suspect_line=line,
        suspect_pattern=",",
    )


def _find_clause_line(lines: list[str], error_line: int) -> int | None:
    """Nearest line at or above *error_line* that starts with a clause keyword."""
    for idx in range(error_line - 1, -1, -1):
        if lines[idx].strip().upper().startswith(CLAUSE_KEYWORDS):
            return idx + 1
    return None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _rule_trailing_comma(ctx: _ErrorContext) -> Hint | None:
    if not (_contains_any(ctx.message, _EXPECTED_MARKERS) and _contains_any(ctx.message, _FOUND_MARKERS)):
        return None
    if not 1 < ctx.error_line <= len(ctx.lines):
        return None

    clause_line = _find_clause_line(ctx.lines, ctx.error_line)
    if clause_line is not None and clause_line > 1:
        if _ends_with_comma(ctx.lines[clause_line - 2]):
            return _trailing_comma_hint(ctx, clause_line - 1)

    # The error may sit on the clause line itself.
    if _ends_with_comma(ctx.lines[ctx.error_line - 2]):
        return _trailing_comma_hint(ctx, ctx.error_line - 1)

    return None


def _rule_closing_paren(ctx: _ErrorContext) -> Hint | None:
    if not _contains_any(ctx.message, _CLOSING_PAREN_MARKERS):
        return None
    return Hint(message=ctx.messages.hint_check_parentheses())


def _rule_call_paren(ctx: _ErrorContext) -> Hint | None:
    if not _contains_any(ctx.message, _OPENING_PAREN_MARKERS):
        return None
    return Hint(message=ctx.messages.hint_missing_parentheses())


def _rule_end_of_input(ctx: _ErrorContext) -> Hint | None:
    if not _contains_any(ctx.message, _END_OF_INPUT_MARKERS):
        return None

    unclosed = ctx.source.count("(") - ctx.source.count(")")
    if unclosed > 0:
        return Hint(
            message=ctx.messages.hint_unclosed_parentheses(unclosed),
            suspect_pattern="(",
        )

    if ctx.source.count("'") % 2 != 0:
        return Hint(
            message=ctx.messages.hint_unclosed_quote(),
            suspect_pattern="'",
        )

    return None


_RULES: tuple[Callable[[_ErrorContext], Hint | None], ...] = (
    _rule_trailing_comma,
    _rule_closing_paren,
    _rule_call_paren,
    _rule_end_of_input,
)


def analyze_error(
    message: str,
    source: str,
    error_line: int,
    messages: Messages | None = None,
) -> Hint | None:
    """Infer a probable cause for a parser error.

    Parameters
    ----------
    message:
        The rendered parser error message.
    source:
        The full source text that failed to parse.
    error_line:
        1-based line the error was reported on.
    messages:
        Catalog used to render the hint text.  Defaults to English.

    Returns
    -------
    Hint | None
        The hint from the first matching rule, or ``None`` when no rule
        applies.
    """
    ctx = _ErrorContext(
        message=message,
        source=source,
        lines=split_lines(source),
        error_line=error_line,
        messages=messages or Messages(),
    )
    for rule in _RULES:
        hint = rule(ctx)
        if hint is not None:
            logger.debug("Hint rule %s matched: %s", rule.__name__, hint.message)
            return hint
    return None
