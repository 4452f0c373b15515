"""Token-aware keyword-case and terminator correction.

The corrector never re-renders SQL from a tree.  It computes a minimal set of
in-place :class:`Replacement` edits against the original text, one per
keyword whose casing differs from the policy, and applies them from the
highest offset down so that earlier offsets stay valid while later text is
rewritten.  Everything else (spacing, comments, identifiers, literals) is
preserved byte for byte.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlex_engine.keywords import KeywordCase, apply_case, is_reserved_keyword
from sqlex_engine.source.document import SourceDocument
from sqlex_engine.source.locate import locate_tokens
from sqlex_engine.sql_toolkit import Dialect, SqlToken, SqlTokenizeError, get_sql_toolkit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class Replacement:
    """Substitute ``length`` characters at ``offset`` with ``text``."""

    offset: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of one fix pass over a document."""

    original: str
    corrected: str
    replacements: tuple[Replacement, ...] = ()
    keyword_case_skipped: bool = False
    notes: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.corrected != self.original


def compute_keyword_replacements(
    document: SourceDocument,
    tokens: list[SqlToken],
    policy: KeywordCase,
) -> list[Replacement]:
    """Return one replacement per reserved keyword whose case violates *policy*.

    Quoted identifiers are never touched, even when their text is a keyword.
    """
    if policy == KeywordCase.IGNORE:
        return []

    replacements: list[Replacement] = []
    for token, offset in locate_tokens(document, tokens):
        if not token.is_word or token.quoted or not is_reserved_keyword(token.text):
            continue
        expected = apply_case(token.text, policy)
        if expected == token.text:
            continue
        if document.text[offset : offset + len(token.text)] != token.text:
            logger.debug("Token %r not found at offset %d; skipping", token.text, offset)
            continue
        replacements.append(Replacement(offset=offset, length=len(token.text), text=expected))
    return replacements


def apply_replacements(text: str, replacements: list[Replacement]) -> str:
    """Apply non-overlapping *replacements* to *text*.

    Edits are applied in descending offset order: rewriting a later span
    never moves an earlier one, so every offset still points at its
    original target even when replacement lengths differ.

    Raises:
        ValueError: If two replacements overlap.
    """
    ordered = sorted(replacements, key=lambda r: r.offset)
    for previous, current in zip(ordered, ordered[1:]):
        if current.offset < previous.end:
            raise ValueError(
                f"Overlapping replacements at offsets {previous.offset} and {current.offset}"
            )

    result = text
    for replacement in reversed(ordered):
        result = result[: replacement.offset] + replacement.text + result[replacement.end :]
    return result


def normalize_terminator(text: str) -> str:
    """Strip trailing whitespace and end the document with ``;`` and a newline.

    Whitespace-only text is returned unchanged.
    """
    trimmed = text.rstrip()
    if not trimmed:
        return text
    if not trimmed.endswith(";"):
        trimmed += ";"
    return trimmed + "\n"


def fix_document(
    document: SourceDocument,
    dialect: Dialect = Dialect.GENERIC,
    keyword_case: KeywordCase = KeywordCase.UPPER,
) -> FixResult:
    """Normalise keyword case and the trailing terminator of *document*.

    A tokenizer failure skips keyword-case correction for this document;
    terminator normalisation still runs.
    """
    notes: list[str] = []
    replacements: list[Replacement] = []
    skipped = False

    if keyword_case != KeywordCase.IGNORE:
        try:
            tokens = get_sql_toolkit().tokenizer.tokenize(document.text, dialect)
        except SqlTokenizeError as exc:
            logger.debug("Tokenization failed for %s: %s", document.path or "<text>", exc)
            notes.append(f"keyword case skipped: {exc}")
            skipped = True
        else:
            replacements = compute_keyword_replacements(document, tokens, keyword_case)

    corrected = normalize_terminator(apply_replacements(document.text, replacements))
    return FixResult(
        original=document.text,
        corrected=corrected,
        replacements=tuple(replacements),
        keyword_case_skipped=skipped,
        notes=notes,
    )


def fix(
    document: SourceDocument,
    dialect: Dialect = Dialect.GENERIC,
    keyword_case: KeywordCase = KeywordCase.UPPER,
) -> str:
    """Return the corrected text of *document*."""
    return fix_document(document, dialect, keyword_case).corrected
