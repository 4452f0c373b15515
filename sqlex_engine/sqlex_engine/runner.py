"""Per-file pipeline shared by the ``check``, ``fix`` and ``lint`` commands.

Each file goes through read -> parse/tokenize -> analyse -> (optionally)
rewrite, sequentially and in input order.  Files are independent: a syntax
error or a read failure is recorded on that file's :class:`FileReport` and
processing continues with the next one.  The :class:`RunReport` decides the
overall outcome once every file has been seen.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from sqlex_engine.diagnostics.models import LintWarning, SyntaxDiagnostic
from sqlex_engine.diagnostics.syntax import check_document
from sqlex_engine.errors import FileReadError, FileWriteError
from sqlex_engine.fixer.corrector import fix_document
from sqlex_engine.i18n import Messages
from sqlex_engine.keywords import KeywordCase
from sqlex_engine.lint.engine import create_default_linter
from sqlex_engine.lint.models import LintConfig
from sqlex_engine.source.document import SourceDocument
from sqlex_engine.sql_toolkit import Dialect

logger = logging.getLogger(__name__)

FileCallback = Callable[["FileReport"], None]


class RunMode(str, Enum):
    """Which pipeline produced a report."""

    CHECK = "check"
    FIX = "fix"
    LINT = "lint"


class FixStatus(str, Enum):
    """What the fixer did with one file."""

    UNCHANGED = "unchanged"
    FIXED = "fixed"
    WOULD_FIX = "would_fix"
    UNFIXABLE = "unfixable"


class FileReport(BaseModel):
    """Outcome of processing a single SQL file."""

    path: str = Field(..., description="Path of the file as discovered.")
    diagnostics: list[SyntaxDiagnostic] = Field(
        default_factory=list,
        description="Syntax errors found in the file (at most one per parse).",
    )
    warnings: list[LintWarning] = Field(default_factory=list, description="Lint warnings, in rule order.")
    fix_status: FixStatus | None = Field(default=None, description="Fixer outcome; None outside fix mode.")
    original: str | None = Field(default=None, description="File content as read (check and fix modes).")
    corrected: str | None = Field(default=None, description="Corrected content (fix mode only).")
    read_error: str | None = Field(default=None, description="Why the file could not be read, if it could not.")
    write_error: str | None = Field(default=None, description="Why the corrected file could not be written.")
    duration_ms: int = Field(default=0, description="Processing time in milliseconds.")

    @property
    def has_io_error(self) -> bool:
        return self.read_error is not None or self.write_error is not None


class RunReport(BaseModel):
    """Aggregated outcome of one command over all discovered files."""

    mode: RunMode = Field(..., description="The pipeline that produced this report.")
    files: list[FileReport] = Field(default_factory=list, description="Per-file reports in input order.")
    duration_ms: int = Field(default=0, description="Total execution time in milliseconds.")

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_errors(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def total_warnings(self) -> int:
        return sum(len(f.warnings) for f in self.files)

    @property
    def io_errors(self) -> int:
        return sum(1 for f in self.files if f.has_io_error)

    @property
    def failed(self) -> bool:
        """Whether the run should exit with a failure status.

        Any read or write failure fails every mode.  Beyond that, ``check``
        fails on syntax errors and ``lint`` on warnings; ``fix`` treats
        syntax errors as unfixable files, not failures.
        """
        if self.io_errors:
            return True
        if self.mode == RunMode.CHECK:
            return self.total_errors > 0
        if self.mode == RunMode.LINT:
            return self.total_warnings > 0
        return False


# ---------------------------------------------------------------------------
# Discovery and I/O
# ---------------------------------------------------------------------------


def collect_sql_files(paths: Iterable[Path | str]) -> list[Path]:
    """Expand *paths* into the ordered list of SQL files to process.

    A file is taken when its name ends in ``.sql``; a directory is walked
    recursively for ``*.sql`` files in sorted order.  Paths that do not
    exist are ignored, and a file reached twice is only listed once.
    """
    files: list[Path] = []
    seen: set[Path] = set()

    def _add(candidate: Path) -> None:
        if candidate not in seen:
            seen.add(candidate)
            files.append(candidate)

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            for entry in sorted(path.rglob("*.sql")):
                if entry.is_file():
                    _add(entry)
        elif path.is_file() and path.name.endswith(".sql"):
            _add(path)
        else:
            logger.debug("Ignoring path %s: not a SQL file or directory", path)

    return files


def read_document(path: Path) -> SourceDocument:
    """Read *path* as UTF-8 into a :class:`SourceDocument`.

    Line endings are kept as they are on disk so that rewrites stay
    byte-for-byte faithful outside the edited spans.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, str(exc)) from exc
    return SourceDocument(text, path=str(path))


def write_text(path: Path, text: str) -> None:
    """Write *text* back to *path* without newline translation.

    Raises:
        FileWriteError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise FileWriteError(path, str(exc)) from exc


# ---------------------------------------------------------------------------
# Pipelines
# ---------------------------------------------------------------------------


def _run(
    mode: RunMode,
    paths: Iterable[Path | str],
    process: Callable[[SourceDocument, FileReport], None],
    on_file: FileCallback | None,
) -> RunReport:
    start = time.monotonic()
    report = RunReport(mode=mode)

    for path in collect_sql_files(paths):
        file_start = time.monotonic()
        file_report = FileReport(path=str(path))
        try:
            document = read_document(path)
        except FileReadError as exc:
            logger.debug("Read failed: %s", exc, extra={"path": str(path)})
            file_report.read_error = exc.reason
        else:
            process(document, file_report)

        file_report.duration_ms = int((time.monotonic() - file_start) * 1000)
        logger.debug(
            "%s %s in %dms",
            mode.value,
            path,
            file_report.duration_ms,
            extra={"path": str(path)},
        )
        report.files.append(file_report)
        if on_file is not None:
            on_file(file_report)

    report.duration_ms = int((time.monotonic() - start) * 1000)
    return report


def check_paths(
    paths: Iterable[Path | str],
    dialect: Dialect = Dialect.GENERIC,
    messages: Messages | None = None,
    on_file: FileCallback | None = None,
) -> RunReport:
    """Report syntax errors, with hints, for every SQL file under *paths*."""

    def _process(document: SourceDocument, file_report: FileReport) -> None:
        file_report.original = document.text
        file_report.diagnostics = check_document(document, dialect, messages)

    return _run(RunMode.CHECK, paths, _process, on_file)


def fix_paths(
    paths: Iterable[Path | str],
    dialect: Dialect = Dialect.GENERIC,
    keyword_case: KeywordCase = KeywordCase.UPPER,
    *,
    dry_run: bool = False,
    messages: Messages | None = None,
    on_file: FileCallback | None = None,
) -> RunReport:
    """Normalise keyword case and terminators for every SQL file under *paths*.

    Files with syntax errors are left untouched and reported as unfixable.
    A file is only written when its content actually changes.
    """

    def _process(document: SourceDocument, file_report: FileReport) -> None:
        file_report.original = document.text
        diagnostics = check_document(document, dialect, messages)
        if diagnostics:
            file_report.diagnostics = diagnostics
            file_report.fix_status = FixStatus.UNFIXABLE
            return

        result = fix_document(document, dialect, keyword_case)
        file_report.corrected = result.corrected
        if not result.changed:
            file_report.fix_status = FixStatus.UNCHANGED
        elif dry_run:
            file_report.fix_status = FixStatus.WOULD_FIX
        else:
            try:
                write_text(Path(document.path or file_report.path), result.corrected)
            except FileWriteError as exc:
                logger.debug("Write failed: %s", exc, extra={"path": file_report.path})
                file_report.write_error = exc.reason
                return
            file_report.fix_status = FixStatus.FIXED

    return _run(RunMode.FIX, paths, _process, on_file)


def lint_paths(
    paths: Iterable[Path | str],
    dialect: Dialect = Dialect.GENERIC,
    config: LintConfig | None = None,
    messages: Messages | None = None,
    on_file: FileCallback | None = None,
) -> RunReport:
    """Run the built-in lint rules over every SQL file under *paths*."""
    linter = create_default_linter(config, messages)

    def _process(document: SourceDocument, file_report: FileReport) -> None:
        file_report.warnings = linter.lint(document, dialect)

    return _run(RunMode.LINT, paths, _process, on_file)
