"""``sqlex check`` -- report syntax errors in SQL files.

Each file is parsed with the selected dialect.  A parse failure is printed
with its location, an inferred hint when one applies and a source excerpt
around the error.  The command exits with status 1 when any file has a
syntax error or could not be read.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from sqlex_engine.runner import FileReport, check_paths

logger = logging.getLogger(__name__)


def check_command(
    paths: list[Path] = typer.Argument(
        ...,
        help="Files or directories to check.",
    ),
    dialect: str | None = typer.Option(
        None,
        "--dialect",
        "-d",
        help="SQL dialect (generic, mysql, postgres, sqlite, bigquery).",
    ),
) -> None:
    """Check SQL files for syntax errors.

    Examples::

        sqlex check queries/
        sqlex check report.sql --dialect postgres
    """
    from cli.app import EXIT_FINDINGS, bootstrap, console
    from cli.display import display_check_file, display_no_files, display_run_summary

    settings, messages = bootstrap(dialect=dialect)

    def _on_file(file_report: FileReport) -> None:
        display_check_file(console, file_report, messages)

    report = check_paths(paths, settings.dialect, messages, on_file=_on_file)
    if not report.files:
        display_no_files(console, messages)
        return

    display_run_summary(console, report, messages)
    logger.debug("check finished in %dms", report.duration_ms)
    if report.failed:
        raise typer.Exit(code=EXIT_FINDINGS)
