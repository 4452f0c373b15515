"""``sqlex fix`` -- normalise keyword case and statement terminators.

Only keyword casing and the trailing ``;`` are rewritten; spacing, comments,
identifiers and literals are left exactly as they were.  Files with syntax
errors are reported as unfixable and never modified.  With ``--dry-run`` the
changes are shown instead of written, either as a per-line summary or as a
unified diff.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.text import Text

from sqlex_engine.runner import FileReport, fix_paths

logger = logging.getLogger(__name__)

_FORMATS: tuple[str, ...] = ("summary", "diff")


def fix_command(
    paths: list[Path] = typer.Argument(
        ...,
        help="Files or directories to fix.",
    ),
    dialect: str | None = typer.Option(
        None,
        "--dialect",
        "-d",
        help="SQL dialect (generic, mysql, postgres, sqlite, bigquery).",
    ),
    keyword_case: str | None = typer.Option(
        None,
        "--keyword-case",
        help="Keyword case to apply (upper, lower, ignore).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be changed without modifying files.",
    ),
    output_format: str = typer.Option(
        "summary",
        "--format",
        "-f",
        help="Output format for --dry-run: summary or diff.",
    ),
) -> None:
    """Fix keyword case and trailing semicolons in SQL files.

    Examples::

        sqlex fix queries/
        sqlex fix report.sql --dry-run --format diff
    """
    from cli.app import EXIT_CONFIG_ERROR, EXIT_FINDINGS, bootstrap, console, err_console
    from cli.display import display_fix_file, display_no_files

    if output_format not in _FORMATS:
        err_console.print(Text(f"Invalid format '{output_format}'. Must be one of: summary, diff.", style="red"))
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    settings, messages = bootstrap(dialect=dialect, keyword_case=keyword_case)

    def _on_file(file_report: FileReport) -> None:
        display_fix_file(console, file_report, messages, output_format)

    report = fix_paths(
        paths,
        settings.dialect,
        settings.keyword_case,
        dry_run=dry_run,
        messages=messages,
        on_file=_on_file,
    )
    if not report.files:
        display_no_files(console, messages)
        return

    logger.debug("fix finished in %dms", report.duration_ms)
    if report.failed:
        raise typer.Exit(code=EXIT_FINDINGS)
