"""``sqlex lint`` -- report style violations in SQL files."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from sqlex_engine.lint.models import LintConfig
from sqlex_engine.runner import FileReport, lint_paths

logger = logging.getLogger(__name__)


def lint_command(
    paths: list[Path] = typer.Argument(
        ...,
        help="Files or directories to lint.",
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
        help="Required keyword case (upper, lower, ignore).",
    ),
    no_select_star: bool = typer.Option(
        True,
        "--no-select-star/--allow-select-star",
        help="Report SELECT * and table.* projections.",
    ),
    require_alias: bool = typer.Option(
        False,
        "--require-alias",
        help="Require an alias on every FROM/JOIN table.",
    ),
) -> None:
    """Lint SQL files for style issues.

    Examples::

        sqlex lint queries/
        sqlex lint report.sql --keyword-case lower --require-alias
    """
    from cli.app import EXIT_FINDINGS, bootstrap, console
    from cli.display import display_lint_file, display_no_files, display_run_summary

    settings, messages = bootstrap(dialect=dialect, keyword_case=keyword_case)
    config = LintConfig(
        keyword_case=settings.keyword_case,
        no_select_star=no_select_star,
        require_table_alias=require_alias,
        trailing_semicolon=True,
    )

    def _on_file(file_report: FileReport) -> None:
        display_lint_file(console, file_report, messages)

    report = lint_paths(paths, settings.dialect, config, messages, on_file=_on_file)
    if not report.files:
        display_no_files(console, messages)
        return

    display_run_summary(console, report, messages)
    logger.debug("lint finished in %dms", report.duration_ms)
    if report.failed:
        raise typer.Exit(code=EXIT_FINDINGS)
