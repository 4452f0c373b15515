"""sqlex CLI application -- Typer-based SQL syntax checker and linter.

Provides the ``check``, ``fix`` and ``lint`` commands.  Human-readable
output goes to *stdout* via Rich; log records go to *stderr*.  Exit codes:
0 on success, 1 when a run reports findings or file failures, 2 on a
configuration error (unknown dialect, keyword case or output format).
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from sqlex_engine.config import Settings, load_settings
from sqlex_engine.i18n import Messages
from sqlex_engine.logging_config import configure_logging
from sqlex_engine.sql_toolkit import UnsupportedDialectError

EXIT_FINDINGS = 1
EXIT_CONFIG_ERROR = 2

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="sqlex",
    help="sqlex - SQL syntax checker and linter",
    no_args_is_help=True,
)
console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True)

# Register the check, fix, and lint commands.
from cli.commands.check import check_command  # noqa: E402
from cli.commands.fix import fix_command  # noqa: E402
from cli.commands.lint import lint_command  # noqa: E402

app.command(name="check")(check_command)
app.command(name="fix")(fix_command)
app.command(name="lint")(lint_command)

# Mutable global options populated by the Typer callback.
_lang: str | None = None
_verbose: bool = False


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    lang: str | None = typer.Option(
        None,
        "--lang",
        help="Language for messages (en, ja).  Defaults to the locale environment.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """Global options applied to every command."""
    global _lang, _verbose  # noqa: PLW0603
    _lang = lang
    _verbose = verbose


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def bootstrap(**overrides: object) -> tuple[Settings, Messages]:
    """Resolve settings once for this invocation and configure logging.

    Command-line values take precedence over ``SQLEX_*`` environment
    variables.  Configuration errors terminate the process with exit code 2.
    """
    try:
        settings = load_settings(lang=_lang, **overrides)
    except UnsupportedDialectError as exc:
        err_console.print(Text(str(exc), style="red"))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc
    except ValidationError as exc:
        err_console.print(Text(f"Invalid configuration: {exc.errors()[0]['msg']}", style="red"))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc

    configure_logging(
        verbose=_verbose or settings.debug,
        structured=settings.structured_logging,
    )
    return settings, Messages(settings.lang)
