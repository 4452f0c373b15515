"""Rich output formatting for the sqlex CLI.

All functions write to a :class:`rich.console.Console` instance.  SQL text
and file paths are wrapped in :class:`rich.text.Text` rather than markup
strings so that brackets in user content are never interpreted as styles.
"""

from __future__ import annotations

import difflib

from rich.console import Console
from rich.text import Text

from sqlex_engine.diagnostics.models import LintWarning, SyntaxDiagnostic
from sqlex_engine.i18n import Messages
from sqlex_engine.runner import FileReport, FixStatus, RunMode, RunReport
from sqlex_engine.source.document import split_lines

# ---------------------------------------------------------------------------
# Source excerpt
# ---------------------------------------------------------------------------


def render_source_excerpt(
    source: str,
    line: int,
    column: int,
    suspect_line: int | None = None,
    context: int = 2,
) -> Text:
    """Render the lines around an error with a caret under the error column.

    Parameters
    ----------
    source:
        Full document text.
    line, column:
        1-based error location.  The caret is clamped to the end of the line.
    suspect_line:
        Line flagged by a hint.  It is marked with ``>`` and pulled into the
        excerpt when it falls outside the context window.
    context:
        Number of lines shown before and after the error line.
    """
    lines = split_lines(source)
    excerpt = Text()
    if not lines:
        return excerpt

    error_line = min(max(line, 1), len(lines))
    start = max(1, error_line - context)
    end = min(len(lines), error_line + context)
    if suspect_line is not None and 1 <= suspect_line <= len(lines):
        start = min(start, suspect_line)
        end = max(end, suspect_line)

    width = len(str(end))
    for number in range(start, end + 1):
        content = lines[number - 1]
        gutter = f"{number:>{width}}"
        marker = ">" if number == suspect_line else " "
        if number == error_line:
            excerpt.append(f"{marker}{gutter} | ", style="bold red")
            excerpt.append(content + "\n")
            caret_col = min(max(column, 1) - 1, len(content))
            excerpt.append(f" {' ' * width} | ", style="red")
            excerpt.append(" " * caret_col + "^\n", style="bold red")
        elif number == suspect_line:
            excerpt.append(f"{marker}{gutter} | ", style="bold yellow")
            excerpt.append(content + "\n", style="yellow")
        else:
            excerpt.append(f"{marker}{gutter} | ", style="dim")
            excerpt.append(content + "\n", style="dim")

    excerpt.rstrip()
    return excerpt


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


def display_syntax_error(
    console: Console,
    diagnostic: SyntaxDiagnostic,
    source: str,
    messages: Messages,
) -> None:
    """Print a syntax error, its hint and the highlighted source excerpt."""
    console.print(Text("  " + messages.syntax_error(diagnostic.line, diagnostic.column, diagnostic.message)))
    suspect_line = None
    if diagnostic.hint is not None:
        console.print(Text("  💡 " + diagnostic.hint.message, style="yellow"))
        suspect_line = diagnostic.hint.suspect_line
    excerpt = render_source_excerpt(source, diagnostic.line, diagnostic.column, suspect_line)
    if excerpt.plain:
        console.print(excerpt)
    console.print()


def display_lint_warning(console: Console, warning: LintWarning, messages: Messages) -> None:
    console.print(Text(messages.lint_warning(warning.rule_id, warning.line, warning.column, warning.message)))


def _display_io_error(console: Console, file_report: FileReport, messages: Messages) -> bool:
    if file_report.read_error is not None:
        console.print(Text(messages.file_unreadable(file_report.path, file_report.read_error), style="red"))
        return True
    if file_report.write_error is not None:
        console.print(Text(messages.file_unwritable(file_report.path, file_report.write_error), style="red"))
        return True
    return False


def display_check_file(console: Console, file_report: FileReport, messages: Messages) -> None:
    """Print the outcome of checking one file."""
    if _display_io_error(console, file_report, messages):
        return
    if not file_report.diagnostics:
        console.print(Text(messages.file_ok(file_report.path), style="green"))
        return

    console.print(Text(messages.file_error(file_report.path, len(file_report.diagnostics)), style="red"))
    for diagnostic in file_report.diagnostics:
        display_syntax_error(console, diagnostic, file_report.original or "", messages)


def display_lint_file(console: Console, file_report: FileReport, messages: Messages) -> None:
    """Print the outcome of linting one file."""
    if _display_io_error(console, file_report, messages):
        return
    if not file_report.warnings:
        console.print(Text(messages.file_ok(file_report.path), style="green"))
        return

    console.print(Text(messages.file_warnings(file_report.path, len(file_report.warnings)), style="yellow"))
    for warning in file_report.warnings:
        display_lint_warning(console, warning, messages)


# ---------------------------------------------------------------------------
# Fix output
# ---------------------------------------------------------------------------


def display_summary_diff(console: Console, old: str, new: str) -> None:
    """List changed lines as ``- Line N: old`` / ``+ Line N: new`` pairs.

    Removed lines are numbered in the original text, added lines in the
    corrected text.
    """
    old_lines = split_lines(old)
    new_lines = split_lines(new)
    matcher = difflib.SequenceMatcher(a=old_lines, b=new_lines, autojunk=False)

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        for number in range(i1, i2):
            console.print(Text(f"  - Line {number + 1}: {old_lines[number]}", style="red"))
        for number in range(j1, j2):
            console.print(Text(f"  + Line {number + 1}: {new_lines[number]}", style="green"))


_DIFF_STYLES: dict[str, str] = {
    "---": "red",
    "+++": "green",
    "@@": "cyan",
    "-": "red",
    "+": "green",
}


def _diff_style(line: str) -> str:
    for prefix, style in _DIFF_STYLES.items():
        if line.startswith(prefix):
            return style
    return ""


def display_unified_diff(console: Console, path: str, old: str, new: str) -> None:
    """Print a unified diff (three lines of context) between *old* and *new*."""
    diff = difflib.unified_diff(
        split_lines(old),
        split_lines(new),
        fromfile=path,
        tofile=path,
        n=3,
        lineterm="",
    )
    for line in diff:
        console.print(Text(line, style=_diff_style(line)))


def display_fix_file(
    console: Console,
    file_report: FileReport,
    messages: Messages,
    output_format: str = "summary",
) -> None:
    """Print the outcome of fixing one file.

    Unchanged files print nothing.
    """
    if _display_io_error(console, file_report, messages):
        return

    status = file_report.fix_status
    if status == FixStatus.UNFIXABLE:
        console.print(Text(messages.file_error(file_report.path, len(file_report.diagnostics)), style="red"))
        for diagnostic in file_report.diagnostics:
            console.print(Text("  " + messages.cannot_fix(diagnostic.message)))
    elif status == FixStatus.FIXED:
        console.print(Text(messages.fixed(file_report.path), style="green"))
    elif status == FixStatus.WOULD_FIX:
        old = file_report.original or ""
        new = file_report.corrected or ""
        if output_format == "diff":
            display_unified_diff(console, file_report.path, old, new)
        else:
            console.print(Text(messages.would_fix(file_report.path), style="yellow"))
            display_summary_diff(console, old, new)


# ---------------------------------------------------------------------------
# Run summary
# ---------------------------------------------------------------------------


def display_no_files(console: Console, messages: Messages) -> None:
    console.print(Text(messages.no_files(), style="yellow"))


def display_run_summary(console: Console, report: RunReport, messages: Messages) -> None:
    """Print the final totals line for a check or lint run."""
    if report.mode == RunMode.LINT:
        console.print(Text(messages.lint_summary(report.total_files, report.total_warnings)))
    elif report.mode == RunMode.CHECK:
        console.print(Text(messages.summary(report.total_files, report.total_errors)))
