"""User-facing message catalog (English and Japanese).

The active language is chosen once at startup (see
:func:`sqlex_engine.config.load_settings`) and a :class:`Messages` instance
is passed explicitly to every component that renders text.
"""

from __future__ import annotations

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "ja")

_CATALOG: dict[str, dict[str, str]] = {
    "en": {
        "syntax_error": "Syntax error (line {line}, col {column}): {message}",
        "file_ok": "✓ {path} - OK",
        "file_error": "✗ {path} - {count} error(s)",
        "file_warnings": "⚠ {path} - {count} warning(s)",
        "file_unreadable": "✗ {path} - cannot read file: {reason}",
        "file_unwritable": "✗ {path} - cannot write file: {reason}",
        "summary": "Total: {files} file(s), {errors} error(s)",
        "lint_summary": "Total: {files} file(s), {warnings} warning(s)",
        "no_files": "No SQL files found",
        "would_fix": "Would fix: {path}",
        "fixed": "Fixed: {path}",
        "cannot_fix": "Cannot fix file with syntax errors: {message}",
        "keyword_case": "Keyword '{actual}' should be '{expected}'",
        "no_select_star": "Avoid SELECT *. Specify columns explicitly",
        "require_table_alias": "Table '{table}' should have an alias",
        "trailing_semicolon": "Missing trailing semicolon",
        "lint_warning": "[{rule}] line {line}:{column} - {message}",
        "hint_trailing_comma": "Line {line} may have a trailing comma that should be removed",
        "hint_check_parentheses": "Check for mismatched parentheses",
        "hint_missing_parentheses": "Function call may require parentheses",
        "hint_unclosed_parentheses": "{count} unclosed parenthesis(es) found",
        "hint_unclosed_quote": "Unclosed quote found",
    },
    "ja": {
        "syntax_error": "構文エラー ({line}行目, {column}列目): {message}",
        "file_ok": "✓ {path} - 問題なし",
        "file_error": "✗ {path} - {count}件のエラー",
        "file_warnings": "⚠ {path} - {count}件の警告",
        "file_unreadable": "✗ {path} - ファイルを読み込めません: {reason}",
        "file_unwritable": "✗ {path} - ファイルに書き込めません: {reason}",
        "summary": "合計: {files}ファイル, {errors}件のエラー",
        "lint_summary": "合計: {files}ファイル, {warnings}件の警告",
        "no_files": "SQLファイルが見つかりません",
        "would_fix": "修正予定: {path}",
        "fixed": "修正完了: {path}",
        "cannot_fix": "構文エラーのあるファイルは修正できません: {message}",
        "keyword_case": "キーワード '{actual}' は '{expected}' であるべきです",
        "no_select_star": "SELECT * の使用は推奨されません。カラムを明示的に指定してください",
        "require_table_alias": "テーブル '{table}' にはエイリアスを指定してください",
        "trailing_semicolon": "文末にセミコロンがありません",
        "lint_warning": "[{rule}] {line}行目:{column}列目 - {message}",
        "hint_trailing_comma": "{line}行目の末尾に余計なカンマがある可能性があります",
        "hint_check_parentheses": "括弧の対応を確認してください",
        "hint_missing_parentheses": "関数呼び出しに括弧が必要かもしれません",
        "hint_unclosed_parentheses": "閉じ括弧が{count}個不足しています",
        "hint_unclosed_quote": "閉じられていない引用符があります",
    },
}


def normalize_language(lang: str | None) -> str:
    """Map a locale-ish string (``ja_JP.UTF-8``, ``en``) to a catalog key."""
    if not lang:
        return "en"
    prefix = lang.strip().lower().replace("-", "_").split("_", 1)[0]
    return prefix if prefix in _CATALOG else "en"


class Messages:
    """Render catalog strings in one language.

    Unknown languages fall back to English.
    """

    def __init__(self, lang: str = "en") -> None:
        self.lang = normalize_language(lang)
        self._strings = _CATALOG[self.lang]

    def __repr__(self) -> str:
        return f"Messages(lang={self.lang!r})"

    def _render(self, key: str, **values: object) -> str:
        return self._strings[key].format(**values)

    # -- file status ---------------------------------------------------------

    def syntax_error(self, line: int, column: int, message: str) -> str:
        return self._render("syntax_error", line=line, column=column, message=message)

    def file_ok(self, path: str) -> str:
        return self._render("file_ok", path=path)

    def file_error(self, path: str, count: int) -> str:
        return self._render("file_error", path=path, count=count)

    def file_warnings(self, path: str, count: int) -> str:
        return self._render("file_warnings", path=path, count=count)

    def file_unreadable(self, path: str, reason: str) -> str:
        return self._render("file_unreadable", path=path, reason=reason)

    def file_unwritable(self, path: str, reason: str) -> str:
        return self._render("file_unwritable", path=path, reason=reason)

    def summary(self, files: int, errors: int) -> str:
        return self._render("summary", files=files, errors=errors)

    def lint_summary(self, files: int, warnings: int) -> str:
        return self._render("lint_summary", files=files, warnings=warnings)

    def no_files(self) -> str:
        return self._render("no_files")

    def would_fix(self, path: str) -> str:
        return self._render("would_fix", path=path)

    def fixed(self, path: str) -> str:
        return self._render("fixed", path=path)

    def cannot_fix(self, message: str) -> str:
        return self._render("cannot_fix", message=message)

    # -- lint ------------------------------------------------------------------

    def keyword_case_error(self, actual: str, expected: str) -> str:
        return self._render("keyword_case", actual=actual, expected=expected)

    def no_select_star_error(self) -> str:
        return self._render("no_select_star")

    def require_table_alias_error(self, table: str) -> str:
        return self._render("require_table_alias", table=table)

    def trailing_semicolon_error(self) -> str:
        return self._render("trailing_semicolon")

    def lint_warning(self, rule: str, line: int, column: int, message: str) -> str:
        return self._render("lint_warning", rule=rule, line=line, column=column, message=message)

    # -- hints -----------------------------------------------------------------

    def hint_trailing_comma(self, line: int) -> str:
        return self._render("hint_trailing_comma", line=line)

    def hint_check_parentheses(self) -> str:
        return self._render("hint_check_parentheses")

    def hint_missing_parentheses(self) -> str:
        return self._render("hint_missing_parentheses")

    def hint_unclosed_parentheses(self, count: int) -> str:
        return self._render("hint_unclosed_parentheses", count=count)

    def hint_unclosed_quote(self) -> str:
        return self._render("hint_unclosed_quote")
