"""Exceptions raised by the sqlex file pipeline.

Front-end failures live in :mod:`sqlex_engine.sql_toolkit`; these cover the
file system side of a run.
"""

from __future__ import annotations

from pathlib import Path


class SqlexError(Exception):
    """Base exception for the sqlex runner."""


class FileReadError(SqlexError):
    """A SQL file could not be read or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class FileWriteError(SqlexError):
    """A corrected SQL file could not be written back."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot write {self.path}: {reason}")
