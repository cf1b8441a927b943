from __future__ import annotations

"""
Domain Error Taxonomy.

Every failure of the analysis is fatal: the engine propagates these
exceptions untouched and the interface layer decides how to report them.
"""

from typing import Optional


class DiskTraceError(Exception):
    """
    Base class for all analysis failures.

    Attributes:
        line_number: 1-based transcript line that triggered the error, if known.
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InputReadError(DiskTraceError):
    """The transcript file is missing, unreadable or not valid text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to read transcript '{path}': {reason}")


class InvalidCommandError(DiskTraceError):
    """A command line carries an unknown command or a missing argument."""


class DirectoryLookupError(DiskTraceError, LookupError):
    """The working directory path references a directory absent from the tree."""


class InvalidInsertionError(DiskTraceError):
    """An item was added to a file node."""
