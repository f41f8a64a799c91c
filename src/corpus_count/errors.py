"""Error types raised by corpus_count."""

from __future__ import annotations


class CorpusCountError(Exception):
    """Base class for fatal corpus_count errors."""

    exit_code = 1


class ConfigurationError(CorpusCountError, ValueError):
    """Invalid or contradictory options, detected before any input is read."""

    exit_code = 2


class CorpusIOError(CorpusCountError, OSError):
    """The corpus could not be read or an output could not be written."""

    exit_code = 1

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]
