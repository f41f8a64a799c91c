"""Corpus input and count output."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from corpus_count.errors import CorpusIOError

STDIO = "-"


def _is_stdio(path: str | None) -> bool:
    return path is None or path == STDIO


@contextmanager
def open_input(path: str | None) -> Iterator[Iterable[str]]:
    """Yield the lines of the corpus at ``path``, or of stdin."""
    if _is_stdio(path):
        yield sys.stdin
        return
    try:
        handle = Path(path).open("r", encoding="utf-8")
    except OSError as exc:
        raise CorpusIOError(f"Can't open corpus {path} for reading: {exc.strerror or exc}", path=path) from exc
    with handle:
        yield _read_lines(handle, path)


def _read_lines(handle: TextIO, path: str) -> Iterator[str]:
    try:
        yield from handle
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusIOError(f"Can't read corpus {path}: {exc}", path=path) from exc


@contextmanager
def open_output(path: str | None) -> Iterator[TextIO]:
    """Yield a text stream writing to ``path``, or stdout.

    Only streams opened here are closed on exit.
    """
    if _is_stdio(path):
        yield sys.stdout
        return
    try:
        handle = Path(path).open("w", encoding="utf-8")
    except OSError as exc:
        raise CorpusIOError(f"Can't create {path} to write counts: {exc.strerror or exc}", path=path) from exc
    with handle:
        yield handle


def write_counts(stream: TextIO, entries: Iterable[tuple[str, int]], path: str | None = None) -> int:
    """Write ``item<TAB>count`` lines, returning the number written."""
    n = 0
    try:
        for item, count in entries:
            stream.write(f"{item}\t{count}\n")
            n += 1
        stream.flush()
    except BrokenPipeError:
        raise
    except OSError as exc:
        target = path or "<stdout>"
        raise CorpusIOError(f"Can't write counts to {target}: {exc.strerror or exc}", path=path) from exc
    return n
