"""Whitespace tokenization."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def split_tokens(text: str) -> list[str]:
    # str.split() without a separator collapses whitespace runs and never yields "".
    return text.split()


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()
