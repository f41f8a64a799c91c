"""Frequency tables for tokens and n-grams."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class FrequencyTable:
    """Mapping from an item to its number of occurrences.

    Items are kept in the order they were first seen, which is the order
    :meth:`entries` yields them in. Counts are plain ints and do not overflow.
    """

    def __init__(self, counts: Iterable[tuple[str, int]] | None = None) -> None:
        self._counts: dict[str, int] = {}
        if counts is not None:
            for item, count in counts:
                self.add(item, count)

    def increment(self, item: str) -> None:
        self._counts[item] = self._counts.get(item, 0) + 1

    def add(self, item: str, count: int) -> None:
        """Record ``count`` occurrences of ``item`` at once."""
        if count < 0:
            raise ValueError(f"Negative count for {item!r}: {count}")
        self._counts[item] = self._counts.get(item, 0) + count

    def entries(self) -> Iterator[tuple[str, int]]:
        return iter(list(self._counts.items()))

    def get(self, item: str, default: int = 0) -> int:
        return self._counts.get(item, default)

    def total(self) -> int:
        return sum(self._counts.values())

    def to_dict(self) -> dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, item: object) -> bool:
        return item in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"FrequencyTable({len(self._counts)} items, total={self.total()})"


def count_tokens(tokens: Iterable[str]) -> FrequencyTable:
    table = FrequencyTable()
    for token in tokens:
        table.increment(token)
    return table
