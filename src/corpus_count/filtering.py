"""Count thresholds and frequency-sorted output."""

from __future__ import annotations

from enum import Enum

from corpus_count.counting import FrequencyTable


class TieBreak(str, Enum):
    """Order of items that share a count."""

    FIRST_SEEN = "first-seen"
    LEXICAL = "lexical"


def filter_table(table: FrequencyTable, min_count: int | None) -> FrequencyTable:
    """Return a new table holding the entries with ``count >= min_count``.

    ``None`` and ``0`` disable filtering; the result is then a copy of ``table``.
    """
    if min_count is not None and min_count < 0:
        raise ValueError(f"Minimum count must be non-negative, got {min_count}.")
    if not min_count:
        return FrequencyTable(table.entries())
    return FrequencyTable((item, count) for item, count in table.entries() if count >= min_count)


def sort_entries(
    table: FrequencyTable,
    tie_break: TieBreak | str = TieBreak.FIRST_SEEN,
) -> list[tuple[str, int]]:
    """Entries ordered by descending count.

    ``sorted`` is stable, so with ``first-seen`` equal counts keep the order in
    which the items entered the table.
    """
    tie_break = TieBreak(tie_break)
    if tie_break is TieBreak.LEXICAL:
        return sorted(table.entries(), key=lambda entry: (-entry[1], entry[0]))
    return sorted(table.entries(), key=lambda entry: -entry[1])
