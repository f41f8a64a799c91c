import pytest

from corpus_count.counting import FrequencyTable, count_tokens
from corpus_count.filtering import TieBreak, filter_table, sort_entries


def test_filter_keeps_counts_at_threshold():
    table = FrequencyTable([("a", 3), ("b", 2), ("c", 1)])
    assert filter_table(table, 2).to_dict() == {"a": 3, "b": 2}


def test_zero_or_none_threshold_is_identity():
    table = FrequencyTable([("a", 3), ("c", 1)])
    assert filter_table(table, 0) == table
    assert filter_table(table, None) == table
    assert filter_table(table, 0) is not table


def test_filter_is_idempotent():
    table = count_tokens("x y x z x y w".split())
    once = filter_table(table, 2)
    assert filter_table(once, 2) == once


def test_filter_does_not_mutate_input():
    table = FrequencyTable([("a", 3), ("c", 1)])
    filter_table(table, 2)
    assert table.to_dict() == {"a": 3, "c": 1}


def test_negative_threshold_rejected():
    with pytest.raises(ValueError):
        filter_table(FrequencyTable(), -1)


def test_sort_descending_with_first_seen_ties():
    table = count_tokens("d b a b c a e".split())
    assert sort_entries(table) == [("b", 2), ("a", 2), ("d", 1), ("c", 1), ("e", 1)]


def test_sort_lexical_ties():
    table = count_tokens("d b a b c a e".split())
    assert sort_entries(table, TieBreak.LEXICAL) == [("a", 2), ("b", 2), ("c", 1), ("d", 1), ("e", 1)]
    assert sort_entries(table, "lexical") == sort_entries(table, TieBreak.LEXICAL)


def test_sorted_counts_non_increasing():
    table = count_tokens("q w e r t y q w e q w q".split())
    counts = [count for _, count in sort_entries(table)]
    assert counts == sorted(counts, reverse=True)


def test_unknown_tie_break_rejected():
    with pytest.raises(ValueError):
        sort_entries(FrequencyTable(), "random")
