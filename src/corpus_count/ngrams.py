"""Character n-gram extraction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tqdm import tqdm

from corpus_count.counting import FrequencyTable

BOW = "<"
EOW = ">"


def bracket(token: str) -> str:
    return f"{BOW}{token}{EOW}"


def iter_ngrams(token: str, min_n: int, max_n: int, bracket_token: bool = True) -> Iterator[str]:
    """Yield every substring of length ``min_n..max_n`` of ``token``.

    Shorter n-grams come first; for each length the substrings are yielded
    from left to right. Positions are code points, so multi-byte characters
    are never split. With ``bracket_token`` the n-grams are taken from
    ``"<" + token + ">"``.
    """
    if min_n < 1 or max_n < min_n:
        raise ValueError("Invalid ngram lengths.")
    word = bracket(token) if bracket_token else token
    length = len(word)
    for n in range(min_n, min(max_n, length) + 1):
        for i in range(0, length - n + 1):
            yield word[i : i + n]


def count_ngrams(
    token_counts: FrequencyTable | Iterable[tuple[str, int]],
    min_n: int,
    max_n: int,
    bracket_token: bool = True,
    progress: bool = False,
) -> FrequencyTable:
    """Count the n-grams of every token occurrence.

    Each distinct token contributes its n-grams ``count`` times, which equals
    extracting them once per occurrence in the corpus.
    """
    entries = token_counts.entries() if isinstance(token_counts, FrequencyTable) else token_counts
    total = len(token_counts) if isinstance(token_counts, FrequencyTable) else None

    table = FrequencyTable()
    for token, count in tqdm(entries, total=total, desc="Counting ngrams", unit="tokens", disable=not progress):
        for ngram in iter_ngrams(token, min_n, max_n, bracket_token):
            table.add(ngram, count)
    return table
