"""Token and n-gram counting pipeline.

The pipeline reads the whole corpus into a token table, derives n-grams from
it when requested, applies the count thresholds and sorts both tables by
descending count. Two modes differ only in when the token threshold applies:

``COUNT_FIRST``
    n-grams are derived from every token; both tables are filtered
    independently afterwards.
``FILTER_FIRST``
    the token table is filtered first and only surviving tokens contribute
    n-grams, each as often as it occurs in the corpus.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tqdm import tqdm

from corpus_count.config import CountConfig
from corpus_count.counting import FrequencyTable, count_tokens
from corpus_count.filtering import filter_table, sort_entries
from corpus_count.ngrams import count_ngrams
from corpus_count.tokenize import iter_tokens
from corpus_count.utils.logging import get_logger

logger = get_logger(__name__)


class PipelineMode(str, Enum):
    COUNT_FIRST = "count-first"
    FILTER_FIRST = "filter-first"

    @classmethod
    def from_config(cls, config: CountConfig) -> "PipelineMode":
        return cls.FILTER_FIRST if config.filter_first else cls.COUNT_FIRST


@dataclass(frozen=True)
class CountResult:
    tokens: list[tuple[str, int]]
    ngrams: Optional[list[tuple[str, int]]]
    total_tokens: int
    distinct_tokens: int
    total_ngrams: int = 0

    def token_dict(self) -> dict[str, int]:
        return dict(self.tokens)

    def ngram_dict(self) -> dict[str, int]:
        return dict(self.ngrams or [])


def _ngram_table(tokens: FrequencyTable, config: CountConfig) -> FrequencyTable:
    return count_ngrams(
        tokens,
        config.min_n,
        config.max_n,
        bracket_token=config.bracket,
        progress=config.progress,
    )


def run_pipeline(lines: Iterable[str], config: CountConfig) -> CountResult:
    """Count tokens (and n-grams) of ``lines`` according to ``config``."""
    config.validate()
    mode = PipelineMode.from_config(config)
    logger.info(
        "Counting in %s mode (ngrams=%s, n=%d..%d, bracket=%s)",
        mode.value,
        config.count_ngrams,
        config.min_n,
        config.max_n,
        config.bracket,
    )

    lines = tqdm(lines, desc="Counting tokens", unit="lines", disable=not config.progress)
    token_table = count_tokens(iter_tokens(lines))
    total_tokens = token_table.total()
    distinct_tokens = len(token_table)
    logger.info("Read %d tokens, %d distinct", total_tokens, distinct_tokens)

    ngram_table: Optional[FrequencyTable] = None
    if mode is PipelineMode.FILTER_FIRST:
        token_table = filter_table(token_table, config.token_min)
        if config.count_ngrams:
            ngram_table = _ngram_table(token_table, config)
    else:
        if config.count_ngrams:
            ngram_table = _ngram_table(token_table, config)
        token_table = filter_table(token_table, config.token_min)
    logger.debug("%d tokens with count >= %d", len(token_table), config.token_min)

    total_ngrams = 0
    ngram_entries = None
    if ngram_table is not None:
        total_ngrams = ngram_table.total()
        logger.info("Counted %d ngrams, %d distinct", total_ngrams, len(ngram_table))
        ngram_table = filter_table(ngram_table, config.ngram_min)
        logger.debug("%d ngrams with count >= %d", len(ngram_table), config.ngram_min)
        ngram_entries = sort_entries(ngram_table, config.tie_break)

    return CountResult(
        tokens=sort_entries(token_table, config.tie_break),
        ngrams=ngram_entries,
        total_tokens=total_tokens,
        distinct_tokens=distinct_tokens,
        total_ngrams=total_ngrams,
    )
