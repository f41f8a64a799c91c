"""corpus-count command-line entrypoint."""

from __future__ import annotations

import argparse
import os
import sys
from contextlib import ExitStack

from corpus_count import __version__
from corpus_count.config import DEFAULT_MAX_N, DEFAULT_MIN_N, CountConfig, load_config, resolve_arg
from corpus_count.errors import CorpusCountError
from corpus_count.filtering import TieBreak
from corpus_count.io import open_input, open_output, write_counts
from corpus_count.pipeline import run_pipeline
from corpus_count.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="corpus-count",
        description="Count tokens and character ngrams in a whitespace-tokenized corpus.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--corpus", default=None, help="Corpus file (default: standard input).")
    p.add_argument(
        "-t",
        "--token_counts",
        "--token-counts",
        dest="token_counts",
        default=None,
        help="Token count file (default: standard output).",
    )
    p.add_argument(
        "-n",
        "--ngram_counts",
        "--ngram-counts",
        dest="ngram_counts",
        default=None,
        help="File for ngram counts ('-' for standard output). Ngrams are only counted when given.",
    )
    p.add_argument("--token_min", "--token-min", dest="token_min", type=int, default=None, help="Word min count.")
    p.add_argument("--ngram_min", "--ngram-min", dest="ngram_min", type=int, default=None, help="Ngram min count.")
    p.add_argument(
        "--min_n",
        "--min-n",
        dest="min_n",
        type=int,
        default=None,
        help=f"Minimal ngram length to be used (default: {DEFAULT_MIN_N}).",
    )
    p.add_argument(
        "--max_n",
        "--max-n",
        dest="max_n",
        type=int,
        default=None,
        help=f"Maximum ngram length to be used (default: {DEFAULT_MAX_N}).",
    )
    p.add_argument(
        "--filter_first",
        "--filter-first",
        dest="filter_first",
        action="store_true",
        default=None,
        help="Filter tokens before counting ngrams.",
    )
    p.add_argument(
        "--no_bracket",
        "--no-bracket",
        dest="bracket",
        action="store_false",
        default=None,
        help="Do not wrap tokens in '<' and '>' before extracting ngrams.",
    )
    p.add_argument(
        "--tie-break",
        "--tie_break",
        dest="tie_break",
        default=None,
        choices=[t.value for t in TieBreak],
        help="Order of entries with equal counts (default: first-seen).",
    )
    p.add_argument("--config", default=None, help="Optional YAML file with count options.")
    p.add_argument("--progress", action="store_true", default=None, help="Show progress bars on stderr.")
    p.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., INFO, DEBUG). Also respects CORPUS_COUNT_LOG_LEVEL env var.",
    )
    return p


def config_from_args(args: argparse.Namespace) -> CountConfig:
    values = load_config(args.config)
    defaults = CountConfig()
    resolved = {
        name: resolve_arg(getattr(args, name), values.get(name), getattr(defaults, name))
        for name in defaults.to_dict()
    }
    return CountConfig.from_dict(resolved).validate()


def run(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    with ExitStack() as stack:
        # All streams are open before the first line is read, so a bad path fails fast.
        lines = stack.enter_context(open_input(config.corpus))
        token_out = stack.enter_context(open_output(config.token_counts))
        ngram_out = stack.enter_context(open_output(config.ngram_counts)) if config.count_ngrams else None

        result = run_pipeline(lines, config)

        write_counts(token_out, result.tokens, config.token_counts)
        if ngram_out is not None and result.ngrams is not None:
            write_counts(ngram_out, result.ngrams, config.ngram_counts)
    logger.info(
        "Wrote %d tokens%s",
        len(result.tokens),
        f" and {len(result.ngrams)} ngrams" if result.ngrams is not None else "",
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return run(args)
    except CorpusCountError as exc:
        logger.debug("Aborting", exc_info=True)
        print(f"corpus-count: error: {exc}", file=sys.stderr)
        return exc.exit_code
    except BrokenPipeError:
        # Output consumer went away (e.g. `| head`); silence the flush at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
