"""Counting configuration."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from corpus_count.errors import ConfigurationError, CorpusIOError
from corpus_count.filtering import TieBreak
from corpus_count.io import STDIO

DEFAULT_MIN_N = 3
DEFAULT_MAX_N = 6


@dataclass(frozen=True)
class CountConfig:
    """Options for one counting run.

    ``None`` paths mean standard input/output; ``ngram_counts=None`` disables
    n-gram counting altogether. A threshold of ``0`` keeps every entry.
    """

    corpus: Optional[str] = None
    token_counts: Optional[str] = None
    ngram_counts: Optional[str] = None
    token_min: int = 0
    ngram_min: int = 0
    min_n: int = DEFAULT_MIN_N
    max_n: int = DEFAULT_MAX_N
    bracket: bool = True
    filter_first: bool = False
    tie_break: str = TieBreak.FIRST_SEEN.value
    progress: bool = False

    @property
    def count_ngrams(self) -> bool:
        return self.ngram_counts is not None

    def validate(self) -> "CountConfig":
        for name in ("token_min", "ngram_min", "min_n", "max_n"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}.")
        for name in ("bracket", "filter_first", "progress"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean, got {getattr(self, name)!r}.")
        for name in ("corpus", "token_counts", "ngram_counts"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a path string, got {value!r}.")
        if self.corpus is not None and self.corpus != STDIO:
            corpus = os.path.abspath(self.corpus)
            for name in ("token_counts", "ngram_counts"):
                value = getattr(self, name)
                if value is not None and value != STDIO and os.path.abspath(value) == corpus:
                    raise ConfigurationError(f"{name} would overwrite the corpus {self.corpus}.")
        if self.token_min < 0:
            raise ConfigurationError(f"token_min cannot be negative, got {self.token_min}.")
        if self.ngram_min < 0:
            raise ConfigurationError(f"ngram_min cannot be negative, got {self.ngram_min}.")
        if self.min_n < 1:
            raise ConfigurationError("The minimum n-gram length cannot be zero.")
        if self.min_n > self.max_n:
            raise ConfigurationError(
                f"The maximum length should be equal to or greater than the minimum length "
                f"(min_n={self.min_n}, max_n={self.max_n})."
            )
        try:
            TieBreak(self.tie_break)
        except ValueError:
            choices = ", ".join(t.value for t in TieBreak)
            raise ConfigurationError(f"Unknown tie_break {self.tie_break!r}. Use {choices}.") from None
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "CountConfig":
        known = {f.name for f in fields(CountConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}")
        return CountConfig(**d)


def load_config(path: str | None) -> dict[str, Any]:
    """Read option values from a YAML mapping, optionally nested under ``count``."""
    if not path:
        return {}
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CorpusIOError(f"Can't read config {config_path}: {exc.strerror or exc}", path=str(config_path)) from exc
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigurationError("Count config must be a mapping.")
    if "count" in payload and isinstance(payload["count"], dict):
        payload = payload["count"]
    known = {f.name for f in fields(CountConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")
    return payload


def resolve_arg(value: Any, config_value: Any, default: Any) -> Any:
    if value is not None:
        return value
    if config_value is not None:
        return config_value
    return default
