"""Logging setup shared by the CLI and the pipeline."""

from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging once.

    Respects env var CORPUS_COUNT_LOG_LEVEL if `level` is None. Records go to
    stderr so that counts written to stdout stay clean.
    """
    lvl = (level or os.environ.get("CORPUS_COUNT_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.WARNING), format=_DEFAULT_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
