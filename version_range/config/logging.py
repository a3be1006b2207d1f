"""Logging configuration for the command line tool."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> None:
    """Configure Python logging for the process.

    Records go to stderr so that stdout only carries the validation results. The parser never logs;
    only callers such as the batch checker emit records.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
