"""Logging setup for metaimport.

Console messages follow the ``metaimport: <message>`` convention of command
line tools; anything other than INFO also carries its lowercase level, e.g.
``metaimport: error: pulling branch: ...``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Optional

LOGGER_NAME = "metaimport"
LOG_PREFIX = f"{LOGGER_NAME}: "


class PrefixFormatter(logging.Formatter):
    """Formats console records as ``metaimport: [level: ]message``."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.INFO:
            return f"{LOG_PREFIX}{message}"
        return f"{LOG_PREFIX}{record.levelname.lower()}: {message}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``metaimport`` or one of its children, e.g. ``metaimport.git.fetch``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Send metaimport logs to stderr (and optionally a file); safe to call repeatedly."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(level)
    console.setFormatter(PrefixFormatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        # The file keeps every record, including git commands run at debug level.
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["LOG_PREFIX", "PrefixFormatter", "configure_logging", "get_logger"]
