"""Tests for metaimport.logging."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from metaimport.logging import configure_logging, get_logger


def test_get_logger_uses_metaimport_hierarchy() -> None:
    assert get_logger().name == "metaimport"
    assert get_logger("site").name == "metaimport.site"


def test_configure_logging_resets_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"

    configure_logging()
    logger = configure_logging(verbose=True, log_file=log_file)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    get_logger("test").debug("hello %s", "file")
    for handler in logger.handlers:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")

    configure_logging()
    assert len(logger.handlers) == 1


def test_console_messages_carry_tool_prefix() -> None:
    stream = io.StringIO()
    configure_logging(stream=stream)

    get_logger("site").info("Wrote %d pages", 3)
    get_logger("site").warning("careful")
    get_logger("site").debug("hidden")

    assert stream.getvalue().splitlines() == [
        "metaimport: Wrote 3 pages",
        "metaimport: warning: careful",
    ]
    configure_logging()


def test_log_file_records_debug_without_verbose(tmp_path: Path) -> None:
    stream = io.StringIO()
    log_file = tmp_path / "run.log"
    logger = configure_logging(log_file=log_file, stream=stream)

    get_logger("git.fetch").debug("Running git clone")
    for handler in logger.handlers:
        handler.flush()

    assert "metaimport.git.fetch: Running git clone" in log_file.read_text(encoding="utf-8")
    assert stream.getvalue() == ""
    configure_logging()
