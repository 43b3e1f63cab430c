"""Tests for spritegen.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from spritegen.logging import configure_logging, get_logger


def test_get_logger_nests_under_spritegen() -> None:
    assert get_logger().name == "spritegen"
    assert get_logger("writer").name == "spritegen.writer"


def test_configure_logging_replaces_handlers_on_repeat_calls() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    handler = logger.handlers[0]
    assert handler.level == logging.DEBUG
    record = logging.LogRecord("spritegen.writer", logging.INFO, __file__, 1, "Wrote %s", ("x",), None)
    assert handler.format(record) == "[spritegen] INFO Wrote x"


def test_configure_logging_writes_to_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"

    logger = configure_logging(log_file=log_file)
    get_logger("orchestrator").info("Derived %d icon identifiers", 3)
    get_logger("orchestrator").debug("hidden at info level")
    configure_logging()

    assert len(logger.handlers) == 1
    contents = log_file.read_text(encoding="utf-8")
    assert "INFO spritegen.orchestrator: Derived 3 icon identifiers" in contents
    assert "hidden at info level" not in contents
