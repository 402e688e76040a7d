"""Tests for tocfilter.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from tocfilter.logging import configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    assert get_logger("orchestrator").name == "tocfilter.orchestrator"
    assert get_logger().name == "tocfilter"


def test_configure_logging_replaces_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "run.log"

    configure_logging(verbose=True, log_file=log_file)
    logger = configure_logging(verbose=False)

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert log_file.exists()


def test_configure_logging_file_sink_records_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(verbose=True, log_file=log_file)

    get_logger("test").debug("heading count %d", 3)

    assert "DEBUG tocfilter.test: heading count 3" in log_file.read_text(encoding="utf-8")
