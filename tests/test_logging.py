"""Tests for logging configuration."""

import logging

from ridetrack.logging_config import configure_logging


def test_configure_logging_adds_stream_handler():
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)
    assert root.level == logging.WARNING


def test_configure_logging_accepts_level_name(tmp_path):
    log_path = tmp_path / "logs" / "ridetrack.log"

    configure_logging(log_path, level="debug")
    logging.getLogger("ridetrack.test").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert "hello" in log_path.read_text(encoding="utf-8")

    configure_logging(None)
