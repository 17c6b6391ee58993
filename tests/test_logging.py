"""Logging setup."""

import logging

from app.core.logging import LOGGER_NAME, QUIET_LOGGERS, logger, setup_logging


def test_global_logger_is_app_logger():
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1


def test_setup_is_idempotent():
    setup_logging()
    setup_logging()

    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1


def test_client_libraries_never_log_below_warning(monkeypatch):
    monkeypatch.setattr("app.core.logging.settings.LOG_LEVEL", "DEBUG")

    setup_logging()

    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
