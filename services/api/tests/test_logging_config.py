import logging

from services.api.app.logging_config import APP_LOGGER, setup_logging


def test_setup_logging_respects_env_var(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    setup_logging()
    assert logging.getLogger(APP_LOGGER).level == logging.WARNING


def test_setup_logging_invalid_level_defaults_to_info() -> None:
    setup_logging(level="LOUD")
    assert logging.getLogger(APP_LOGGER).level == logging.INFO


def test_setup_logging_quiets_httpx_outside_debug() -> None:
    setup_logging(level="INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
