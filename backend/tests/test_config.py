"""Settings and logging tests."""
import logging

from bookstore.config import Settings
from bookstore.core.exceptions import AppException, NotFoundError
from bookstore.core.logging import get_logger, setup_logging


def test_settings_defaults(monkeypatch):
    for key in ("BOOKSTORE_HOST", "BOOKSTORE_PORT", "BOOKSTORE_DEBUG", "BOOKSTORE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings(_env_file=None)

    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.debug is False
    assert settings.log_level == "INFO"


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_PORT", "9000")
    monkeypatch.setenv("BOOKSTORE_DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.port == 9000
    assert settings.debug is True


def test_setup_logging_installs_single_handler():
    logger = setup_logging("debug")
    setup_logging("debug")

    assert logger.name == "bookstore"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False
    assert get_logger("store").parent is logger


def test_not_found_error_details():
    exc = NotFoundError("Book", 3)

    assert isinstance(exc, AppException)
    assert str(exc) == "Book with id 3 not found"
    assert exc.error_code == "NOT_FOUND"
    assert exc.details == {"resource": "Book", "id": 3}
