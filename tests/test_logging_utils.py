"""Mini README: Tests for the shared logging helpers and how entry points apply levels.

These tests confirm that creating module loggers never pins the root level,
that the CLI and the application factory apply the configured level, and that
repeated configuration keeps a single handler.
"""

from __future__ import annotations

import logging

import pytest

import main_pocketledger
from pocketledger.configuration import PocketLedgerSettings, get_settings
from pocketledger.interface import create_application
from pocketledger.ledger import LedgerStore
from pocketledger.logging_utils import configure_root_logger, get_logger


@pytest.fixture(autouse=True)
def restore_root_level():
    root_logger = logging.getLogger()
    original = root_logger.level
    yield
    root_logger.setLevel(original)
    get_settings.cache_clear()


def test_level_applies_after_loggers_exist() -> None:
    """Loggers created at import time must not block a later level change."""

    get_logger("pocketledger.tests.early")
    configure_root_logger("warning")
    assert logging.getLogger().level == logging.WARNING

    configure_root_logger(logging.DEBUG)
    assert logging.getLogger().level == logging.DEBUG


def test_get_logger_leaves_level_untouched() -> None:
    configure_root_logger("ERROR")
    get_logger("pocketledger.tests.late")
    assert logging.getLogger().level == logging.ERROR


def test_repeated_configuration_keeps_one_handler() -> None:
    configure_root_logger("INFO")
    handlers_before = list(logging.getLogger().handlers)
    configure_root_logger("DEBUG")
    get_logger("pocketledger.tests.again")
    assert logging.getLogger().handlers == handlers_before


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        configure_root_logger("chatty")


def test_cli_run_applies_configured_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The CLI honours POCKETLEDGER_LOG_LEVEL and disables reload in production."""

    calls = {}
    monkeypatch.setenv("POCKETLEDGER_LOG_LEVEL", "WARNING")
    monkeypatch.setattr(main_pocketledger.uvicorn, "run", lambda *args, **kwargs: calls.update(kwargs))
    get_settings.cache_clear()

    main_pocketledger.run(host=None, port=None, production=True)

    assert logging.getLogger().level == logging.WARNING
    assert calls["reload"] is False
    assert calls["factory"] is True


def test_cli_run_skips_reload_outside_development(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {}
    monkeypatch.setenv("POCKETLEDGER_ENVIRONMENT", "production")
    monkeypatch.delenv("POCKETLEDGER_LOG_LEVEL", raising=False)
    monkeypatch.setattr(main_pocketledger.uvicorn, "run", lambda *args, **kwargs: calls.update(kwargs))
    get_settings.cache_clear()

    main_pocketledger.run(host=None, port=None, production=False)

    assert calls["reload"] is False
    assert logging.getLogger().level == logging.INFO


def test_application_factory_applies_configured_level() -> None:
    """The uvicorn worker builds the app itself, so the factory sets the level too."""

    settings = PocketLedgerSettings(_env_file=None, log_level="error")

    create_application(store=LedgerStore(), settings=settings)

    assert logging.getLogger().level == logging.ERROR
