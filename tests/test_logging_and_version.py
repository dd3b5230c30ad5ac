from __future__ import annotations

import logging

import pytest

from pixelkit import logging_utils, version


@pytest.fixture
def fresh_logger(monkeypatch):
    logger = logging.getLogger(logging_utils.LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    logger.handlers = []
    monkeypatch.setattr(logging_utils, "_DEV_LOG_LEVEL_OVERRIDE_EMITTED", False)
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        ("TRACE", logging.DEBUG),
        ("warn", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("25", 25),
        ("bogus", logging.ERROR),
        ("", logging.ERROR),
        (None, logging.ERROR),
        ("-4", logging.ERROR),
    ],
)
def test_parse_log_level(value, expected) -> None:
    assert logging_utils.parse_log_level(value, default=logging.ERROR) == expected


def test_child_loggers_share_project_prefix() -> None:
    assert logging_utils.get_logger().name == "PixelKit"
    assert logging_utils.get_logger("Aspect").name == "PixelKit.Aspect"


def test_configure_logger_is_idempotent(fresh_logger, monkeypatch) -> None:
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "0")
    monkeypatch.setenv(logging_utils.LOG_LEVEL_ENV_VAR, "warning")
    logger = logging_utils.configure_logger()
    logging_utils.configure_logger()
    tagged = [handler for handler in logger.handlers if getattr(handler, "_pixelkit_handler", False)]
    assert len(tagged) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_dev_mode_forces_debug(fresh_logger, monkeypatch) -> None:
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "1")
    monkeypatch.setenv(logging_utils.LOG_LEVEL_ENV_VAR, "ERROR")
    logger = logging_utils.configure_logger()
    assert logger.level == logging.DEBUG
    assert logging_utils._DEV_LOG_LEVEL_OVERRIDE_EMITTED is True


def test_default_level_follows_build_type(monkeypatch) -> None:
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "off")
    assert logging_utils.default_log_level() == logging.INFO
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "on")
    assert logging_utils.default_log_level() == logging.DEBUG


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("1.0.0", False),
        ("1.0.0-dev", True),
        ("1.0.0.dev3", True),
        ("dev-1.0", True),
        ("1.0+dev", True),
        ("1.0.0-devel", False),
        ("2.0.0-rc1", False),
    ],
)
def test_is_dev_build_markers(monkeypatch, identifier, expected) -> None:
    monkeypatch.delenv(version.DEV_MODE_ENV_VAR, raising=False)
    assert version.is_dev_build(identifier) is expected


def test_is_dev_build_env_override(monkeypatch) -> None:
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "yes")
    assert version.is_dev_build("1.0.0") is True
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "no")
    assert version.is_dev_build("1.0.0-dev") is False


def test_dev_mode_override_ignores_unrecognised_tokens(monkeypatch) -> None:
    monkeypatch.delenv(version.DEV_MODE_ENV_VAR, raising=False)
    assert version.dev_mode_override() is None
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, "maybe")
    assert version.dev_mode_override() is None
    assert version.is_dev_build("1.0.0-dev") is True
    monkeypatch.setenv(version.DEV_MODE_ENV_VAR, " ON ")
    assert version.dev_mode_override() is True
