"""Logger setup shared by every pixelkit module."""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from pixelkit.version import is_dev_build

LOGGER_NAME = "PixelKit"
LOG_TAG = LOGGER_NAME
LOG_LEVEL_ENV_VAR = "PIXELKIT_LOG_LEVEL"

_LEVEL_NAME_MAP = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": logging.DEBUG,
}

_DEV_LOG_LEVEL_OVERRIDE_EMITTED = False


def default_log_level() -> int:
    return logging.DEBUG if is_dev_build() else logging.INFO


def parse_log_level(value: Optional[str], default: Optional[int] = None) -> int:
    """Map a level name or number to a logging level, falling back to *default*."""
    fallback = default_log_level() if default is None else default
    if value is None:
        return fallback
    token = str(value).strip().upper()
    if not token:
        return fallback
    if token in _LEVEL_NAME_MAP:
        return _LEVEL_NAME_MAP[token]
    try:
        numeric = int(token)
    except ValueError:
        return fallback
    if numeric < logging.NOTSET:
        return fallback
    return numeric


def _effective_log_level() -> int:
    level = parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR))
    if is_dev_build() and level > logging.DEBUG:
        return logging.DEBUG
    return level


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Return the project logger, or a named child of it."""
    if not component:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def configure_logger() -> logging.Logger:
    """Attach the project handler once and apply the effective level."""
    global _DEV_LOG_LEVEL_OVERRIDE_EMITTED

    logger = logging.getLogger(LOGGER_NAME)
    requested = parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR))
    effective = _effective_log_level()
    logger.setLevel(effective)
    if not any(getattr(handler, "_pixelkit_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler._pixelkit_handler = True  # type: ignore[attr-defined]
        formatter = logging.Formatter(f"[%(asctime)s] [{LOG_TAG}] %(message)s", "%H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    if effective < requested and not _DEV_LOG_LEVEL_OVERRIDE_EMITTED:
        _DEV_LOG_LEVEL_OVERRIDE_EMITTED = True
        logger.info(
            "Dev mode forcing PixelKit logger to DEBUG (requested level is %s)",
            logging.getLevelName(requested),
        )
    return logger
