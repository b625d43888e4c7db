"""Console logging for the gravatar-cache CLI and embedding applications."""

from __future__ import annotations

import logging
import os
from typing import Final, TextIO

LOGGER_NAME: Final[str] = "gravatar_cache"
HANDLER_NAME: Final[str] = "gravatar_cache.console"
LEVEL_ENV_VARS: Final[tuple[str, ...]] = ("GRAVATAR_LOG_LEVEL", "LOG_LEVEL")

# httpx and httpcore log every request at INFO/DEBUG.
HTTP_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore")

_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"


def level_from_name(name: str | None, fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"WARNING"`` or ``"15"`` into a logging level."""
    if not name or not name.strip():
        return fallback

    value = name.strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else fallback


def _env_level() -> str | None:
    for var in LEVEL_ENV_VARS:
        value = os.getenv(var)
        if value:
            return value
    return None


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def configure_logging(
    *, debug: bool = False, stream: TextIO | None = None
) -> logging.Logger:
    """Attach one console handler to the ``gravatar_cache`` logger.

    ``GRAVATAR_LOG_LEVEL`` (or ``LOG_LEVEL``) wins over ``debug``. Calling this
    again adjusts the level and stream instead of stacking handlers. HTTP
    client loggers are held at WARNING unless ``debug`` is set.

    Returns:
        The configured package logger
    """
    level = level_from_name(
        _env_level(), logging.DEBUG if debug else logging.INFO
    )

    logger = logging.getLogger(LOGGER_NAME)
    handler = _console_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
        logger.addHandler(handler)
    elif stream is not None and isinstance(handler, logging.StreamHandler):
        handler.setStream(stream)

    logger.setLevel(level)
    logger.propagate = False

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    return logger
