import io
import logging

import pytest

from gravatar_cache.logging_config import configure_logging, level_from_name


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("15", 15),
        ("bogus", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_level_from_name(value: str | None, expected: int) -> None:
    assert level_from_name(value) == expected


def test_configure_logging_reuses_its_handler(app_logger: logging.Logger) -> None:
    app_logger.handlers.clear()

    logger = configure_logging()
    configure_logging(debug=True)

    assert logger is app_logger
    assert len(app_logger.handlers) == 1
    assert app_logger.level == logging.DEBUG
    assert app_logger.propagate is False


def test_configure_logging_switches_stream(app_logger: logging.Logger) -> None:
    app_logger.handlers.clear()
    first = io.StringIO()
    second = io.StringIO()

    configure_logging(stream=first)
    configure_logging(stream=second)
    logging.getLogger("gravatar_cache.resolver").info("avatar cached")

    assert first.getvalue() == ""
    assert "INFO gravatar_cache.resolver: avatar cached" in second.getvalue()


@pytest.mark.parametrize("var", ["GRAVATAR_LOG_LEVEL", "LOG_LEVEL"])
def test_configure_logging_honours_env_level(
    app_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch, var: str
) -> None:
    monkeypatch.setenv(var, "ERROR")

    configure_logging(debug=True)

    assert app_logger.level == logging.ERROR


def test_gravatar_log_level_wins_over_log_level(
    app_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("GRAVATAR_LOG_LEVEL", "WARNING")

    configure_logging()

    assert app_logger.level == logging.WARNING


def test_http_client_loggers_quiet_unless_debug() -> None:
    configure_logging()
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING

    configure_logging(debug=True)
    assert logging.getLogger("httpx").level == logging.DEBUG
