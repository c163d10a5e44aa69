"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from either_commons.config import EitherSettings
from either_commons.observability.logging import JsonLoggerFactory, Logger, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("either.test")
        assert hasattr(logger, "bind")
        assert hasattr(logger, "info")

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("either.test", component="parser").info("parsed")
        assert logs == [{"event": "parsed", "log_level": "info", "component": "parser"}]

    def test_satisfies_logger_protocol(self) -> None:
        logger: Logger = get_logger("either.test")
        assert callable(logger.debug)


class TestJsonLoggerFactory:
    @pytest.mark.usefixtures("restore_logging")
    def test_configure_sets_level_and_single_handler(self) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    @pytest.mark.usefixtures("restore_logging")
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        structlog.get_logger("either.json").info("hello", answer=42)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "hello"
        assert payload["answer"] == 42
        assert payload["level"] == "info"
        assert "timestamp" in payload

    @pytest.mark.usefixtures("restore_logging")
    def test_from_settings(self) -> None:
        JsonLoggerFactory.from_settings(EitherSettings(log_level="debug", json_logs=False))
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.usefixtures("restore_logging")
    def test_from_env_configures_and_returns_settings(self) -> None:
        settings = JsonLoggerFactory.from_env({"EITHER_LOG_LEVEL": "error", "EITHER_JSON_LOGS": "no"})
        assert settings == EitherSettings(log_level="ERROR", json_logs=False)
        assert logging.getLogger().level == logging.ERROR
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
