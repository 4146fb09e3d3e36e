"""Tests for logging configuration."""

import pytest

import logging
import sys

from ethrpc.helpers.logging import get_logger


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger(self) -> None:
        """Test that get_logger returns a logger instance."""
        logger = get_logger("test_module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        """Test that getting logger with same name returns same instance."""
        logger1 = get_logger("test_same")
        logger2 = get_logger("test_same")

        assert logger1 is logger2

    @pytest.mark.parametrize(
        ("level_name", "level"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_get_logger_with_level(self, level_name: str, level: int) -> None:
        """Test get_logger with an explicit level."""
        logger = get_logger(f"test_level_{level_name}", log_level=level_name)

        assert logger.level == level

    def test_get_logger_default_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the default level is INFO."""
        monkeypatch.delenv("ETHRPC_LOG_LEVEL", raising=False)

        logger = get_logger("test_default")

        assert logger.level == logging.INFO

    def test_get_logger_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that ETHRPC_LOG_LEVEL sets the level when none is passed."""
        monkeypatch.setenv("ETHRPC_LOG_LEVEL", "warning")

        logger = get_logger("test_env_level")

        assert logger.level == logging.WARNING

    def test_explicit_level_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an explicit level takes precedence over the environment."""
        monkeypatch.setenv("ETHRPC_LOG_LEVEL", "ERROR")

        logger = get_logger("test_explicit_level", log_level="DEBUG")

        assert logger.level == logging.DEBUG

    def test_get_logger_invalid_level_raises(self) -> None:
        """Test that invalid log level raises ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            get_logger("test_invalid", log_level="INVALID")

    def test_handler_writes_to_stdout(self) -> None:
        """Test that the single handler streams to stdout."""
        logger = get_logger("test_stdout")

        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stdout

    def test_get_logger_with_color(self) -> None:
        """Test get_logger with color enabled."""
        logger = get_logger("test_color", log_color=True)

        assert len(logger.handlers) > 0

    def test_logger_can_log_messages(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that configured logger can log messages."""
        logger = get_logger("test_log_messages", log_level="DEBUG")

        with caplog.at_level(logging.DEBUG, logger="test_log_messages"):
            logger.debug("Debug message")
            logger.warning("Warning message")

        assert any("Debug message" in record.message for record in caplog.records)
        assert any("Warning message" in record.message for record in caplog.records)

    def test_logger_caching(self) -> None:
        """Test that loggers are cached with their original level."""
        logger1 = get_logger("cached_logger", log_level="DEBUG")
        logger2 = get_logger("cached_logger", log_level="INFO")

        assert logger1 is logger2
        assert logger1.level == logging.DEBUG
