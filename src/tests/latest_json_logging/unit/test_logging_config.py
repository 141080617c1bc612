"""Tests for latest_json_logging.config module."""

import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from latest_json_logging import TRACE, configure_logger, get_logger
from latest_json_logging.formatters import ColoredFormatter, SafeFormatter


class TestConfigureLogger:
    """Tests for configure_logger function."""

    def test_clears_existing_handlers(self, clean_logger: logging.Logger):
        """Test that existing handlers and filters are removed."""
        clean_logger.addHandler(logging.StreamHandler())
        clean_logger.addFilter(logging.Filter())

        configure_logger(clean_logger.name, profile="test")

        assert clean_logger.handlers == []
        assert clean_logger.filters == []

    def test_sets_log_level_from_parameter(self, clean_logger: logging.Logger):
        """Test that log level is set from parameter."""
        configure_logger(clean_logger.name, profile="lib", level="ERROR")
        assert clean_logger.level == logging.ERROR

    def test_level_is_case_insensitive(self, clean_logger: logging.Logger):
        """Test that lowercase level names are accepted."""
        configure_logger(clean_logger.name, profile="lib", level="info")
        assert clean_logger.level == logging.INFO

    def test_trace_level(self, clean_logger: logging.Logger):
        """Test that the TRACE level is registered."""
        configure_logger(clean_logger.name, profile="lib", level="TRACE")
        assert clean_logger.level == TRACE
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_uses_default_log_level_when_not_specified(
        self,
        clean_logger: logging.Logger,
    ):
        """Test that the environment-derived level is used by default."""
        with patch("latest_json_logging.config.get_log_level", return_value="WARNING"):
            configure_logger(clean_logger.name, profile="lib")
            assert clean_logger.level == logging.WARNING

    def test_raises_error_for_invalid_profile(self, clean_logger: logging.Logger):
        """Test that error is raised for invalid profile."""
        with pytest.raises(ValueError, match="Unknown profile"):
            configure_logger(clean_logger.name, profile="invalid")


class TestTestProfile:
    """Tests for the test profile."""

    def test_debug_and_propagating(self, clean_logger: logging.Logger):
        """Test records reach caplog at DEBUG."""
        clean_logger.propagate = False
        configure_logger(clean_logger.name, profile="test")
        assert clean_logger.level == logging.DEBUG
        assert clean_logger.propagate is True

    def test_respects_explicit_level(self, clean_logger: logging.Logger):
        """Test an explicit level overrides DEBUG."""
        configure_logger(clean_logger.name, profile="test", level="ERROR")
        assert clean_logger.level == logging.ERROR


class TestLibProfile:
    """Tests for the lib profile."""

    def test_no_handlers(self, clean_logger: logging.Logger):
        """Test library loggers only propagate."""
        configure_logger(clean_logger.name, profile="lib")
        assert clean_logger.handlers == []
        assert clean_logger.propagate is True


class TestCliProfile:
    """Tests for the cli profile."""

    def test_null_handler_by_default(self, clean_logger: logging.Logger):
        """Test a quiet CLI logger gets a NullHandler and stops propagating."""
        configure_logger(clean_logger.name, profile="cli", to_console=False)

        assert [type(h) for h in clean_logger.handlers] == [logging.NullHandler]
        assert clean_logger.propagate is False

    def test_console_handler(self, clean_logger: logging.Logger):
        """Test to_console adds a colored stderr handler."""
        configure_logger(clean_logger.name, profile="cli", to_console=True)

        (handler,) = clean_logger.handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, ColoredFormatter)

    def test_console_from_environment(self, clean_logger: logging.Logger, monkeypatch):
        """Test LATEST_JSON_CONSOLE_LOGGING enables the console handler."""
        monkeypatch.setenv("LATEST_JSON_CONSOLE_LOGGING", "1")
        configure_logger(clean_logger.name, profile="cli")
        assert any(
            isinstance(h.formatter, ColoredFormatter) for h in clean_logger.handlers
        )

    def test_explicit_log_file(self, clean_logger: logging.Logger, tmp_path: Path):
        """Test a log file handler is added for an explicit path."""
        log_file = tmp_path / "cli.log"
        configure_logger(
            clean_logger.name,
            profile="cli",
            to_console=False,
            log_file=str(log_file),
        )

        (handler,) = clean_logger.handlers
        assert isinstance(handler, logging.FileHandler)
        assert isinstance(handler.formatter, SafeFormatter)

        clean_logger.warning("written %s", "to file")
        handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_file_logging_from_environment(
        self,
        clean_logger: logging.Logger,
        tmp_path: Path,
        monkeypatch,
    ):
        """Test LATEST_JSON_FILE_LOGGING writes to LATEST_JSON_LOG_DIR/cli.log."""
        monkeypatch.setenv("LATEST_JSON_FILE_LOGGING", "true")
        monkeypatch.setenv("LATEST_JSON_LOG_DIR", str(tmp_path / "logs"))

        configure_logger(clean_logger.name, profile="cli", to_console=False)

        (handler,) = clean_logger.handlers
        assert isinstance(handler, logging.FileHandler)
        assert Path(handler.baseFilename) == tmp_path / "logs" / "cli.log"


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_standard_logger(self):
        """Test get_logger is a plain logging.getLogger."""
        assert get_logger("latest_json.x") is logging.getLogger("latest_json.x")
