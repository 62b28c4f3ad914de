"""Tests for configuration, structured logging and observability setup."""

import json
import logging
import sys
from unittest.mock import MagicMock, patch

from src.config import Settings
from src.utils.logging import (
    StructuredFormatter,
    configure_logging,
    get_run_id,
    set_run_id,
)
from src.utils.observability import setup_logfire


def _record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="src.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Test default values without environment overrides."""
        s = Settings(_env_file=None)

        assert s.log_level == "INFO"
        assert s.log_json is False
        assert s.default_strategy == "alphabetical"
        assert s.logfire_token == ""

    def test_env_overrides(self, mock_env_vars) -> None:
        """Test that environment variables are loaded."""
        s = Settings(_env_file=None)

        assert s.log_level == "debug"
        assert s.log_json is True
        assert s.default_strategy == "length"
        assert s.log_level_value == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        """Test that an unrecognized level name maps to INFO."""
        s = Settings(_env_file=None, log_level="chatty")

        assert s.log_level_value == logging.INFO


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_formats_json(self, restore_root_logger) -> None:
        """Test JSON output fields."""
        output = StructuredFormatter().format(_record("Relatório gerado"))
        data = json.loads(output)

        assert data["level"] == "INFO"
        assert data["logger"] == "src.test"
        assert data["message"] == "Relatório gerado"
        assert "run_id" not in data

    def test_includes_run_id(self, restore_root_logger) -> None:
        """Test that the run ID is attached when set."""
        set_run_id("abc123")

        data = json.loads(StructuredFormatter().format(_record("hello")))

        assert get_run_id() == "abc123"
        assert data["run_id"] == "abc123"

    def test_includes_exception(self, restore_root_logger) -> None:
        """Test that exception info is serialized."""
        record = _record("failed", logging.ERROR)
        try:
            raise ValueError("bad")
        except ValueError:
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredFormatter().format(record))

        assert "ValueError: bad" in data["exception"]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_handler(self, restore_root_logger) -> None:
        """Test that json_format installs a StructuredFormatter."""
        configure_logging(logging.DEBUG, json_format=True)

        assert logging.root.level == logging.DEBUG
        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0].formatter, StructuredFormatter)

    def test_plain_handler_replaces_previous(self, restore_root_logger) -> None:
        """Test that repeated calls do not stack handlers."""
        configure_logging(json_format=True)
        configure_logging()

        assert len(logging.root.handlers) == 1
        assert not isinstance(logging.root.handlers[0].formatter, StructuredFormatter)


class TestSetupLogfire:
    """Tests for setup_logfire."""

    def test_skipped_without_token(self) -> None:
        """Test that nothing happens without LOGFIRE_TOKEN."""
        with patch("src.utils.observability.settings") as mock_settings:
            mock_settings.logfire_token = ""
            assert setup_logfire() is False

    def test_configures_with_token(self, restore_root_logger) -> None:
        """Test that logfire is configured when a token is present."""
        fake_logfire = MagicMock()
        fake_logfire.LogfireLoggingHandler.return_value = logging.NullHandler()

        with (
            patch("src.utils.observability.settings") as mock_settings,
            patch.dict(sys.modules, {"logfire": fake_logfire}),
        ):
            mock_settings.logfire_token = "token"
            assert setup_logfire() is True

        fake_logfire.configure.assert_called_once()

    def test_failure_is_logged_not_raised(self, caplog) -> None:
        """Test that configuration errors only produce a warning."""
        fake_logfire = MagicMock()
        fake_logfire.configure.side_effect = RuntimeError("no network")

        with (
            patch("src.utils.observability.settings") as mock_settings,
            patch.dict(sys.modules, {"logfire": fake_logfire}),
            caplog.at_level(logging.WARNING),
        ):
            mock_settings.logfire_token = "token"
            assert setup_logfire() is False

        assert "Failed to configure Logfire: no network" in caplog.text
