"""Tests for configuration and logging setup."""

import json
import logging
import sys

import pytest

from accountkit.config import AppConfig
from accountkit.domain.errors import ConfigurationError
from accountkit.logging_config import LOGGER_NAME, JsonFormatter, setup_logging


class TestAppConfig:
    """Tests for AppConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = AppConfig()

        assert config.log_level == "WARNING"
        assert config.log_format == "standard"

    def test_level_is_upper_cased(self) -> None:
        """Test log level normalization."""
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_format(self) -> None:
        """Test that an unknown log format raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Unknown log format"):
            AppConfig(log_format="xml")

    def test_from_env(self, monkeypatch) -> None:
        """Test config from environment variables."""
        monkeypatch.setenv("ACCOUNTKIT_LOG_LEVEL", "info")
        monkeypatch.setenv("ACCOUNTKIT_LOG_FORMAT", "JSON")

        config = AppConfig.from_env()

        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_from_env_defaults(self, monkeypatch) -> None:
        """Test defaults when environment variables are unset."""
        monkeypatch.delenv("ACCOUNTKIT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("ACCOUNTKIT_LOG_FORMAT", raising=False)

        assert AppConfig.from_env() == AppConfig()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        logger = setup_logging()

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_setup_logging_debug(self) -> None:
        """Test debug level logging setup."""
        setup_logging(level="debug")

        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="LOUD")

        assert logging.getLogger(LOGGER_NAME).level == logging.INFO

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        logger = setup_logging(format_type="json")

        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_standard_format(self) -> None:
        """Test standard format logging."""
        logger = setup_logging(format_type="standard")

        assert not isinstance(logger.handlers[0].formatter, JsonFormatter)


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        record = logging.LogRecord(
            name="accountkit.domain.entities",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="withdraw rejected on account %s",
            args=(2334,),
            exc_info=None,
        )
        for key, value in kwargs.items():
            setattr(record, key, value)
        return record

    def test_format_basic(self) -> None:
        """Test the basic JSON fields."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "accountkit.domain.entities"
        assert data["message"] == "withdraw rejected on account 2334"
        assert "timestamp" in data

    def test_format_extra_fields(self) -> None:
        """Test that extra fields are merged into the output."""
        record = self._record(extra={"account_number": 2334, "operation": "withdraw"})
        data = json.loads(JsonFormatter().format(record))

        assert data["account_number"] == 2334
        assert data["operation"] == "withdraw"

    def test_format_exception(self) -> None:
        """Test exception info is included."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]
