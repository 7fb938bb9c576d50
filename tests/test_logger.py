"""
Tests for logging setup and the exception hierarchy.
"""

import json
import logging
from pathlib import Path

import pytest

from voice_ideas.utils.exceptions import (
    ConfigurationError,
    IngestionError,
    VoiceIdeasError,
)
from voice_ideas.utils.logger import (
    LOG_FILES,
    ROOT_LOGGER_NAME,
    JSONFormatter,
    get_contextual_logger,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)


class TestGetLogger:
    """Test cases for logger naming."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("main", "voice_ideas"),
            ("loader", "voice_ideas.loader"),
            ("voice_ideas.entry_processor", "voice_ideas.entry_processor"),
            ("custom", "voice_ideas.custom"),
        ],
    )
    def test_logger_names(self, name: str, expected: str) -> None:
        """Test mapping component names to package loggers."""
        assert get_logger(name).name == expected

    def test_contextual_logger_prefixes_message(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that context is prefixed and attached to records."""
        log = get_contextual_logger("loader", path="entries.csv")

        with caplog.at_level(logging.INFO):
            log.info("Loading entries")

        assert "[path=entries.csv] Loading entries" in caplog.text
        assert caplog.records[0].path == "entries.csv"


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_console_only(self) -> None:
        """Test console-only logging setup."""
        setup_logging(level="WARNING")

        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert root.propagate is False

    def test_file_handlers(self, tmp_path: Path) -> None:
        """Test that errors reach both the main and errors log files."""
        setup_logging(level="DEBUG", log_dir=tmp_path, console_output=False)

        get_logger("processor").error("boom")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        assert "boom" in (tmp_path / LOG_FILES["main"]).read_text()
        assert "boom" in (tmp_path / LOG_FILES["errors"]).read_text()

    def test_from_settings(
        self,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test logging setup driven by settings."""
        setup_logging_from_settings()

        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JSONFormatter)


class TestJSONFormatter:
    """Test cases for JSONFormatter."""

    def test_includes_extra_fields(self) -> None:
        """Test that extra record fields appear in the JSON output."""
        record = logging.LogRecord(
            name="voice_ideas.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Processed %d entries",
            args=(3,),
            exc_info=None,
        )
        record.entry_count = 3

        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "Processed 3 entries"
        assert payload["level"] == "INFO"
        assert payload["entry_count"] == 3


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_base_str_and_dict(self) -> None:
        """Test string and dict forms of the base exception."""
        cause = ValueError("bad")
        error = VoiceIdeasError("Failed", details={"k": "v"}, cause=cause)

        assert str(error) == "Failed (k=v) [caused by: bad]"
        assert error.to_dict() == {
            "error_type": "VoiceIdeasError",
            "message": "Failed",
            "details": {"k": "v"},
            "cause": "bad",
        }

    def test_ingestion_error_details(self) -> None:
        """Test the details carried by IngestionError."""
        error = IngestionError("Unreadable", path=Path("a.csv"), line_number=4)

        assert isinstance(error, VoiceIdeasError)
        assert error.details == {"path": "a.csv", "line_number": 4}

    def test_configuration_error_details(self) -> None:
        """Test the details carried by ConfigurationError."""
        error = ConfigurationError("Bad", invalid_keys={"limit": "0"})

        assert error.invalid_keys == {"limit": "0"}
        assert error.missing_keys == []
        assert "invalid_keys" in error.details
