"""Tests for structured logging configuration."""

import json
import logging
from io import StringIO
from unittest.mock import patch

import structlog

from active_content.core.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and context before each test."""
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def test_development_mode(self) -> None:
        """Should accept events in pretty-printed mode."""
        configure_logging(development=True)
        get_logger("test").debug("content_activated", index=1)

    def test_production_mode_from_environment(self) -> None:
        """Should read ENVIRONMENT to pick JSON output."""
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}):
            configure_logging()
            get_logger("test").info("content_inserted", index=0)

    def test_log_level_from_environment(self) -> None:
        """Should read LOG_LEVEL when no level is passed."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_explicit_log_level_wins(self) -> None:
        """Should prefer the argument over the environment."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True, log_level="WARNING")
            assert logging.getLogger().level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        """Should not fail on a misspelled level."""
        configure_logging(development=True, log_level="VERBOSE")
        assert logging.getLogger().level == logging.INFO

    def test_silences_asyncio(self) -> None:
        """Should keep slow-callback reports of asyncio out of the output."""
        configure_logging(development=True, log_level="DEBUG")
        assert logging.getLogger("asyncio").level == logging.WARNING


class TestProductionJsonOutput:
    """Tests for JSON output in production mode."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        structlog.contextvars.clear_contextvars()

    def teardown_method(self) -> None:
        structlog.contextvars.clear_contextvars()

    def test_json_output_carries_bound_context(self) -> None:
        """Should render events as JSON including bound context."""
        output = StringIO()
        handler = logging.StreamHandler(output)
        handler.setLevel(logging.INFO)

        configure_logging(development=False, log_level="INFO")
        root_logger = logging.getLogger()
        root_logger.addHandler(handler)

        try:
            structlog.contextvars.bind_contextvars(widget="stepper")
            get_logger("test.json").info("content_removed", index=2)

            handler.flush()
            lines = [line for line in output.getvalue().splitlines() if line]
            parsed = json.loads(lines[-1])
            assert parsed["event"] == "content_removed"
            assert parsed["index"] == 2
            assert parsed["widget"] == "stepper"
            assert parsed["level"] == "info"
        finally:
            root_logger.removeHandler(handler)
