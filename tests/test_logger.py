"""Tests for the logging setup module."""

import io
import logging

from docverify.utils.logger import get_logger, setup_logging


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def setup_method(self) -> None:
        self.root = logging.getLogger()
        self.saved_level = self.root.level

    def teardown_method(self) -> None:
        # Cleanup
        self.root.handlers.clear()
        self.root.setLevel(self.saved_level)

    def test_setup_creates_handler(self) -> None:
        self.root.handlers.clear()

        setup_logging("DEBUG")
        assert len(self.root.handlers) == 1
        assert self.root.level == logging.DEBUG

    def test_setup_idempotent(self) -> None:
        self.root.handlers.clear()

        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(self.root.handlers) == 1
        assert self.root.level == logging.INFO

    def test_invalid_level_defaults_to_info(self) -> None:
        self.root.handlers.clear()

        setup_logging("NONEXISTENT")
        assert self.root.level == logging.INFO

    def test_records_go_to_stream(self) -> None:
        self.root.handlers.clear()
        stream = io.StringIO()

        setup_logging("INFO", stream=stream)
        get_logger("docverify.test").info("classified as %s", "PAN")
        assert "docverify.test - INFO - classified as PAN" in stream.getvalue()

    def test_noisy_loggers_quietened(self) -> None:
        self.root.handlers.clear()

        setup_logging("DEBUG")
        assert logging.getLogger("PIL").level == logging.WARNING

    def test_existing_handlers_left_alone(self) -> None:
        self.root.handlers.clear()
        existing = logging.NullHandler()
        self.root.addHandler(existing)

        setup_logging("DEBUG")
        assert self.root.handlers == [existing]


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("docverify.module")
        assert logger.name == "docverify.module"
        assert isinstance(logger, logging.Logger)

    def test_same_name_returns_same_logger(self) -> None:
        assert get_logger("docverify.same") is get_logger("docverify.same")
