"""Tests for structured logging configuration.

Verifies that structured logging works in both JSON and human-readable
modes, and that the navigator's own event names log cleanly.
"""

import pytest

from ledger.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Test logging setup function."""

    def test_setup_logging_with_json_mode(self):
        """setup_logging configures JSON output for deployments."""
        setup_logging(json_logs=True, log_level="INFO")

        logger = get_logger("test")

        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")
        assert hasattr(logger, "warning")

    def test_setup_logging_with_human_readable_mode(self):
        """setup_logging configures human-readable output for development."""
        setup_logging(json_logs=False, log_level="INFO")

        logger = get_logger("test")

        assert hasattr(logger, "info")

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_setup_logging_with_different_log_levels(self, level):
        """setup_logging accepts every standard level name."""
        setup_logging(json_logs=False, log_level=level)

    def test_setup_logging_level_is_case_insensitive(self):
        setup_logging(json_logs=False, log_level="debug")

    def test_setup_logging_rejects_unknown_level(self):
        with pytest.raises(AttributeError):
            setup_logging(json_logs=False, log_level="LOUD")


class TestGetLogger:
    """Test logger retrieval."""

    def test_multiple_loggers_can_be_created(self):
        setup_logging(json_logs=False)

        logger1 = get_logger("ledger.engines.funnel_renderer")
        logger2 = get_logger("ledger.services.threshold_controller")

        assert logger1 is not None
        assert logger2 is not None

    def test_logger_has_standard_methods(self):
        setup_logging(json_logs=False)
        logger = get_logger("test")

        for method in ("debug", "info", "warning", "error", "critical"):
            assert hasattr(logger, method)


class TestNavigatorEvents:
    """The event shapes the navigator emits log without raising."""

    def test_threshold_event(self):
        setup_logging(json_logs=True)
        logger = get_logger("ledger.services.threshold_controller")

        logger.info("threshold_changed", threshold=0.85, listeners=2)

    def test_marker_failure_event(self):
        setup_logging(json_logs=False)
        logger = get_logger("ledger.engines.funnel_renderer")

        try:
            raise ValueError("confidence out of range")
        except ValueError as e:
            logger.warning("marker_render_failed", claim_id="c-9", error=str(e))

    def test_logging_with_none_and_nested_values(self):
        setup_logging(json_logs=True)
        logger = get_logger("test")

        logger.info("test_event", grade=None, scene={"markers": {"c-1": {"visible": True}}})

    def test_logging_with_special_characters(self):
        setup_logging(json_logs=False)
        logger = get_logger("test")

        logger.info("test_event", title="Bill 42 – \"Clean\nWater\" Act")
