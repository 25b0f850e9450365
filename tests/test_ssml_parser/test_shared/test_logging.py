"""Tests for correlation-aware logging."""

import logging
from unittest.mock import patch

import pytest

from ssml_parser.shared.logging import (
    VALID_LEVELS,
    CorrelationLogger,
    configure_logging,
    get_logger,
)


class TestCorrelationLogger:
    """Test structured extras on log records."""

    def test_component_defaults_to_module_name(self):
        """Test the component falls back to the last name segment."""
        logger = get_logger("ssml_parser.tree.builder")
        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "builder"
        assert logger.correlation_id is None

    def test_records_carry_correlation_info(self, caplog):
        """Test records include correlation ID, component and extras."""
        logger = get_logger("ssml_parser.test", "req-42", "tester")

        with caplog.at_level(logging.INFO, logger="ssml_parser.test"):
            logger.info("parsed", extra={"elements_built": 3})

        (record,) = caplog.records
        assert record.message == "parsed"
        assert record.correlation_id == "req-42"
        assert record.component == "tester"
        assert record.elements_built == 3

    def test_is_enabled_for(self, caplog):
        """Test level checks follow the underlying logger."""
        logger = get_logger("ssml_parser.level_check")
        with caplog.at_level(logging.ERROR, logger="ssml_parser.level_check"):
            assert logger.is_enabled_for(logging.ERROR)
            assert not logger.is_enabled_for(logging.DEBUG)

    def test_warning_without_exception_info(self, caplog):
        """Test warning records carry no traceback by default."""
        logger = get_logger("ssml_parser.warning_test")

        with caplog.at_level(logging.WARNING, logger="ssml_parser.warning_test"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.warning("failed")

        (record,) = caplog.records
        assert record.levelno == logging.WARNING
        assert not record.exc_info


class TestConfigureLogging:
    """Test command-line logging setup."""

    def test_invalid_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError, match="logging level must be one of"):
            configure_logging("LOUD")

    @pytest.mark.parametrize("level", VALID_LEVELS)
    def test_valid_levels(self, level):
        """Test valid levels are passed to basicConfig."""
        with patch("ssml_parser.shared.logging.logging.basicConfig") as basic_config:
            configure_logging(level)

        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == getattr(logging, level)
