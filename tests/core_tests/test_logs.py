"""
Tests for loguru configuration.
"""

import sys

import pytest
from loguru import logger

from modelzoo_spec.core.config import Settings
from modelzoo_spec.core.logs import configure_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_sink(self, tmp_path, restore_logger):
        """Test that LOG_FILE adds a file sink receiving messages."""
        log_path = tmp_path / "logs" / "app.log"

        configure_logging(Settings(LOG_FILE=str(log_path), LOG_LEVEL="DEBUG"))
        logger.info("hello from the test")
        logger.complete()

        assert log_path.exists()
        assert "hello from the test" in log_path.read_text()

    def test_level_filters_file(self, tmp_path, restore_logger):
        """Test that messages below LOG_LEVEL are not written."""
        log_path = tmp_path / "app.log"

        configure_logging(Settings(LOG_FILE=str(log_path), LOG_LEVEL="WARNING"))
        logger.info("quiet")
        logger.warning("loud")
        logger.complete()

        content = log_path.read_text()
        assert "loud" in content
        assert "quiet" not in content

    def test_stderr_only(self, tmp_path, restore_logger, capsys):
        """Test that without LOG_FILE messages go to stderr."""
        configure_logging(Settings(LOG_LEVEL="INFO"))
        logger.info("to stderr")

        assert "to stderr" in capsys.readouterr().err
