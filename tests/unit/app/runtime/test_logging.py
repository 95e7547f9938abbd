"""Unit tests for loguru configuration."""

from unittest.mock import patch

from src.app.runtime.config.config_data import LoggingConfig
from src.app.runtime.logging import configure_logging


class TestConfigureLogging:
    """Test the loguru sink setup."""

    def test_uses_configured_level(self):
        """Should replace the sinks with one at the configured level."""
        with patch("src.app.runtime.logging.logger") as mock_logger:
            configure_logging(LoggingConfig(level="warning", colorize=False))

        mock_logger.remove.assert_called_once_with()
        kwargs = mock_logger.add.call_args.kwargs
        assert kwargs["level"] == "WARNING"
        assert kwargs["colorize"] is False

    def test_explicit_level_wins(self):
        """An explicit level should override the configured one."""
        with patch("src.app.runtime.logging.logger") as mock_logger:
            configure_logging(LoggingConfig(level="INFO"), level="debug")

        assert mock_logger.add.call_args.kwargs["level"] == "DEBUG"

    def test_defaults(self):
        """Without arguments the default logging section applies."""
        with patch("src.app.runtime.logging.logger") as mock_logger:
            configure_logging()

        assert mock_logger.add.call_args.kwargs["level"] == "INFO"
        assert "{message}" in mock_logger.add.call_args.kwargs["format"]
