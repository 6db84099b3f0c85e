"""Unit tests for logging configuration helpers."""

import logging
from datetime import datetime, timezone
from unittest.mock import Mock, patch

from simplestocks.config.defaults import LoggingParams
from simplestocks.logging.config import (
    configure_logging,
    get_ledger_logger,
    log_trade_recorded,
)


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_configure_json(self) -> None:
        with patch("simplestocks.logging.config.structlog.configure") as mock_configure:
            configure_logging(level="DEBUG", format_json=True)

        processors = mock_configure.call_args.kwargs["processors"]
        assert type(processors[-1]).__name__ == "JSONRenderer"

    def test_configure_console(self) -> None:
        with patch("simplestocks.logging.config.structlog.configure") as mock_configure:
            configure_logging(level="info", include_timestamp=False)

        processors = mock_configure.call_args.kwargs["processors"]
        assert type(processors[-1]).__name__ == "ConsoleRenderer"
        assert not any(type(p).__name__ == "TimeStamper" for p in processors)

    def test_params_drive_processors(self) -> None:
        params = LoggingParams(format_json=True, include_timestamp=False, include_caller=True)

        with patch("simplestocks.logging.config.structlog.configure") as mock_configure:
            configure_logging(params)

        names = [type(p).__name__ for p in mock_configure.call_args.kwargs["processors"]]
        assert names[-1] == "JSONRenderer"
        assert "TimeStamper" not in names
        assert "CallsiteParameterAdder" in names

    def test_defaults_without_params(self) -> None:
        with patch("simplestocks.logging.config.structlog.configure") as mock_configure:
            configure_logging()

        names = [type(p).__name__ for p in mock_configure.call_args.kwargs["processors"]]
        assert names[-1] == "ConsoleRenderer"
        assert "TimeStamper" in names
        assert "CallsiteParameterAdder" not in names

    def test_keywords_override_params(self) -> None:
        params = LoggingParams(level="DEBUG", format_json=True)

        with patch("simplestocks.logging.config.structlog.configure") as mock_configure, \
                patch("simplestocks.logging.config.logging.basicConfig") as mock_basic:
            configure_logging(params, level="warning", format_json=False)

        processors = mock_configure.call_args.kwargs["processors"]
        assert type(processors[-1]).__name__ == "ConsoleRenderer"
        assert mock_basic.call_args.kwargs["level"] == logging.WARNING


class TestLedgerLogger:
    """Test ledger logger binding."""

    def test_binds_subsystem_and_exchange(self) -> None:
        base = Mock()
        with patch("simplestocks.logging.config.structlog.get_logger", return_value=base):
            get_ledger_logger("x", exchange_name="Test Exchange")

        base.bind.assert_called_once_with(subsystem="ledger")
        base.bind.return_value.bind.assert_called_once_with(exchange="Test Exchange")

    def test_log_trade_recorded(self) -> None:
        logger = Mock()
        ts = datetime(2024, 1, 2, 12, 0, 0, tzinfo=timezone.utc)

        log_trade_recorded(logger, "ALE", "buy", 10.0, 5, ts, price_updated=True)

        logger.bind.assert_called_once_with(
            symbol="ALE",
            side="buy",
            price=10.0,
            quantity=5,
            trade_ts=ts.isoformat(),
            price_updated=True,
        )
        logger.bind.return_value.info.assert_called_once_with("Trade recorded")

    def test_log_trade_recorded_with_context(self) -> None:
        logger = Mock()
        ts = datetime(2024, 1, 2, 12, 0, 0, tzinfo=timezone.utc)

        log_trade_recorded(logger, "ALE", "sell", 1.0, 1, ts, False, context={"source": "test"})

        logger.bind.return_value.bind.assert_called_once_with(context={"source": "test"})
