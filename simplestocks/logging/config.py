"""
Centralized logging configuration for the exchange ledger.

This module provides standardized logging configuration using structlog
for all components. Ledger, configuration and reporting code obtain their
loggers here so that output is formatted consistently.
"""
import logging
import sys
from dataclasses import replace
from datetime import datetime
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    params: Optional[LoggingParams] = None,
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
    include_timestamp: Optional[bool] = None,
    include_caller: Optional[bool] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog and stdlib logging for the exchange.

    Settings come from `params` (the `logging` section of exchange.yaml);
    any keyword given explicitly wins over the matching field.

    Args:
        params: Logging parameters, defaults to LoggingParams()
        level: Override for params.level
        format_json: Override for params.format_json
        include_timestamp: Override for params.include_timestamp
        include_caller: Override for params.include_caller
        extra_processors: Additional structlog processors, run before rendering
    """
    params = params or LoggingParams()
    overrides = {
        "level": level,
        "format_json": format_json,
        "include_timestamp": include_timestamp,
        "include_caller": include_caller,
    }
    params = replace(params, **{k: v for k, v in overrides.items() if v is not None})

    log_level = getattr(logging, params.level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if params.include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if params.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if params.format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_ledger_logger(name: str, exchange_name: Optional[str] = None) -> FilteringBoundLogger:
    """
    Get a logger bound with ledger context.

    Args:
        name: Logger name (typically __name__)
        exchange_name: Exchange the ledger belongs to, if known

    Returns:
        Configured structlog logger for ledger events
    """
    logger = get_logger(name).bind(subsystem="ledger")
    if exchange_name:
        logger = logger.bind(exchange=exchange_name)
    return logger


def log_trade_recorded(
    logger: FilteringBoundLogger,
    symbol: str,
    side: str,
    price: float,
    quantity: int,
    timestamp: datetime,
    price_updated: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a recorded trade with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Instrument symbol traded
        side: Trade side value (buy/sell)
        price: Trade price per unit
        quantity: Units traded
        timestamp: Market timestamp of the trade
        price_updated: Whether the trade became the symbol's latest price
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        side=side,
        price=price,
        quantity=quantity,
        trade_ts=timestamp.isoformat(),
        price_updated=price_updated,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Trade recorded")
