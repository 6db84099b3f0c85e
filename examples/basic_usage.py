#!/usr/bin/env python3
"""
Basic Usage Example - Simple Stocks Exchange

This script demonstrates the basic usage of the exchange ledger. It shows how to:
- Create an exchange and load the configured instrument catalog
- Record buy and sell trades, including one outside the 15 minute window
- Print the analytics report (volume weighted prices, index, yield, P/E)

Run: python examples/basic_usage.py
"""

from datetime import timedelta

from simplestocks.config.loader import ConfigLoader
from simplestocks.exchange import StockExchange
from simplestocks.logging.config import configure_logging
from simplestocks.reporting import build_report, print_report


def record_sample_trades(exchange: StockExchange) -> None:
    """Record trades whose results are easy to check by hand."""
    now = exchange.now()

    # Give every instrument a price so the All Share Index covers the catalog
    exchange.buy("ALE", price=100, quantity=10, timestamp=now)
    exchange.buy("TEA", price=20, quantity=1000, timestamp=now)
    exchange.buy("POP", price=200, quantity=10000, timestamp=now)
    exchange.buy("GIN", price=200, quantity=1000000, timestamp=now)
    exchange.buy("JOE", price=2000, quantity=10000000, timestamp=now)

    # More ALE trades for the volume weighted price
    exchange.buy("ALE", price=1000, quantity=10, timestamp=now + timedelta(seconds=1))
    exchange.sell("ALE", price=1000, quantity=11, timestamp=now + timedelta(seconds=2))
    exchange.buy("ALE", price=100, quantity=11, timestamp=now + timedelta(seconds=3))

    # Outside the 15 minute window, inside the 30 minute one
    exchange.buy("ALE", price=10000, quantity=12, timestamp=now - timedelta(minutes=16))


def main() -> None:
    """Run the demonstration session."""
    loader = ConfigLoader.create()
    config = loader.merge_config()

    configure_logging(loader.load_logging_params(config))

    params = loader.load_exchange_params(config)
    exchange = StockExchange(params=params, config_loader=loader)
    exchange.load_instruments(loader.load_catalog(config))

    record_sample_trades(exchange)

    print_report(build_report(exchange))


if __name__ == "__main__":
    main()
