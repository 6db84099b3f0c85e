"""Point-in-time exchange report built from the ledger query operations."""

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional, TextIO

from ..config.defaults import ExchangeParams
from ..errors import UndefinedRatioError
from ..logging.config import get_logger
from ..utils.time import format_market_time

if TYPE_CHECKING:
    from ..exchange import StockExchange

logger = get_logger(__name__)


@dataclass(frozen=True)
class InstrumentLine:
    """Analytics for one listed instrument."""
    symbol: str
    vwp_default: float
    vwp_extended: float
    dividend_yield: Optional[float]       # None when undefined at the sample price
    pe_ratio: float


@dataclass(frozen=True)
class ExchangeReport:
    """Snapshot of exchange analytics."""
    exchange_name: str
    generated_at: datetime
    all_share_index: float
    default_window_minutes: float
    extended_window_minutes: float
    sample_price: float
    lines: tuple[InstrumentLine, ...]


def build_report(
    exchange: "StockExchange",
    params: Optional[ExchangeParams] = None
) -> ExchangeReport:
    """
    Collect analytics for every listed instrument.

    Args:
        exchange: Exchange to report on
        params: Windows and sample price, defaults to the exchange's own params

    Returns:
        ExchangeReport with one line per instrument, sorted by symbol
    """
    params = params or exchange.params
    as_of = exchange.now()

    lines = []
    for instrument in sorted(exchange.listed_instruments(), key=lambda i: i.symbol):
        symbol = instrument.symbol

        try:
            yield_value: Optional[float] = exchange.dividend_yield(symbol, params.sample_price)
        except UndefinedRatioError:
            yield_value = None

        lines.append(InstrumentLine(
            symbol=symbol,
            vwp_default=exchange.volume_weighted_price(
                symbol, params.default_window_minutes, as_of=as_of
            ),
            vwp_extended=exchange.volume_weighted_price(
                symbol, params.extended_window_minutes, as_of=as_of
            ),
            dividend_yield=yield_value,
            pe_ratio=exchange.pe_ratio(symbol, params.sample_price),
        ))

    report = ExchangeReport(
        exchange_name=exchange.name,
        generated_at=as_of,
        all_share_index=exchange.all_share_index(),
        default_window_minutes=params.default_window_minutes,
        extended_window_minutes=params.extended_window_minutes,
        sample_price=params.sample_price,
        lines=tuple(lines),
    )

    logger.info(
        "Exchange report built",
        exchange=report.exchange_name,
        instruments=len(report.lines),
        all_share_index=report.all_share_index
    )
    return report


def _fmt(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.4f}"


def format_report(report: ExchangeReport) -> str:
    """Render a report as plain text."""
    out = [
        f"Exchange Name: {report.exchange_name}",
        f"Generated At: {format_market_time(report.generated_at)}",
        f"All Share Index value: {_fmt(report.all_share_index)}",
        "",
        f"Volume Weighted Stock Price for last {report.default_window_minutes:g} minutes:",
    ]
    out.extend(f"{line.symbol}: {_fmt(line.vwp_default)}" for line in report.lines)

    out.append("")
    out.append(f"Volume Weighted Stock Price for last {report.extended_window_minutes:g} minutes:")
    out.extend(f"{line.symbol}: {_fmt(line.vwp_extended)}" for line in report.lines)

    out.append("")
    out.append(f"Dividend yield for all stocks using {report.sample_price:g} as the price:")
    out.extend(f"{line.symbol}: {_fmt(line.dividend_yield)}" for line in report.lines)

    out.append("")
    out.append(f"P/E Ratio for all stocks using {report.sample_price:g} as the price:")
    out.extend(f"{line.symbol}: {_fmt(line.pe_ratio)}" for line in report.lines)

    return "\n".join(out) + "\n"


def print_report(report: ExchangeReport, stream: Optional[TextIO] = None) -> None:
    """Write a formatted report to a stream (stdout by default)."""
    print(format_report(report), file=stream or sys.stdout, flush=True)
