"""
Exchange ledger.

Owns the instrument catalog, the per-symbol trade history and the latest-price
index, and answers the pricing analytics queries from them.

Assumptions:
- One instrument per symbol; symbols are the only key.
- Prices are not stored on instruments; the latest trade per symbol is the price.
- Floating point precision is not guaranteed.
"""

import math
import threading
from collections.abc import Iterable
from datetime import datetime
from typing import Callable, Optional

from .config.defaults import ExchangeParams
from .config.loader import ConfigLoader
from .errors import (
    InvalidQueryTimeError,
    InvalidTradeError,
    InvalidWindowError,
    UnknownInstrumentError,
)
from .logging.config import get_ledger_logger, log_trade_recorded
from .metrics.pricing import (
    calculate_geometric_mean,
    calculate_volume_weighted_price,
    trades_since,
)
from .models.enums import TradeSide
from .models.instrument import Instrument
from .models.trade import Trade
from .utils.time import get_market_time, is_aware, window_start

Clock = Callable[[], datetime]


class StockExchange:
    """
    Trade ledger and analytics for a single exchange.

    All mutable state sits behind one re-entrant lock. Writes hold it for the
    whole append and price-index update; queries copy what they need under the
    lock and compute outside it.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        params: Optional[ExchangeParams] = None,
        config_loader: Optional[ConfigLoader] = None,
        clock: Optional[Clock] = None
    ) -> None:
        """Initialize an empty exchange; call load_instruments() to list securities."""
        self.config_loader = config_loader or ConfigLoader.create()
        self.params = params or ExchangeParams()
        self._name = name or self.params.name
        self._clock: Clock = clock or get_market_time

        self._lock = threading.RLock()
        self._instruments: dict[str, Instrument] = {}
        self._trades: dict[str, list[Trade]] = {}
        self._latest: dict[str, Trade] = {}

        self.logger = get_ledger_logger(__name__, exchange_name=self._name)
        self.logger.info("Stock exchange initialized")

    @property
    def name(self) -> str:
        """Exchange name."""
        return self._name

    def now(self) -> datetime:
        """Current time according to the exchange clock."""
        return self._clock()

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def load_instruments(self, instruments: Optional[Iterable[Instrument]] = None) -> int:
        """
        Seed or refresh the instrument catalog.

        Instruments replace same-symbol definitions and add new ones; listed
        symbols are never removed and trade history is kept, so reloading is
        safe at any time.

        Args:
            instruments: Instruments to list, defaults to the configured catalog

        Returns:
            Number of instruments loaded
        """
        if instruments is None:
            catalog = self.config_loader.load_catalog()
        else:
            catalog = tuple(instruments)

        with self._lock:
            replaced = [i.symbol for i in catalog if i.symbol in self._instruments]
            for instrument in catalog:
                self._instruments[instrument.symbol] = instrument
            listed = len(self._instruments)

        self.logger.info(
            "Instrument catalog loaded",
            loaded=len(catalog),
            replaced=replaced,
            listed=listed
        )
        return len(catalog)

    def listed_instruments(self) -> tuple[Instrument, ...]:
        """Snapshot of the listed instruments; order is not guaranteed."""
        with self._lock:
            return tuple(self._instruments.values())

    def get_instrument(self, symbol: str) -> Instrument:
        """Look up a listed instrument by symbol."""
        with self._lock:
            instrument = self._instruments.get(symbol)

        if instrument is None:
            self.logger.warning("Unknown instrument requested", symbol=symbol)
            raise UnknownInstrumentError(
                f"Instrument {symbol!r} is not listed on {self._name}",
                symbol=symbol,
                context={"exchange": self._name},
            )
        return instrument

    # ------------------------------------------------------------------
    # Trade recording
    # ------------------------------------------------------------------

    def record_trade(
        self,
        symbol: str,
        side: TradeSide,
        price: float,
        quantity: int,
        timestamp: Optional[datetime] = None
    ) -> Trade:
        """
        Record a trade and update the symbol's latest price.

        The latest-price entry moves only to a strictly newer trade, so an
        out-of-order (older) trade is kept in history but never becomes the price.

        Args:
            symbol: Listed instrument symbol
            side: Buy or sell
            price: Price per unit
            quantity: Units traded
            timestamp: Market time of the trade, defaults to the exchange clock

        Returns:
            The recorded Trade

        Raises:
            UnknownInstrumentError: symbol is not listed
            InvalidTradeError: quantity, price or timestamp is invalid
        """
        instrument = self.get_instrument(symbol)
        if timestamp is None:
            timestamp = self._clock()

        try:
            trade = instrument.trade(price, quantity, side, timestamp)
        except InvalidTradeError as e:
            self.logger.warning(
                "Trade rejected",
                symbol=symbol,
                side=getattr(side, "value", side),
                price=price,
                quantity=quantity,
                error=str(e)
            )
            raise

        with self._lock:
            self._trades.setdefault(symbol, []).append(trade)

            current = self._latest.get(symbol)
            price_updated = current is None or trade.timestamp > current.timestamp
            if price_updated:
                self._latest[symbol] = trade

        log_trade_recorded(
            self.logger,
            symbol=symbol,
            side=trade.side.value,
            price=trade.price,
            quantity=trade.quantity,
            timestamp=trade.timestamp,
            price_updated=price_updated,
        )
        return trade

    def buy(
        self,
        symbol: str,
        price: float,
        quantity: int,
        timestamp: Optional[datetime] = None
    ) -> Trade:
        """Record a buy trade."""
        return self.record_trade(symbol, TradeSide.BUY, price, quantity, timestamp)

    def sell(
        self,
        symbol: str,
        price: float,
        quantity: int,
        timestamp: Optional[datetime] = None
    ) -> Trade:
        """Record a sell trade."""
        return self.record_trade(symbol, TradeSide.SELL, price, quantity, timestamp)

    def trades_for(self, symbol: str) -> tuple[Trade, ...]:
        """Trade history for a symbol in insertion order."""
        self.get_instrument(symbol)
        with self._lock:
            return tuple(self._trades.get(symbol, ()))

    def latest_trade(self, symbol: str) -> Optional[Trade]:
        """Most recent trade by timestamp, None if the symbol has not traded."""
        self.get_instrument(symbol)
        with self._lock:
            return self._latest.get(symbol)

    def latest_price(self, symbol: str) -> Optional[float]:
        """Current price of a symbol, None if it has not traded."""
        trade = self.latest_trade(symbol)
        return trade.price if trade else None

    # ------------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------------

    def volume_weighted_price(
        self,
        symbol: str,
        window_minutes: Optional[float] = None,
        as_of: Optional[datetime] = None
    ) -> float:
        """
        Volume weighted price over a trailing window.

        Args:
            symbol: Listed instrument symbol
            window_minutes: Window length, defaults to 15 minutes
            as_of: End of the window, defaults to the exchange clock

        Returns:
            Volume weighted price, or 0.0 if no trades fall in the window

        Raises:
            UnknownInstrumentError: symbol is not listed
            InvalidWindowError: window is not a positive, finite number of minutes
            InvalidQueryTimeError: as_of is not a timezone-aware datetime
        """
        if window_minutes is None:
            window_minutes = self.params.default_window_minutes

        if (isinstance(window_minutes, bool)
                or not isinstance(window_minutes, (int, float))
                or (isinstance(window_minutes, float) and not math.isfinite(window_minutes))
                or window_minutes <= 0):
            self.logger.warning(
                "Invalid volume weighted price window",
                symbol=symbol,
                window_minutes=window_minutes
            )
            raise InvalidWindowError(
                f"Window must be a positive number of minutes, got {window_minutes!r}",
                window_minutes=window_minutes,
            )

        if as_of is not None and (not isinstance(as_of, datetime) or not is_aware(as_of)):
            self.logger.warning(
                "Invalid volume weighted price reference time",
                symbol=symbol,
                as_of=repr(as_of)
            )
            raise InvalidQueryTimeError(
                f"as_of must be a timezone-aware datetime, got {as_of!r}",
                as_of=as_of,
            )

        history = self.trades_for(symbol)
        bound = window_start(as_of or self._clock(), window_minutes)
        in_window = trades_since(history, bound)

        vwp = calculate_volume_weighted_price(in_window)

        self.logger.debug(
            "Volume weighted price calculated",
            symbol=symbol,
            window_minutes=window_minutes,
            trades_in_window=len(in_window),
            trades_total=len(history),
            vwp=vwp
        )
        return vwp

    def all_share_index(self) -> float:
        """
        All-Share Index: geometric mean of the latest price of every traded instrument.

        Instruments that have never traded are left out entirely.

        Returns:
            Index value, or 0.0 if nothing has traded
        """
        with self._lock:
            prices = [trade.price for trade in self._latest.values()]

        index = calculate_geometric_mean(prices)

        self.logger.debug(
            "All share index calculated",
            constituents=len(prices),
            index=index
        )
        return index

    def dividend_yield(self, symbol: str, price: float) -> float:
        """Dividend yield of a listed instrument at the given price."""
        return self.get_instrument(symbol).dividend_yield(price)

    def pe_ratio(self, symbol: str, price: float) -> float:
        """P/E ratio of a listed instrument at the given price."""
        return self.get_instrument(symbol).pe_ratio(price)
