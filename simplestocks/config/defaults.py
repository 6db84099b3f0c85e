"""Default configuration parameters for the exchange ledger."""

from dataclasses import dataclass


# (symbol, category, par_value, last_dividend, fixed_rate)
# fixed_rate is None where no fixed return applies
DEFAULT_INSTRUMENTS: tuple[tuple, ...] = (
    ("TEA", "ordinary", 100, 0, None),
    ("POP", "ordinary", 100, 8, None),
    ("ALE", "ordinary", 60, 23, None),
    ("GIN", "preferred", 100, 8, 2.0),
    ("JOE", "ordinary", 250, 13, None),
)


@dataclass(frozen=True)
class ExchangeParams:
    """Exchange identity and analytics parameters."""
    name: str = "Global Beverage Corporation Exchange"
    default_window_minutes: int = 15               # Volume weighted price window
    extended_window_minutes: int = 30              # Secondary report window
    sample_price: float = 10.0                     # Price used for report valuations


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False                      # JSON lines instead of console output
    include_timestamp: bool = True
    include_caller: bool = False                   # Filename and line number


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    exchange: ExchangeParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        exchange=ExchangeParams(),
        logging=LoggingParams(),
    )


def default_instrument_entries() -> list[dict]:
    """Default catalog as config-style instrument entries."""
    entries = []
    for symbol, category, par_value, last_dividend, fixed_rate in DEFAULT_INSTRUMENTS:
        entry = {
            "symbol": symbol,
            "category": category,
            "par_value": par_value,
            "last_dividend": last_dividend,
        }
        if fixed_rate is not None:
            entry["fixed_rate"] = fixed_rate
        entries.append(entry)
    return entries
