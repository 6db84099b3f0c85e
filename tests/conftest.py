"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone

from simplestocks.config.loader import ConfigLoader
from simplestocks.exchange import StockExchange
from simplestocks.models.enums import InstrumentCategory
from simplestocks.models.instrument import Instrument


T0 = datetime(2024, 1, 2, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, start: datetime = T0):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture
def t0() -> datetime:
    """Fixed reference time for trade timestamps."""
    return T0


@pytest.fixture
def clock() -> FakeClock:
    """Fake exchange clock starting at T0."""
    return FakeClock()


@pytest.fixture
def default_loader(tmp_path) -> ConfigLoader:
    """Config loader pointed at an empty directory, so only built-in defaults apply."""
    return ConfigLoader.create(tmp_path)


@pytest.fixture
def exchange(clock, default_loader) -> StockExchange:
    """Exchange with the default catalog loaded and no trades."""
    se = StockExchange(clock=clock, config_loader=default_loader)
    se.load_instruments()
    return se


@pytest.fixture
def ale() -> Instrument:
    """Ordinary instrument with a declared dividend."""
    return Instrument("ALE", InstrumentCategory.ORDINARY, par_value=60, last_dividend=23)


@pytest.fixture
def tea() -> Instrument:
    """Ordinary instrument with no dividend."""
    return Instrument("TEA", InstrumentCategory.ORDINARY, par_value=100, last_dividend=0)


@pytest.fixture
def gin() -> Instrument:
    """Preferred instrument paying a 2% fixed rate on par 100."""
    return Instrument("GIN", InstrumentCategory.PREFERRED, par_value=100,
                      last_dividend=8, fixed_rate=2.0)
