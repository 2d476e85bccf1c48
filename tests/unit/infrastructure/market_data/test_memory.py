"""Tests for InMemoryPriceProvider."""

import asyncio
from datetime import date

from src.domain.models.market_data import PriceBar
from src.infrastructure.market_data.memory import InMemoryPriceProvider


def _bar(bar_date: date, close: float = 10.0) -> PriceBar:
    return PriceBar(ticker="AAPL", bar_date=bar_date, open=close, high=close, low=close, close=close)


def test_returns_bars_sorted_ascending():
    provider = InMemoryPriceProvider({"AAPL": [_bar(date(2024, 1, 3)), _bar(date(2024, 1, 2))]})
    bars = asyncio.run(provider.get_daily_history("AAPL", date(2024, 1, 1), date(2024, 2, 1)))
    assert [b.bar_date for b in bars] == [date(2024, 1, 2), date(2024, 1, 3)]


def test_range_is_half_open():
    provider = InMemoryPriceProvider({"AAPL": [_bar(date(2024, 1, d)) for d in (1, 2, 3)]})
    bars = asyncio.run(provider.get_daily_history("AAPL", date(2024, 1, 1), date(2024, 1, 3)))
    assert [b.bar_date for b in bars] == [date(2024, 1, 1), date(2024, 1, 2)]


def test_unknown_ticker_returns_empty():
    provider = InMemoryPriceProvider()
    assert asyncio.run(provider.get_daily_history("NOPE", date(2024, 1, 1), date(2024, 2, 1))) == []


def test_lookup_normalizes_symbol():
    provider = InMemoryPriceProvider({"gspc": [_bar(date(2024, 1, 2))]})
    bars = asyncio.run(provider.get_daily_history("^GSPC", date(2024, 1, 1), date(2024, 2, 1)))
    assert len(bars) == 1


def test_add_bars_replaces_same_date_and_returns_count():
    provider = InMemoryPriceProvider()
    assert provider.add_bars("AAPL", [_bar(date(2024, 1, 2), 10.0)]) == 1
    assert provider.add_bars("AAPL", [_bar(date(2024, 1, 2), 12.0), _bar(date(2024, 1, 3))]) == 2
    bars = asyncio.run(provider.get_daily_history("AAPL", date(2024, 1, 1), date(2024, 2, 1)))
    assert bars[0].close == 12.0
