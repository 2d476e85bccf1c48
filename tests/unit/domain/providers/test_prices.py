"""Tests for src/domain/providers/prices.py."""

import asyncio
from datetime import date

import pytest

from src.domain.providers.prices import PriceProvider


def _concrete() -> PriceProvider:
    class _Impl(PriceProvider):
        async def get_daily_history(self, ticker, start, end): return []

    return _Impl()


def test_price_provider_is_abstract():
    with pytest.raises(TypeError):
        PriceProvider()  # type: ignore[abstract]


def test_price_provider_concrete_instantiates():
    assert _concrete() is not None


def test_price_provider_get_daily_history_empty():
    result = asyncio.run(_concrete().get_daily_history("AAPL", date(2024, 1, 1), date(2024, 2, 1)))
    assert result == []
