"""In-memory implementation of PriceProvider.

Useful offline and in tests: bars are loaded up front with add_bars() and
served back through the same contract as the HTTP provider.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from src.domain.models.market_data import PriceBar
from src.domain.providers.prices import PriceProvider

from .symbols import normalize_symbol


class InMemoryPriceProvider(PriceProvider):
    def __init__(self, bars: dict[str, Iterable[PriceBar]] | None = None) -> None:
        self._bars: dict[str, dict[date, PriceBar]] = {}
        for ticker, series in (bars or {}).items():
            self.add_bars(ticker, series)

    def add_bars(self, ticker: str, bars: Iterable[PriceBar]) -> int:
        """Store bars under the normalized ticker; a later bar replaces one on the same date.

        Returns the number of bars held for the ticker afterwards.
        """
        by_date = self._bars.setdefault(normalize_symbol(ticker), {})
        for bar in bars:
            by_date[bar.bar_date] = bar
        return len(by_date)

    async def get_daily_history(
        self,
        ticker: str,
        start: date,
        end: date,
    ) -> list[PriceBar]:
        by_date = self._bars.get(normalize_symbol(ticker), {})
        return [by_date[d] for d in sorted(by_date) if start <= d < end]
