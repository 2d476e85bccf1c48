"""Valuation service: per-ticker daily bars → date-aligned valuation series.

Each ticker's history is fetched independently and concurrently.  The
portfolio series is built on the union of all bar dates: on each date a
ticker contributes quantity × close only if it has a bar on exactly that
date.  There is no forward-fill and no interpolation, so a sparse provider
day shows up as a lower total rather than a carried-forward price.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from datetime import date, timedelta

import pandas as pd

from src.domain.models.market_data import PriceBar, ValuePoint
from src.domain.providers.prices import PriceProvider

logger = logging.getLogger(__name__)


def normalize_range(start: date, end: date) -> tuple[date, date]:
    """Widen an empty or inverted [start, end) range to a single day."""
    if end <= start:
        end = start + timedelta(days=1)
    return start, end


class ValuationService:
    """Assembles valuation series from a PriceProvider.

    A failed or cancelled fetch for one ticker never aborts the assembly:
    that ticker contributes no dates, which yields a sparser but valid series.
    """

    def __init__(self, provider: PriceProvider) -> None:
        self._provider = provider

    async def assemble(
        self,
        holdings: Mapping[str, float],
        start: date,
        end: date,
    ) -> list[ValuePoint]:
        """Value a set of holdings on every date any of them has a bar.

        Args:
            holdings: ticker → quantity.  Zero quantities are ignored.
            start: First date of the range (inclusive).
            end: End of the range (exclusive); widened to start + 1 day when
                 end <= start.

        Returns:
            ValuePoints with strictly increasing dates.  Dates whose total is
            not strictly positive are omitted.
        """
        start, end = normalize_range(start, end)
        active = {ticker: qty for ticker, qty in holdings.items() if qty != 0}
        if not active:
            return []

        tickers = list(active)
        results = await asyncio.gather(
            *(self._provider.get_daily_history(t, start, end) for t in tickers),
            return_exceptions=True,
        )

        closes: dict[str, pd.Series] = {}
        for ticker, result in zip(tickers, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Price history fetch for %s failed; treating it as empty: %r",
                    ticker,
                    result,
                )
                continue
            if result:
                closes[ticker] = self._close_series(result)

        if not closes:
            return []

        # Outer join on the date index: the union of dates, NaN where a ticker has no bar.
        frame = pd.concat(closes, axis=1, sort=True)
        quantities = pd.Series({ticker: active[ticker] for ticker in frame.columns})
        totals = frame.mul(quantities, axis=1).sum(axis=1, min_count=1)
        totals = totals[totals > 0]

        return [
            ValuePoint(bar_date=ts.date(), value=float(value))
            for ts, value in totals.items()
        ]

    async def asset_series(self, ticker: str, start: date, end: date) -> list[ValuePoint]:
        """Return one ticker's closes as a valuation series (single-asset path)."""
        start, end = normalize_range(start, end)
        try:
            bars = await self._provider.get_daily_history(ticker, start, end)
        except Exception as exc:
            logger.warning(
                "Price history fetch for %s failed; treating it as empty: %r",
                ticker,
                exc,
            )
            return []
        return [ValuePoint(bar_date=bar.bar_date, value=bar.close) for bar in bars]

    @staticmethod
    def _close_series(bars: list[PriceBar]) -> pd.Series:
        """Date-indexed close series for one ticker; the last bar wins on duplicate dates."""
        index = pd.DatetimeIndex([pd.Timestamp(bar.bar_date) for bar in bars])
        series = pd.Series([bar.close for bar in bars], index=index, dtype=float)
        return series[~series.index.duplicated(keep="last")]
