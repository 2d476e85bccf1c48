"""Performance service: portfolio and benchmark returns plus their metrics.

Wires a PriceProvider through ValuationService → ReturnService →
MetricsService.  This is the entry point the surrounding application calls;
the three underlying services stay individually usable.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import date

from src.domain.models.market_data import ReturnPoint
from src.domain.models.metrics import MetricsResult, PerformanceReport
from src.domain.models.portfolio import Portfolio
from src.domain.providers.prices import PriceProvider

from .metrics import MetricsService
from .returns import ReturnService
from .valuation import ValuationService

logger = logging.getLogger(__name__)

MIN_VALUATION_POINTS = 3
DEFAULT_BENCHMARK = "^GSPC"
DEFAULT_RISK_FREE_RATE = 0.02


class PerformanceService:
    def __init__(
        self,
        provider: PriceProvider,
        *,
        valuation: ValuationService | None = None,
        returns: ReturnService | None = None,
        metrics: MetricsService | None = None,
        benchmark: str = DEFAULT_BENCHMARK,
        risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
    ) -> None:
        self._valuation = valuation or ValuationService(provider)
        self._returns = returns or ReturnService()
        self._metrics = metrics or MetricsService()
        self._benchmark = benchmark
        self._risk_free_rate = risk_free_rate

    async def compute_portfolio_returns(
        self,
        portfolio: Portfolio,
        start: date,
        end: date,
    ) -> list[ReturnPoint]:
        """Daily returns of the whole portfolio over [start, end).

        Returns an empty list when fewer than 3 valuation dates are available.
        """
        values = await self._valuation.assemble(portfolio.holdings(), start, end)
        if len(values) < MIN_VALUATION_POINTS:
            logger.info(
                "Portfolio %r has %d valuation date(s) between %s and %s; "
                "not enough history for returns.",
                portfolio.name,
                len(values),
                start,
                end,
            )
            return []
        return self._returns.compute_returns(values)

    async def compute_asset_returns(
        self,
        ticker: str,
        start: date,
        end: date,
    ) -> list[ReturnPoint]:
        """Daily returns of a single ticker's closes over [start, end)."""
        values = await self._valuation.asset_series(ticker, start, end)
        return self._returns.compute_returns(values)

    def compute_metrics(
        self,
        portfolio_returns: Sequence[ReturnPoint],
        benchmark_returns: Sequence[ReturnPoint],
        risk_free_annual: float,
    ) -> MetricsResult:
        return self._metrics.compute_metrics(
            portfolio_returns, benchmark_returns, risk_free_annual
        )

    async def evaluate(
        self,
        portfolio: Portfolio,
        start: date,
        end: date,
        benchmark: str | None = None,
        risk_free_rate: float | None = None,
    ) -> PerformanceReport:
        """Compute both return series concurrently and the metrics between them.

        benchmark and risk_free_rate default to the values the service was
        constructed with.
        """
        benchmark = benchmark or self._benchmark
        if risk_free_rate is None:
            risk_free_rate = self._risk_free_rate

        portfolio_returns, benchmark_returns = await asyncio.gather(
            self.compute_portfolio_returns(portfolio, start, end),
            self.compute_asset_returns(benchmark, start, end),
        )
        metrics = self.compute_metrics(portfolio_returns, benchmark_returns, risk_free_rate)

        return PerformanceReport(
            benchmark=benchmark,
            risk_free_rate=risk_free_rate,
            portfolio_returns=portfolio_returns,
            benchmark_returns=benchmark_returns,
            metrics=metrics,
        )
