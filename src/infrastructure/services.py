"""Configured service construction for the application boundary."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.domain.services.performance import PerformanceService
from src.infrastructure.config import Settings, settings as default_settings
from src.infrastructure.market_data.yahoo import YahooChartPriceProvider


@asynccontextmanager
async def performance_service(
    settings: Settings | None = None,
) -> AsyncGenerator[PerformanceService, None]:
    """Yield a PerformanceService backed by the Yahoo provider; closes the HTTP client on exit."""
    settings = settings or default_settings
    async with YahooChartPriceProvider(settings=settings) as provider:
        yield PerformanceService(
            provider,
            benchmark=settings.benchmark_ticker,
            risk_free_rate=settings.risk_free_rate,
        )
