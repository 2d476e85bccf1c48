"""Price provider interface.

PriceProvider is the only market-data capability the analytics core depends
on.  Concrete implementations live in src/infrastructure/market_data/ and are
wired at the application boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from src.domain.models.market_data import PriceBar


class PriceProvider(ABC):
    """Read interface for daily price history."""

    @abstractmethod
    async def get_daily_history(
        self,
        ticker: str,
        start: date,
        end: date,
    ) -> list[PriceBar]:
        """Return daily bars for one ticker in ascending date order.

        The range is half-open: start is inclusive, end is exclusive.
        Bars with non-positive prices are filtered out before returning.
        On total failure (network error, unknown ticker) an empty list is
        returned rather than raising.
        """
