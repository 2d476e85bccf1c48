"""Market data providers."""

from .memory import InMemoryPriceProvider
from .symbols import normalize_symbol
from .yahoo import YahooChartPriceProvider, parse_chart_payload

__all__ = [
    "InMemoryPriceProvider",
    "YahooChartPriceProvider",
    "normalize_symbol",
    "parse_chart_payload",
]
