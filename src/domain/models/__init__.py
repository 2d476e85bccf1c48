"""Domain model package.

All domain objects are pure Python / Pydantic models with no HTTP or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .market_data import PriceBar, ReturnPoint, ValuePoint
from .metrics import MetricsResult, PerformanceReport
from .portfolio import Portfolio, Position

__all__ = [
    # market data
    "PriceBar",
    "ReturnPoint",
    "ValuePoint",
    # portfolio
    "Portfolio",
    "Position",
    # metrics
    "MetricsResult",
    "PerformanceReport",
]
