"""Domain services package."""

from .metrics import MetricsService
from .performance import PerformanceService
from .returns import ReturnService
from .valuation import ValuationService

__all__ = ["MetricsService", "PerformanceService", "ReturnService", "ValuationService"]
