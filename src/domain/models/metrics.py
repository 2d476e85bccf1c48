"""Performance metrics domain models.

MetricsResult     — factor-model and risk-adjusted-return statistics for a
                    (portfolio, benchmark, risk-free rate) triple.
PerformanceReport — both return series plus their MetricsResult.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .market_data import ReturnPoint


class MetricsResult(BaseModel):
    """Snapshot of computed statistics.

    All annualised figures use 252 trading days.  alpha_annual compounds the
    daily alpha ((1 + α_d)^252 − 1); volatility and tracking error scale by √252.

    Every field is 0 when fewer than 10 overlapping daily observations exist;
    use MetricsResult.zero() for that case.  A present-but-zero result is
    indistinguishable from the low-data result by value alone; callers that
    need the distinction check the length of the input return series.
    """

    model_config = ConfigDict(frozen=True)

    alpha_annual: float = 0.0
    beta: float = 0.0
    r_squared: float = Field(default=0.0, ge=0.0, le=1.0)
    volatility_annual: float = 0.0
    tracking_error_annual: float = 0.0
    information_ratio: float = 0.0
    sharpe_portfolio: float = 0.0
    sharpe_benchmark: float = 0.0

    @classmethod
    def zero(cls) -> MetricsResult:
        return cls()


class PerformanceReport(BaseModel):
    """Portfolio and benchmark return series with their metrics."""

    model_config = ConfigDict(frozen=True)

    benchmark: str
    risk_free_rate: float
    portfolio_returns: list[ReturnPoint] = Field(default_factory=list)
    benchmark_returns: list[ReturnPoint] = Field(default_factory=list)
    metrics: MetricsResult = Field(default_factory=MetricsResult.zero)

    @property
    def has_history(self) -> bool:
        return bool(self.portfolio_returns) and bool(self.benchmark_returns)
