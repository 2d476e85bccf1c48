"""Risk/performance metrics service.

Single-factor model of portfolio returns against a benchmark:

  β        = Cov(r_p, r_b) / Var(r_b)
  α_daily  = mean(r_p) − β · mean(r_b)
  R²       = Cov² / (Var(r_b) · Var(r_p) + ε)
  TE       = std(r_p − β · r_b) · √252
  IR       = (mean(r_p) − mean(r_b)) · 252 / TE
  Sharpe   = (mean(r) − rf_daily) / (std(r) + ε) · √252

Moments are sample moments (n − 1 denominator).  Annualisation uses 252
trading days; alpha is compounded, not multiplied.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from src.domain.models.market_data import ReturnPoint
from src.domain.models.metrics import MetricsResult

logger = logging.getLogger(__name__)

TRADING_DAYS = 252
MIN_OBSERVATIONS = 10   # fewer paired returns than this → MetricsResult.zero()
_EPS = 1e-12


def _sample_cov(x: np.ndarray, y: np.ndarray) -> float:
    """Sample covariance (n − 1); exactly 0 when either series is constant.

    A constant series whose value has no exact binary form (0.01, 0.0003)
    would otherwise leave rounding residue around its mean.
    """
    n = x.size
    if n < 2 or np.ptp(x) == 0 or np.ptp(y) == 0:
        return 0.0
    return float(((x - x.mean()) * (y - y.mean())).sum() / (n - 1))


def _sample_var(x: np.ndarray) -> float:
    return _sample_cov(x, x)


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


class MetricsService:
    """Pure computation of MetricsResult from two daily return series.

    Never raises on degenerate data: zero variances, empty overlaps and
    non-finite intermediate ratios all resolve to 0.
    """

    def align(
        self,
        portfolio_returns: Sequence[ReturnPoint],
        benchmark_returns: Sequence[ReturnPoint],
    ) -> tuple[np.ndarray, np.ndarray]:
        """Pair portfolio and benchmark returns on common dates.

        Portfolio order is preserved; portfolio points with no benchmark
        return on the same date are dropped.

        Returns:
            (rp, rb): equal-length 1-D float arrays.
        """
        benchmark_by_date = {point.bar_date: point.ret for point in benchmark_returns}
        pairs = [
            (point.ret, benchmark_by_date[point.bar_date])
            for point in portfolio_returns
            if point.bar_date in benchmark_by_date
        ]
        if not pairs:
            return np.empty(0), np.empty(0)
        paired = np.asarray(pairs, dtype=float)
        return paired[:, 0], paired[:, 1]

    def compute_metrics(
        self,
        portfolio_returns: Sequence[ReturnPoint],
        benchmark_returns: Sequence[ReturnPoint],
        risk_free_annual: float,
    ) -> MetricsResult:
        """Compute alpha, beta, R², volatility, tracking error, IR and Sharpe ratios.

        Args:
            portfolio_returns: Daily portfolio returns (ordered, unaligned).
            benchmark_returns: Daily benchmark returns (ordered, unaligned).
            risk_free_annual: Annual risk-free rate as a decimal fraction (0.02 = 2 %).

        Returns:
            MetricsResult; all-zero when fewer than 10 dates overlap.

        Raises:
            ValueError: If risk_free_annual is ≤ −1 (no daily equivalent exists).
        """
        if risk_free_annual <= -1.0:
            raise ValueError(
                f"risk_free_annual must be greater than -1, got {risk_free_annual!r}"
            )

        rp, rb = self.align(portfolio_returns, benchmark_returns)
        if rp.size < MIN_OBSERVATIONS:
            logger.info(
                "Only %d overlapping daily returns (need %d); returning zero metrics.",
                rp.size,
                MIN_OBSERVATIONS,
            )
            return MetricsResult.zero()

        mean_p = float(rp.mean())
        mean_b = float(rb.mean())
        var_p = _sample_var(rp)
        var_b = _sample_var(rb)
        cov = _sample_cov(rp, rb)

        beta = cov / var_b if var_b > 0 else 0.0
        alpha_daily = mean_p - beta * mean_b

        r_squared = (cov * cov) / (var_b * var_p + _EPS)
        r_squared = min(max(r_squared, 0.0), 1.0) if math.isfinite(r_squared) else 0.0

        sqrt_days = math.sqrt(TRADING_DAYS)
        volatility_annual = math.sqrt(var_p) * sqrt_days
        with np.errstate(over="ignore", invalid="ignore"):
            alpha_annual = float(np.power(1.0 + alpha_daily, TRADING_DAYS)) - 1.0

        excess = rp - beta * rb
        tracking_error_annual = math.sqrt(_sample_var(excess)) * sqrt_days

        rf_daily = (1.0 + risk_free_annual) ** (1.0 / TRADING_DAYS) - 1.0
        sharpe_portfolio = (mean_p - rf_daily) / (math.sqrt(var_p) + _EPS) * sqrt_days
        sharpe_benchmark = (mean_b - rf_daily) / (math.sqrt(var_b) + _EPS) * sqrt_days

        information_ratio = (
            (mean_p - mean_b) * TRADING_DAYS / tracking_error_annual
            if tracking_error_annual > 0
            else 0.0
        )

        return MetricsResult(
            alpha_annual=_finite(alpha_annual),
            beta=_finite(beta),
            r_squared=r_squared,
            volatility_annual=_finite(volatility_annual),
            tracking_error_annual=_finite(tracking_error_annual),
            information_ratio=_finite(information_ratio),
            sharpe_portfolio=_finite(sharpe_portfolio),
            sharpe_benchmark=_finite(sharpe_benchmark),
        )
