"""Market data domain models.

PriceBar    — one trading day's OHLCV for one ticker.
ValuePoint  — a mark-to-market observation (portfolio total or a single close).
ReturnPoint — a simple return relative to the prior observation, with the
              compounded cumulative return since the start of the series.

All are immutable value objects (no identity beyond their natural key).
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class PriceBar(BaseModel):
    """Daily OHLCV bar for one ticker.

    close is the field used for valuation and return computation.
    Bars with any non-positive price are rejected; providers discard such rows
    before constructing bars.  The natural key is (ticker, bar_date).
    """

    model_config = ConfigDict(frozen=True)

    ticker: str
    bar_date: date
    open: float = Field(gt=0.0)
    high: float = Field(gt=0.0)
    low: float = Field(gt=0.0)
    close: float = Field(gt=0.0)
    volume: int = Field(default=0, ge=0)


class ValuePoint(BaseModel):
    """Value of a portfolio (or a single asset's close) on one date."""

    model_config = ConfigDict(frozen=True)

    bar_date: date
    value: float = Field(gt=0.0)


class ReturnPoint(BaseModel):
    """A computed return observation at one date.

    ret is the simple return (V_t − V_{t−1}) / V_{t−1}, e.g. 0.012 = +1.2 %.
    cum_ret is Π(1 + ret_j) − 1 over every point up to and including this one.

    A series of n valuations yields n − 1 return points: the first valuation
    has no prior period and never produces a ReturnPoint.
    """

    model_config = ConfigDict(frozen=True)

    bar_date: date
    ret: float
    cum_ret: float
