"""Portfolio domain models.

A Portfolio is a read-only view of (ticker, quantity) positions consumed by
the valuation service.  Trade application and persistence live outside the
analytics core.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Position(BaseModel):
    """A holding of one security.

    ticker is stored trimmed and upper-cased.  quantity may be fractional;
    positions with quantity 0 are kept on the portfolio but ignored when
    valuing it.
    """

    model_config = ConfigDict(frozen=True)

    ticker: str = Field(min_length=1)
    quantity: float = 0.0

    @field_validator("ticker")
    @classmethod
    def _normalise_ticker(cls, value: str) -> str:
        ticker = value.strip().upper()
        if not ticker:
            raise ValueError("ticker must not be blank")
        return ticker

    def market_value(self, price: float) -> float:
        return self.quantity * price


class Portfolio(BaseModel):
    """A named set of positions, one per ticker (case-insensitive)."""

    model_config = ConfigDict(frozen=True)

    name: str = "My Portfolio"
    positions: list[Position] = Field(default_factory=list)

    @model_validator(mode="after")
    def _tickers_are_unique(self) -> Portfolio:
        counts = Counter(p.ticker for p in self.positions)
        duplicates = sorted(t for t, n in counts.items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate positions for ticker(s): {', '.join(duplicates)}")
        return self

    @classmethod
    def from_quantities(
        cls,
        quantities: dict[str, float],
        name: str = "My Portfolio",
    ) -> Portfolio:
        """Build a portfolio from a ticker → quantity mapping."""
        return cls(
            name=name,
            positions=[Position(ticker=t, quantity=q) for t, q in quantities.items()],
        )

    def get_position(self, ticker: str) -> Position | None:
        key = ticker.strip().upper()
        return next((p for p in self.positions if p.ticker == key), None)

    def holdings(self) -> dict[str, float]:
        """Return {ticker: quantity} for every position with a non-zero quantity."""
        return {p.ticker: p.quantity for p in self.positions if p.quantity != 0}
