"""Return series service: valuation series → simple and cumulative returns."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from src.domain.models.market_data import ReturnPoint, ValuePoint


class ReturnService:
    """Stateless conversion of value sequences into ReturnPoints.

    Portfolio valuations and single-asset closes go through the same
    arithmetic (compute_returns).
    """

    def compute_returns(self, values: Sequence[ValuePoint]) -> list[ReturnPoint]:
        """Compute simple returns and the running compounded return.

          r_i   = (V_i − V_{i−1}) / V_{i−1}
          cum_i = Π_{j≤i} (1 + r_j) − 1

        Output length is always len(values) − 1 (0 for fewer than two
        points): the first value has no prior period.  Returns span whatever
        date gap exists between consecutive inputs.
        """
        if len(values) < 2:
            return []

        series = pd.Series([point.value for point in values], dtype=float)
        previous = series.shift(1)
        returns = ((series - previous) / previous).iloc[1:]
        cumulative = (1.0 + returns).cumprod() - 1.0

        return [
            ReturnPoint(bar_date=point.bar_date, ret=float(ret), cum_ret=float(cum))
            for point, ret, cum in zip(values[1:], returns, cumulative)
        ]

