"""Yahoo Finance v8 chart implementation of PriceProvider.

Daily OHLCV history is read from the anonymous chart endpoint:

  GET {base}/v8/finance/chart/{symbol}?period1=..&period2=..&interval=1d

period1/period2 are UTC-midnight unix timestamps of the requested dates.
Bar timestamps are shifted by meta.gmtoffset before being reduced to a
calendar date, so each bar lands on the exchange's trading day.

Failure contract: every error path (HTTP status, transport error, malformed
payload) yields an empty list.  HTTP 429 is retried with a fixed delay.
Successful responses are cached per (symbol, period1, period2) for a TTL.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from datetime import date, datetime, timedelta, timezone
from typing import Any
from urllib.parse import quote

import httpx

from src.domain.models.market_data import PriceBar
from src.domain.providers.prices import PriceProvider
from src.infrastructure.config import Settings, settings as default_settings

from .symbols import normalize_symbol

logger = logging.getLogger(__name__)

_TOO_MANY_REQUESTS = 429


def _unix_midnight(day: date) -> int:
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


def _number_array(quote_node: dict[str, Any], key: str) -> list[float]:
    """Read one quote array; null or non-numeric entries become 0."""
    raw = quote_node.get(key)
    if not isinstance(raw, list):
        return []
    return [float(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else 0.0 for v in raw]


def parse_chart_payload(ticker: str, payload: Any) -> list[PriceBar]:
    """Convert a chart API JSON payload into ascending, de-duplicated PriceBars.

    Rows where any of open/high/low/close is missing, non-positive or
    non-finite are discarded, as are rows whose timestamp is out of range.
    When arrays differ in length the shortest OHLC array bounds the rows
    read; a missing or non-finite volume reads as 0.
    """
    try:
        result = payload["chart"]["result"][0]
    except (KeyError, IndexError, TypeError):
        return []
    if not isinstance(result, dict):
        return []

    meta = result.get("meta") or {}
    offset = meta.get("gmtoffset") if isinstance(meta, dict) else None
    offset = offset if isinstance(offset, int) else 0

    timestamps = result.get("timestamp")
    if not isinstance(timestamps, list):
        return []

    try:
        quote_node = result["indicators"]["quote"][0]
    except (KeyError, IndexError, TypeError):
        return []
    if not isinstance(quote_node, dict):
        return []

    opens = _number_array(quote_node, "open")
    highs = _number_array(quote_node, "high")
    lows = _number_array(quote_node, "low")
    closes = _number_array(quote_node, "close")
    volumes = _number_array(quote_node, "volume")

    rows = min(len(timestamps), len(opens), len(highs), len(lows), len(closes))
    by_date: dict[date, PriceBar] = {}
    for i in range(rows):
        open_, high, low, close = opens[i], highs[i], lows[i], closes[i]
        prices = (open_, high, low, close)
        if not all(p > 0 and math.isfinite(p) for p in prices):
            continue
        ts = timestamps[i]
        if not isinstance(ts, (int, float)) or isinstance(ts, bool):
            continue
        try:
            bar_date = datetime.fromtimestamp(int(ts) + offset, tz=timezone.utc).date()
        except (OverflowError, OSError, ValueError):
            logger.debug("Skipping %s row %d with out-of-range timestamp %r", ticker, i, ts)
            continue
        raw_volume = volumes[i] if i < len(volumes) else 0.0
        volume = int(raw_volume) if raw_volume > 0 and math.isfinite(raw_volume) else 0
        by_date[bar_date] = PriceBar(
            ticker=ticker,
            bar_date=bar_date,
            open=open_,
            high=high,
            low=low,
            close=close,
            volume=volume,
        )
    return [by_date[d] for d in sorted(by_date)]


class YahooChartPriceProvider(PriceProvider):
    """Daily history from the Yahoo chart API with retry and a TTL cache.

    Owns (and closes) the httpx.AsyncClient it creates; an injected client is
    left open for its owner.  Use as an async context manager or call aclose().
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.http_timeout_seconds),
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            },
        )
        self._base_url = self._settings.yahoo_base_url.rstrip("/")
        self._cache: dict[tuple[str, int, int], tuple[float, list[PriceBar]]] = {}

    async def __aenter__(self) -> YahooChartPriceProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def clear_cache(self) -> None:
        self._cache.clear()

    async def get_daily_history(
        self,
        ticker: str,
        start: date,
        end: date,
    ) -> list[PriceBar]:
        symbol = normalize_symbol(ticker)
        if not symbol:
            return []
        if end <= start:
            end = start + timedelta(days=1)

        period1, period2 = _unix_midnight(start), _unix_midnight(end)
        key = (symbol, period1, period2)
        cached = self._cache.get(key)
        if cached is not None and time.monotonic() - cached[0] < self._settings.history_cache_ttl_seconds:
            logger.debug("History cache hit for %s (%s → %s)", symbol, start, end)
            return list(cached[1])

        payload = await self._fetch_chart(
            symbol,
            {
                "period1": period1,
                "period2": period2,
                "interval": "1d",
                "events": "div,split",
            },
        )
        if payload is None:
            return []

        bars = parse_chart_payload(symbol, payload)
        if not bars:
            logger.warning("No usable daily bars for %s between %s and %s", symbol, start, end)
        self._store(key, bars)
        return list(bars)

    def _store(self, key: tuple[str, int, int], bars: list[PriceBar]) -> None:
        """Cache bars under key, dropping every entry older than the TTL."""
        now = time.monotonic()
        ttl = self._settings.history_cache_ttl_seconds
        self._cache = {k: v for k, v in self._cache.items() if now - v[0] < ttl}
        self._cache[key] = (now, bars)

    async def _fetch_chart(self, symbol: str, params: dict[str, Any]) -> Any | None:
        """GET the chart payload, retrying on 429.  Returns None on any failure."""
        url = f"{self._base_url}/v8/finance/chart/{quote(symbol, safe='')}"
        attempt = 0
        while True:
            attempt += 1
            try:
                response = await self._client.get(url, params=params)
            except httpx.HTTPError as exc:
                logger.warning("Chart request for %s failed: %r", symbol, exc)
                return None

            if response.status_code == _TOO_MANY_REQUESTS and attempt < self._settings.max_attempts:
                logger.debug(
                    "Rate limited on %s (attempt %d/%d); retrying",
                    symbol,
                    attempt,
                    self._settings.max_attempts,
                )
                await asyncio.sleep(self._settings.retry_delay_seconds)
                continue

            if not response.is_success:
                logger.warning("Chart request for %s returned HTTP %d", symbol, response.status_code)
                return None

            try:
                return response.json()
            except ValueError:
                logger.warning("Chart response for %s is not valid JSON", symbol)
                return None
