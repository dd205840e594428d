"""Monthly historical stock quotes from the public Yahoo chart endpoint."""

from __future__ import annotations

import logging
import math
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import requests

from savings_bot.core.projection import RandomSource, default_random_source
from savings_bot.schemas.quotes import QuoteHistory, QuotePoint, QuoteSummary
from savings_bot.services.cache import CacheRecord

logger = logging.getLogger(__name__)

CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{symbol}"
QUOTE_TTL_SECONDS = 5 * 60
HISTORY_MONTHS = 12

SIMULATED_START_PRICE = 150.0
SIMULATED_DRIFT = 0.4
SIMULATED_SWING = 0.15
SIMULATED_RANGE = 0.05
SIMULATED_VOLUME_MIN = 2_000_000
SIMULATED_VOLUME_SPAN = 5_000_000


def parse_chart(payload: Dict[str, Any], months: int = HISTORY_MONTHS) -> List[QuotePoint]:
    """
    Pull the last `months` monthly bars out of a chart payload.
    Bars missing any of open/high/low/close are skipped.
    """
    results = (payload.get("chart") or {}).get("result") or []
    if not results:
        return []
    result = results[0]
    timestamps = result.get("timestamp") or []
    quote = ((result.get("indicators") or {}).get("quote") or [{}])[0]

    def column(name: str) -> list:
        return quote.get(name) or []

    opens, highs, lows, closes, volumes = (
        column("open"),
        column("high"),
        column("low"),
        column("close"),
        column("volume"),
    )

    def at(values: list, index: int) -> Optional[float]:
        return values[index] if index < len(values) else None

    points: List[QuotePoint] = []
    for index in range(max(0, len(timestamps) - months), len(timestamps)):
        bar = [at(opens, index), at(highs, index), at(lows, index), at(closes, index)]
        if not all(bar):
            continue
        when = datetime.fromtimestamp(timestamps[index], tz=timezone.utc)
        points.append(
            QuotePoint(
                month=when.month,
                date=when,
                open=bar[0],
                high=bar[1],
                low=bar[2],
                close=bar[3],
                volume=at(volumes, index) or 0,
            )
        )
    return points


def simulated_history(rng: RandomSource, months: int = HISTORY_MONTHS) -> List[QuotePoint]:
    """
    Stand-in monthly bars for when no real data is available: start at 150,
    move (U - 0.4) * 15% a month, high/low within 5% of the close, each open
    equal to the previous close, volume in [2M, 7M).
    """
    points: List[QuotePoint] = []
    price = SIMULATED_START_PRICE
    for month in range(months):
        open_price = points[-1].close if points else SIMULATED_START_PRICE
        price *= 1 + (float(rng.random()) - SIMULATED_DRIFT) * SIMULATED_SWING
        high = price * (1 + float(rng.random()) * SIMULATED_RANGE)
        low = price * (1 - float(rng.random()) * SIMULATED_RANGE)
        volume = math.floor(float(rng.random()) * SIMULATED_VOLUME_SPAN + SIMULATED_VOLUME_MIN)
        points.append(
            QuotePoint(
                month=month % 12 + 1,
                open=open_price,
                high=high,
                low=low,
                close=price,
                volume=volume,
            )
        )
    return points


def summarize_quotes(points: List[QuotePoint]) -> Optional[QuoteSummary]:
    if not points:
        return None
    latest = points[-1]
    previous = points[-2] if len(points) > 1 else points[0]
    return QuoteSummary(
        current_price=latest.close,
        change_percentage=(latest.close - previous.close) / previous.close * 100,
        total_volume=sum(point.volume for point in points),
        average_price=sum(point.close for point in points) / len(points),
    )


class StockQuoteProvider:
    """Per-symbol TTL cache over the chart endpoint, degrading to stale then simulated data."""

    def __init__(
        self,
        url: str = CHART_URL,
        ttl: float = QUOTE_TTL_SECONDS,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
        rng: Optional[RandomSource] = None,
    ):
        self.url = url
        self.ttl = ttl
        self.timeout = timeout
        self.session = session or requests.Session()
        self.clock = clock
        self.rng = rng if rng is not None else default_random_source()
        self._cache: Dict[str, CacheRecord[List[QuotePoint]]] = {}

    def _fetch(self, symbol: str) -> List[QuotePoint]:
        response = self.session.get(
            self.url.format(symbol=symbol),
            params={"interval": "1mo", "range": "1y"},
            headers={"User-Agent": "Mozilla/5.0"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return parse_chart(response.json())

    def get_history(self, symbol: str) -> QuoteHistory:
        """
        Fresh cache, then a live fetch, then stale cache, then simulated bars.
        Simulated bars are never cached.
        """
        symbol = symbol.strip().upper()
        now = self.clock()
        cached = self._cache.get(symbol)
        if cached is not None and cached.is_fresh(now):
            return QuoteHistory(symbol=symbol, source="cache", points=cached.value)

        try:
            points = self._fetch(symbol)
        except (requests.RequestException, AttributeError, TypeError, ValueError) as exc:
            logger.warning("quote fetch for %s failed: %s", symbol, exc)
            points = []

        if points:
            self._cache[symbol] = CacheRecord(value=points, timestamp=now, ttl=self.ttl)
            logger.info("fetched %d monthly quotes for %s", len(points), symbol)
            return QuoteHistory(symbol=symbol, source="live", points=points)

        if cached is not None:
            logger.info("serving stale quotes for %s", symbol)
            return QuoteHistory(symbol=symbol, source="stale", points=cached.value)

        logger.info("no quotes for %s, serving simulated history", symbol)
        return QuoteHistory(symbol=symbol, source="simulated", points=simulated_history(self.rng))
