"""EUR/USD exchange rate provider with a time-to-live cache."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import requests

from savings_bot.schemas.currency import RateResponse
from savings_bot.services.cache import CacheRecord

logger = logging.getLogger(__name__)

DEFAULT_RATE_URL = "https://api.exchangerate-api.com/v4/latest/EUR"
DEFAULT_EUR_USD = 1.08
RATE_TTL_SECONDS = 60 * 60


class ExchangeRateProvider:
    """
    Serves the EUR->USD rate.

    Lookup order: fresh cache, live fetch, stale cache, configured default.
    Fetch failures are logged and never raised.
    """

    def __init__(
        self,
        url: str = DEFAULT_RATE_URL,
        default_rate: float = DEFAULT_EUR_USD,
        ttl: float = RATE_TTL_SECONDS,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.url = url
        self.default_rate = default_rate
        self.ttl = ttl
        self.timeout = timeout
        self.session = session or requests.Session()
        self.clock = clock
        self._cache: Optional[CacheRecord[float]] = None

    @property
    def cache(self) -> Optional[CacheRecord[float]]:
        return self._cache

    def _fetch(self) -> float:
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        rate = float(data["rates"]["USD"])
        if rate <= 0:
            raise ValueError(f"non-positive USD rate {rate}")
        return rate

    def get_rate(self) -> RateResponse:
        now = self.clock()
        cached = self._cache
        if cached is not None and cached.is_fresh(now):
            return RateResponse(rate=cached.value, source="cache", fetched_at=cached.timestamp)

        try:
            rate = self._fetch()
        except (requests.RequestException, KeyError, TypeError, ValueError) as exc:
            logger.warning("exchange rate fetch failed: %s", exc)
            if cached is not None:
                return RateResponse(rate=cached.value, source="stale", fetched_at=cached.timestamp)
            return RateResponse(rate=self.default_rate, source="default")

        self._cache = CacheRecord(value=rate, timestamp=now, ttl=self.ttl)
        logger.info("exchange rate refreshed: 1 EUR = %.4f USD", rate)
        return RateResponse(rate=rate, source="live", fetched_at=now)
