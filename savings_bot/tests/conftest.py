from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests
from flask.testing import FlaskClient

from savings_bot.app import create_app
from savings_bot.config import Settings
from savings_bot.services.quotes import StockQuoteProvider
from savings_bot.services.rates import ExchangeRateProvider
from savings_bot.services.storage import JsonStateStore


class FixedSource:
    """Random source that always returns the same draw."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"status {self.status_code}")

    def json(self) -> Any:
        return self.payload


class FakeSession:
    """Replays queued responses (or raises queued exceptions) for every get()."""

    def __init__(self, *responses: Any):
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def chart_payload(closes: List[Optional[float]], start: int = 1_672_531_200) -> Dict[str, Any]:
    month = 31 * 24 * 3600
    timestamps = [start + i * month for i in range(len(closes))]
    return {
        "chart": {
            "result": [
                {
                    "timestamp": timestamps,
                    "indicators": {
                        "quote": [
                            {
                                "open": [c and c - 1 for c in closes],
                                "high": [c and c + 2 for c in closes],
                                "low": [c and c - 2 for c in closes],
                                "close": closes,
                                "volume": [1000 for _ in closes],
                            }
                        ]
                    },
                }
            ]
        }
    }


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def rate_session() -> FakeSession:
    return FakeSession(FakeResponse({"rates": {"USD": 1.1}}))


@pytest.fixture()
def quote_session() -> FakeSession:
    return FakeSession(FakeResponse(chart_payload([100.0, 110.0])))


@pytest.fixture()
def client(tmp_path, clock, rate_session, quote_session) -> FlaskClient:
    settings = Settings(state_path=tmp_path / "state.json", log_level="WARNING")
    app = create_app(
        settings,
        rate_provider=ExchangeRateProvider(session=rate_session, clock=clock),
        quote_provider=StockQuoteProvider(session=quote_session, clock=clock, rng=FixedSource(0.4)),
        state_store=JsonStateStore(settings.state_path),
    )
    with app.test_client() as test_client:
        yield test_client
