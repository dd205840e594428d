from __future__ import annotations

import requests

from conftest import FakeClock, FakeResponse, FakeSession
from savings_bot.services.rates import ExchangeRateProvider


def provider(session, clock, **kwargs) -> ExchangeRateProvider:
    return ExchangeRateProvider(session=session, clock=clock, **kwargs)


def test_live_fetch_then_cache_within_ttl():
    clock = FakeClock()
    session = FakeSession(FakeResponse({"rates": {"USD": 1.1}}))
    rates = provider(session, clock)

    first = rates.get_rate()
    clock.advance(59 * 60)
    second = rates.get_rate()

    assert (first.rate, first.source) == (1.1, "live")
    assert (second.rate, second.source) == (1.1, "cache")
    assert len(session.calls) == 1
    assert rates.cache.ttl == 3600


def test_refetches_after_ttl_expires():
    clock = FakeClock()
    session = FakeSession(
        FakeResponse({"rates": {"USD": 1.1}}),
        FakeResponse({"rates": {"USD": 1.2}}),
    )
    rates = provider(session, clock)

    rates.get_rate()
    clock.advance(3600)
    refreshed = rates.get_rate()

    assert (refreshed.rate, refreshed.source) == (1.2, "live")
    assert refreshed.fetched_at == clock.now


def test_failure_falls_back_to_stale_cache():
    clock = FakeClock()
    session = FakeSession(
        FakeResponse({"rates": {"USD": 1.1}}),
        requests.ConnectionError("offline"),
    )
    rates = provider(session, clock)

    rates.get_rate()
    clock.advance(7200)
    stale = rates.get_rate()

    assert (stale.rate, stale.source) == (1.1, "stale")


def test_failure_without_cache_uses_default():
    session = FakeSession(FakeResponse(status_code=500))
    rates = provider(session, FakeClock(), default_rate=1.05)

    fallback = rates.get_rate()
    assert (fallback.rate, fallback.source) == (1.05, "default")
    assert rates.cache is None


def test_malformed_payload_uses_default():
    session = FakeSession(FakeResponse({"rates": {}}))
    assert provider(session, FakeClock()).get_rate().source == "default"
