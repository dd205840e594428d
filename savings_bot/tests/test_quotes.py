from __future__ import annotations

from math import isclose

import numpy as np
import requests

from conftest import FakeClock, FakeResponse, FakeSession, FixedSource, chart_payload
from savings_bot.services.quotes import (
    StockQuoteProvider,
    parse_chart,
    simulated_history,
    summarize_quotes,
)


def test_parse_chart_keeps_last_twelve_valid_months():
    closes = [float(100 + i) for i in range(15)]
    closes[13] = None
    points = parse_chart(chart_payload(closes))

    assert len(points) == 11
    assert points[0].close == 103.0
    assert points[-1].close == 114.0
    assert all(1 <= p.month <= 12 for p in points)


def test_parse_chart_handles_empty_payload():
    assert parse_chart({}) == []
    assert parse_chart({"chart": {"result": None}}) == []


def test_summary_statistics():
    summary = summarize_quotes(parse_chart(chart_payload([100.0, 120.0, 132.0])))

    assert summary.current_price == 132.0
    assert isclose(summary.change_percentage, 10.0)
    assert summary.total_volume == 3000
    assert isclose(summary.average_price, 352.0 / 3)
    assert summarize_quotes([]) is None


def test_history_is_cached_for_five_minutes_per_symbol():
    clock = FakeClock()
    session = FakeSession(FakeResponse(chart_payload([10.0, 11.0])))
    quotes = StockQuoteProvider(session=session, clock=clock)

    first = quotes.get_history("vug")
    clock.advance(299)
    second = quotes.get_history("VUG")

    assert (first.source, second.source) == ("live", "cache")
    assert first.points == second.points
    assert len(session.calls) == 1
    assert session.calls[0]["url"].endswith("/VUG")
    assert session.calls[0]["params"] == {"interval": "1mo", "range": "1y"}


def test_failure_serves_stale_data_then_simulated_bars():
    clock = FakeClock()
    session = FakeSession(
        FakeResponse(chart_payload([10.0, 11.0])),
        requests.Timeout("slow"),
        requests.ConnectionError("offline"),
    )
    quotes = StockQuoteProvider(session=session, clock=clock, rng=FixedSource(0.4))

    fresh = quotes.get_history("VUG")
    clock.advance(600)
    stale = quotes.get_history("VUG")
    missing = quotes.get_history("SPY")

    assert stale.source == "stale"
    assert stale.points == fresh.points
    assert missing.source == "simulated"
    assert len(missing.points) == 12


def test_simulated_history_follows_fixed_draws():
    # U = 0.4 means no monthly drift: flat price, 2% high/low band, 4M volume
    points = simulated_history(FixedSource(0.4))

    assert [p.month for p in points] == list(range(1, 13))
    for point in points:
        assert isclose(point.close, 150.0)
        assert isclose(point.high, 153.0)
        assert isclose(point.low, 147.0)
        assert point.volume == 4_000_000


def test_simulated_history_chains_open_to_previous_close():
    points = simulated_history(np.random.default_rng(9))

    assert points[0].open == 150.0
    for previous, current in zip(points, points[1:]):
        assert current.open == previous.close
    for point in points:
        assert point.close * 0.95 <= point.low <= point.close <= point.high <= point.close * 1.05
        assert 2_000_000 <= point.volume < 7_000_000


def test_simulated_bars_are_not_cached():
    session = FakeSession(requests.ConnectionError("offline"), FakeResponse(chart_payload([10.0, 11.0])))
    quotes = StockQuoteProvider(session=session, clock=FakeClock(), rng=FixedSource(0.4))

    assert quotes.get_history("VUG").source == "simulated"
    assert quotes.get_history("VUG").source == "live"
