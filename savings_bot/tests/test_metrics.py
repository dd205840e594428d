from __future__ import annotations

from math import isclose

from savings_bot.core.metrics import (
    derive_summary,
    fixed_timeline,
    period_snapshot,
    return_percentage,
    saver_cards,
    savings_for_period,
    yearly_breakdown,
)
from savings_bot.models import InvestmentResult, PeriodResult


def sample_series() -> list[PeriodResult]:
    return [
        PeriodResult(year=1, invested=6000.0, value=6200.0, gain=200.0),
        PeriodResult(year=2, invested=12000.0, value=12900.0, gain=900.0),
        PeriodResult(year=3, invested=18000.0, value=17100.0, gain=-900.0),
    ]


def test_fixed_timeline_is_linear_for_five_years():
    timeline = fixed_timeline(500)

    assert [point.year for point in timeline] == [1, 2, 3, 4, 5]
    for point in timeline:
        assert point.months == point.year * 12
        assert point.total_saved == 500 * point.year * 12
    assert timeline[2].total_saved == 18000


def test_fixed_timeline_respects_shorter_horizon_and_caps_at_five():
    assert fixed_timeline(500, 3)[-1].total_saved == 18000
    assert len(fixed_timeline(500, 3)) == 3
    assert len(fixed_timeline(500, 12)) == 5


def test_fixed_timeline_is_empty_without_savings():
    assert fixed_timeline(0) == []
    assert fixed_timeline(-10) == []


def test_savings_for_period():
    assert savings_for_period(1000, 4) == 48000
    assert savings_for_period(1000, 0) == 0


def test_derive_summary_uses_last_period():
    summary = derive_summary(sample_series())
    assert summary == InvestmentResult(total_invested=18000.0, final_value=17100.0, gain=-900.0)
    assert isclose(return_percentage(summary), -5.0)


def test_empty_series_summary_has_no_return_percentage():
    summary = derive_summary([])
    assert summary == InvestmentResult(total_invested=0.0, final_value=0.0, gain=0.0)
    assert return_percentage(summary) is None


def test_return_percentage_guards_zero_capital():
    assert return_percentage(InvestmentResult(total_invested=0, final_value=50, gain=50)) is None


def test_return_percentage_is_none_when_not_finite():
    overflowed = InvestmentResult(total_invested=float("inf"), final_value=float("inf"), gain=float("nan"))
    assert return_percentage(overflowed) is None
    huge_gain = InvestmentResult(total_invested=1e-300, final_value=1e308, gain=1e308)
    assert return_percentage(huge_gain) is None


def test_period_snapshot_returns_entry_unchanged():
    series = sample_series()
    assert period_snapshot(series, 2) is series[1]
    assert period_snapshot(series, 0) is None
    assert period_snapshot(series, 4) is None


def test_yearly_breakdown_adds_percentages():
    breakdown = yearly_breakdown(sample_series())
    assert [row.year for row in breakdown] == [1, 2, 3]
    assert isclose(breakdown[1].return_percentage, 7.5)
    assert breakdown[2].gain == -900.0


def test_saver_cards_fill_four_slots():
    cards = saver_cards(250, ["L", "X"], years=2)

    assert [card.name for card in cards] == ["L", "X", "", ""]
    for card in cards:
        assert card.monthly == 250
        assert card.one_year == 3000
        assert card.three_years == 9000
        assert card.total == 6000


def test_saver_cards_hidden_without_amount():
    assert saver_cards(0, ["L"], years=5) == []
