"""Summaries derived from a projection series, plus the plain (non-invested) savings math."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from savings_bot.models import (
    InvestmentResult,
    PeriodResult,
    SaverCard,
    TimelinePoint,
    YearlyBreakdown,
)

MONTHS_PER_YEAR = 12
TIMELINE_YEARS = 5
SAVER_SLOTS = 4


def derive_summary(series: Sequence[PeriodResult]) -> InvestmentResult:
    """Terminal summary of a series; an empty series gives all zeros."""
    if not series:
        return InvestmentResult()
    last = series[-1]
    return InvestmentResult(
        total_invested=last.invested,
        final_value=last.value,
        gain=last.value - last.invested,
    )


def _percentage(gain: float, invested: float) -> Optional[float]:
    if invested == 0:
        return None
    pct = gain / invested * 100
    # overflowed inputs must never surface as NaN or Infinity
    return pct if math.isfinite(pct) else None


def return_percentage(result: InvestmentResult) -> Optional[float]:
    """gain / invested * 100, or None when nothing was invested or the figure is not finite."""
    return _percentage(result.gain, result.total_invested)


def period_snapshot(series: Sequence[PeriodResult], year: int) -> Optional[PeriodResult]:
    """The entry for `year` (1-based) as-is, or None outside the horizon."""
    if year < 1 or year > len(series):
        return None
    return series[year - 1]


def yearly_breakdown(series: Sequence[PeriodResult]) -> List[YearlyBreakdown]:
    return [
        YearlyBreakdown(
            year=row.year,
            invested=row.invested,
            value=row.value,
            gain=row.gain,
            return_percentage=_percentage(row.gain, row.invested),
        )
        for row in series
    ]


# ---------------------------------------------
# Plain savings: linear, no returns, no randomness
# ---------------------------------------------


def savings_for_period(monthly_saving: float, years: int) -> float:
    return monthly_saving * (years * MONTHS_PER_YEAR)


def fixed_timeline(monthly_saving: float, years: int = TIMELINE_YEARS) -> List[TimelinePoint]:
    """
    Saved totals for years 1..years (capped at 5).

    Deliberately linear; market growth belongs to the projection engine.
    Nothing to show when there is no positive monthly saving.
    """
    if monthly_saving <= 0:
        return []
    last_year = max(0, min(years, TIMELINE_YEARS))
    return [
        TimelinePoint(
            year=year,
            months=year * MONTHS_PER_YEAR,
            total_saved=savings_for_period(monthly_saving, year),
        )
        for year in range(1, last_year + 1)
    ]


def saver_cards(per_person_amount: float, names: Sequence[str], years: int) -> List[SaverCard]:
    """
    One card per display slot. Slots beyond the supplied names get an empty
    name but the same amounts, since every member saves the same monthly figure.
    """
    if per_person_amount <= 0:
        return []
    one_year = savings_for_period(per_person_amount, 1)
    three_years = savings_for_period(per_person_amount, 3)
    total = savings_for_period(per_person_amount, max(0, years))

    cards: List[SaverCard] = []
    for index in range(SAVER_SLOTS):
        cards.append(
            SaverCard(
                name=names[index] if index < len(names) else "",
                monthly=per_person_amount,
                one_year=one_year,
                three_years=three_years,
                total=total,
            )
        )
    return cards
