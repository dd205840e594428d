from __future__ import annotations

import logging
from typing import List, Optional, Protocol

import numpy as np

from savings_bot.models import (
    ContributionStrategy,
    PeriodResult,
    ProjectionInput,
    RiskProfile,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class RandomSource(Protocol):
    """Anything with a uniform `random()` in [0, 1): numpy Generators, random.Random, test stubs."""

    def random(self) -> float: ...


# process-wide default; unseeded, so runs are not reproducible unless a source is injected
_default_rng: RandomSource = np.random.default_rng()


def default_random_source() -> RandomSource:
    return _default_rng


def sample_annual_return(profile: RiskProfile, rng: RandomSource) -> float:
    """base +/- half the volatility, uniform."""
    return profile.base_return + (float(rng.random()) - 0.5) * profile.volatility


def monthly_rate(annual_return: float) -> float:
    """Monthly compounding rate equivalent to one annual return."""
    return (1.0 + annual_return) ** (1.0 / MONTHS_PER_YEAR) - 1.0


def lump_sum_capital(projection_input: ProjectionInput) -> float:
    """
    The lump-sum strategy invests the whole horizon's worth of monthly
    contributions upfront: amount * 12 * years.
    """
    return projection_input.amount * MONTHS_PER_YEAR * projection_input.years


def _simulate_monthly(
    projection_input: ProjectionInput,
    rng: RandomSource,
    contribute_before_growth: bool,
) -> List[PeriodResult]:
    """
    Shared loop for DCA and recurring-monthly.

    One annual sample per year, reused for its 12 months.
      - DCA:       value = (value + amount) * (1 + r)
      - recurring: value = value * (1 + r) + amount
    """
    amount = projection_input.amount
    value = 0.0
    rows: List[PeriodResult] = []

    for year in range(1, projection_input.years + 1):
        rate = monthly_rate(sample_annual_return(projection_input.profile, rng))
        for _ in range(MONTHS_PER_YEAR):
            if contribute_before_growth:
                value = (value + amount) * (1.0 + rate)
            else:
                value = value * (1.0 + rate) + amount

        # invested is a product, not a running sum, so it stays exact
        invested = amount * MONTHS_PER_YEAR * year
        rows.append(PeriodResult(year=year, invested=invested, value=value, gain=value - invested))

    return rows


def _simulate_lump_sum(projection_input: ProjectionInput, rng: RandomSource) -> List[PeriodResult]:
    invested = lump_sum_capital(projection_input)
    value = invested
    rows: List[PeriodResult] = []

    for year in range(1, projection_input.years + 1):
        value = value * (1.0 + sample_annual_return(projection_input.profile, rng))
        rows.append(PeriodResult(year=year, invested=invested, value=value, gain=value - invested))

    return rows


def simulate(
    projection_input: ProjectionInput,
    rng: Optional[RandomSource] = None,
) -> List[PeriodResult]:
    """
    Simulate portfolio growth year by year.

    Returns one PeriodResult per year (1..years) with cumulative `invested`
    and end-of-year `value`. A zero-year horizon returns an empty list.
    Results are stochastic; pass `rng` to make a run replayable.
    """
    source = rng if rng is not None else default_random_source()

    if projection_input.years <= 0:
        return []

    strategy = projection_input.strategy
    if strategy == ContributionStrategy.LUMP_SUM:
        rows = _simulate_lump_sum(projection_input, source)
    elif strategy == ContributionStrategy.RECURRING_MONTHLY:
        rows = _simulate_monthly(projection_input, source, contribute_before_growth=False)
    else:  # DCA
        rows = _simulate_monthly(projection_input, source, contribute_before_growth=True)

    logger.debug(
        "simulated %s/%s over %d years: final value %.2f",
        strategy.value,
        projection_input.risk.value,
        projection_input.years,
        rows[-1].value,
    )
    return rows


__all__ = [
    "MONTHS_PER_YEAR",
    "RandomSource",
    "default_random_source",
    "sample_annual_return",
    "monthly_rate",
    "lump_sum_capital",
    "simulate",
]
