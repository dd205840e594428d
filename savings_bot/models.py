from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class ContributionStrategy(str, Enum):
    LUMP_SUM = "lump"
    DOLLAR_COST_AVERAGING = "dca"
    RECURRING_MONTHLY = "monthly"


class RiskProfile(BaseModel):
    """Expected annual return range plus a symmetric noise amplitude."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: RiskLevel
    min_annual_return: float
    max_annual_return: float
    volatility: float = Field(ge=0)
    description: str

    @property
    def base_return(self) -> float:
        return (self.min_annual_return + self.max_annual_return) / 2


RISK_PROFILES: Dict[RiskLevel, RiskProfile] = {
    RiskLevel.CONSERVATIVE: RiskProfile(
        level=RiskLevel.CONSERVATIVE,
        min_annual_return=0.03,
        max_annual_return=0.05,
        volatility=0.08,
        description="Safe holdings such as government bonds and low-risk ETFs",
    ),
    RiskLevel.MODERATE: RiskProfile(
        level=RiskLevel.MODERATE,
        min_annual_return=0.05,
        max_annual_return=0.07,
        volatility=0.12,
        description="Balanced mix of stocks and bonds, diversified ETFs",
    ),
    RiskLevel.AGGRESSIVE: RiskProfile(
        level=RiskLevel.AGGRESSIVE,
        min_annual_return=0.07,
        max_annual_return=0.10,
        volatility=0.18,
        description="Aggressive equity portfolio, sector ETFs, high growth",
    ),
}


def get_risk_profile(level: RiskLevel | str) -> RiskProfile:
    return RISK_PROFILES[RiskLevel(level)]


class ProjectionInput(BaseModel):
    """
    One simulation request.

    `amount` is the monthly contribution for every strategy; the lump-sum
    strategy turns it into an equivalent upfront capital (see lump_sum_capital).
    Positivity and the 100-unit minimum are checked at the boundary, not here.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: float = Field(ge=0)
    years: int = Field(ge=0)
    risk: RiskLevel = RiskLevel.MODERATE
    strategy: ContributionStrategy = ContributionStrategy.DOLLAR_COST_AVERAGING

    @property
    def profile(self) -> RiskProfile:
        return RISK_PROFILES[self.risk]


class PeriodResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1)
    invested: float = Field(ge=0)
    value: float
    gain: float


class InvestmentResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    total_invested: float = 0.0
    final_value: float = 0.0
    gain: float = 0.0


class YearlyBreakdown(PeriodResult):
    # None when nothing was invested by that year
    return_percentage: Optional[float] = None


class TimelinePoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1)
    months: int = Field(ge=0)
    total_saved: float


class CanonicalSlot(str, Enum):
    L = "L"
    X = "X"
    Y = "Y"
    D = "D"
    OTHER = "other"


CANONICAL_ORDER: List[CanonicalSlot] = [
    CanonicalSlot.L,
    CanonicalSlot.X,
    CanonicalSlot.Y,
    CanonicalSlot.D,
]


class Contributor(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    raw_label: str
    slot: CanonicalSlot

    @property
    def label(self) -> str:
        """Display label: the slot code for canonical names, the raw text otherwise."""
        if self.slot is CanonicalSlot.OTHER:
            return self.raw_label
        return self.slot.value


class SavingsAggregate(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    people_count: int = Field(ge=0)
    per_person_monthly: float = Field(ge=0)
    monthly_total: float = Field(ge=0)


class SaverCard(BaseModel):
    """Per-person savings box shown for each of the first four contributors."""

    model_config = ConfigDict(extra="forbid")

    name: str
    monthly: float
    one_year: float
    three_years: float
    total: float
