"""Data contracts for the investment bot."""

from typing import List, Optional

from pydantic import BaseModel, Field

from savings_bot.core.advisor import BotMessage
from savings_bot.core.waves import WavePoint
from savings_bot.models import (
    ContributionStrategy,
    InvestmentResult,
    RiskLevel,
    YearlyBreakdown,
)
from savings_bot.schemas.common import MAX_AMOUNT, MAX_YEARS


class InvestmentRequest(BaseModel):
    """Investment bot form."""

    monthly_amount: float = Field(
        ...,
        allow_inf_nan=False,
        le=MAX_AMOUNT,
        description="Monthly contribution (minimum 100).",
    )
    years: int = Field(..., le=MAX_YEARS, description="Investment horizon in years.")
    risk_profile: RiskLevel = RiskLevel.MODERATE
    strategy: ContributionStrategy = ContributionStrategy.DOLLAR_COST_AVERAGING
    seed: Optional[int] = Field(
        None,
        ge=0,
        description="Seed for a replayable run; omitted means a fresh random run.",
    )


class InvestmentResponse(BaseModel):
    risk_profile: RiskLevel
    strategy: ContributionStrategy
    monthly_amount: float
    years: int
    summary: InvestmentResult
    # None when nothing was invested
    return_percentage: Optional[float]
    projection: List[YearlyBreakdown]
    recommendations: List[BotMessage]
    waves: List[WavePoint]
