"""Data contracts for the plain and group savings calculators."""

from typing import List

from pydantic import BaseModel, Field

from savings_bot.models import SaverCard, SavingsAggregate, TimelinePoint
from savings_bot.schemas.common import LenientAmount, LenientHeadCount, LenientYears


class TimelineRequest(BaseModel):
    """Inputs for the individual savings calculator."""

    monthly_saving: LenientAmount = Field(0.0, description="Amount saved each month.")
    years: LenientYears = Field(0, description="Saving horizon in years; 0 means not set.")


class TimelineResponse(BaseModel):
    monthly_saving: float
    years: int
    months: int
    total_saved: float
    timeline: List[TimelinePoint]


class GroupSavingsRequest(BaseModel):
    """Inputs for the group savings calculator."""

    people_count: LenientHeadCount = Field(0, description="Head count typed in by hand.")
    per_person_amount: LenientAmount = Field(0.0, description="Monthly amount each person saves.")
    investor_names: str = Field("", description="Comma-separated member names.")
    years: LenientYears = Field(0, description="Saving horizon in years.")


class GroupSavingsResponse(BaseModel):
    aggregate: SavingsAggregate
    names: List[str]
    years: int
    months: int
    total_saved: float
    per_person_total: float
    savers: List[SaverCard]
    timeline: List[TimelinePoint]
