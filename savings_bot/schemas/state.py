"""Persisted calculator inputs."""

from pydantic import BaseModel

from savings_bot.schemas.common import LenientAmount, LenientHeadCount, LenientYears


class SavedState(BaseModel):
    """Everything the page restores on reload. Numbers are read leniently."""

    monthly_saving: LenientAmount = 0.0
    is_group: bool = False
    people_count: LenientHeadCount = 0
    per_person_amount: LenientAmount = 0.0
    investor_names: str = ""
    years: LenientYears = 0
