"""Data contracts for the EUR/USD converter."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from savings_bot.core.currency import Direction

RateSource = Literal["live", "cache", "stale", "default"]


class RateResponse(BaseModel):
    base: str = "EUR"
    quote: str = "USD"
    rate: float
    source: RateSource
    fetched_at: Optional[float] = Field(None, description="Unix time of the last successful fetch.")


class ConvertRequest(BaseModel):
    amount: float = Field(..., ge=0)
    direction: Direction = Direction.EUR_TO_USD


class ConvertResponse(BaseModel):
    amount: float
    converted: float
    direction: Direction
    rate: RateResponse
