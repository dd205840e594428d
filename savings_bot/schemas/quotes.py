"""Data contracts for historical stock quotes."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

# "simulated" bars are generated locally when neither the network nor the cache has data
QuoteSource = Literal["live", "cache", "stale", "simulated"]


class QuotePoint(BaseModel):
    month: int = Field(..., ge=1, le=12)
    date: Optional[datetime] = None
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


class QuoteSummary(BaseModel):
    current_price: float
    change_percentage: float
    total_volume: float
    average_price: float


class QuoteHistory(BaseModel):
    symbol: str
    source: QuoteSource
    points: List[QuotePoint]


class StockResponse(QuoteHistory):
    summary: QuoteSummary
