"""Rule-based messages shown next to an investment simulation."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict

from savings_bot.core.metrics import return_percentage
from savings_bot.models import (
    ContributionStrategy,
    InvestmentResult,
    RiskLevel,
    get_risk_profile,
)

MessageKind = Literal["info", "success", "warning", "suggestion", "tip"]

LARGE_LUMP_SUM = 50_000
LONG_HORIZON_YEARS = 10
SHORT_HORIZON_YEARS = 3


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    full_name: str
    sector: str
    description: str
    symbol: str


GROWTH_COMPANY = Company(
    key="growth",
    name="Growth",
    full_name="Growth Corporation",
    sector="Technology and Growth",
    description="A growth-focused company betting on technology innovation and market expansion.",
    symbol="VUG",
)


class BotMessage(BaseModel):
    kind: MessageKind
    text: str


def _performance_message(result: InvestmentResult, years: int, company: Company) -> BotMessage:
    pct = return_percentage(result)
    if pct is None:
        return BotMessage(kind="warning", text="Return unavailable: nothing was invested.")
    if pct > 50:
        return BotMessage(
            kind="success",
            text=f"Excellent! Your investment in {company.name} returned {pct:.2f}%.",
        )
    if pct > 20:
        return BotMessage(
            kind="info",
            text=f"Good result: {pct:.2f}% over {years} years with {company.name} shares.",
        )
    return BotMessage(
        kind="warning",
        text=f"Moderate return of {pct:.2f}%. Consider a longer horizon for {company.name}.",
    )


def generate_recommendations(
    result: InvestmentResult,
    risk: RiskLevel,
    strategy: ContributionStrategy,
    amount: float,
    years: int,
    company: Company = GROWTH_COMPANY,
) -> List[BotMessage]:
    """
    Ordered bot messages: company intro, performance verdict, strategy and
    horizon hints, then the profile description and a diversification reminder.
    """
    messages = [
        BotMessage(kind="info", text=f"Investing in {company.name} shares: {company.description}"),
        _performance_message(result, years, company),
    ]

    if strategy == ContributionStrategy.LUMP_SUM and amount > LARGE_LUMP_SUM:
        messages.append(
            BotMessage(
                kind="info",
                text=(
                    f"For large amounts in {company.name}, consider dollar-cost averaging "
                    "to reduce market-timing risk."
                ),
            )
        )

    if risk == RiskLevel.CONSERVATIVE and years > LONG_HORIZON_YEARS:
        messages.append(
            BotMessage(
                kind="suggestion",
                text=f"With a long horizon you could consider a moderate profile for {company.name}.",
            )
        )

    if risk == RiskLevel.AGGRESSIVE and years < SHORT_HORIZON_YEARS:
        messages.append(
            BotMessage(
                kind="warning",
                text=(
                    f"Aggressive positions in {company.name} need at least 5-10 years "
                    "to ride out volatility."
                ),
            )
        )

    if company.key == "growth":
        messages.append(
            BotMessage(
                kind="tip",
                text=(
                    f"{company.name} is a growth company: its shares can swing hard "
                    "but offer long-term appreciation potential."
                ),
            )
        )

    messages.append(BotMessage(kind="tip", text=get_risk_profile(risk).description))
    messages.append(
        BotMessage(
            kind="tip",
            text="Remember: always diversify and only invest what you can afford to lose.",
        )
    )
    return messages
