"""EUR/USD conversion against an already-resolved rate (1 EUR = rate USD)."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    EUR_TO_USD = "eur_to_usd"
    USD_TO_EUR = "usd_to_eur"


def convert(amount: float, rate: float, direction: Direction = Direction.EUR_TO_USD) -> float:
    if rate <= 0:
        raise ValueError(f"exchange rate must be positive, got {rate}")
    if direction == Direction.USD_TO_EUR:
        return round(amount / rate, 2)
    return round(amount * rate, 2)
