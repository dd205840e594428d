from __future__ import annotations

import math
from typing import List

from savings_bot.models import ProjectionInput
from savings_bot.schemas.common import MAX_AMOUNT, MAX_YEARS
from savings_bot.schemas.investment import InvestmentRequest

MIN_MONTHLY_AMOUNT = 100


class InvestmentInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def collect_input_errors(request: InvestmentRequest) -> List[str]:
    errors: List[str] = []
    amount = request.monthly_amount
    if not math.isfinite(amount):
        errors.append("monthly_amount must be a finite number")
    elif amount < MIN_MONTHLY_AMOUNT:
        errors.append(f"monthly_amount must be at least {MIN_MONTHLY_AMOUNT}")
    elif amount > MAX_AMOUNT:
        errors.append(f"monthly_amount must be at most {MAX_AMOUNT}")
    if request.years < 1:
        errors.append("years must be at least 1")
    elif request.years > MAX_YEARS:
        errors.append(f"years must be at most {MAX_YEARS}")
    return errors


def prepare_projection_input(request: InvestmentRequest) -> ProjectionInput:
    """Apply the form rules, then hand the engine a clean ProjectionInput."""
    errors = collect_input_errors(request)
    if errors:
        raise InvestmentInputError(errors)

    return ProjectionInput(
        amount=request.monthly_amount,
        years=request.years,
        risk=request.risk_profile,
        strategy=request.strategy,
    )
