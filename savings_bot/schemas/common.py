"""Field types and limits shared by the request contracts."""

from typing import Annotated

from pydantic import BeforeValidator, Field

from savings_bot.core.contributors import coerce_number

# Caps keep every projection finite and the per-year work bounded.
MAX_YEARS = 100
MAX_AMOUNT = 1_000_000_000
MAX_PEOPLE = 1_000

# Form fields that never fail on junk (it becomes 0); only oversized values are rejected.
LenientAmount = Annotated[float, BeforeValidator(coerce_number), Field(le=MAX_AMOUNT)]
LenientCount = Annotated[int, BeforeValidator(lambda value: int(coerce_number(value)))]
LenientYears = Annotated[LenientCount, Field(le=MAX_YEARS)]
LenientHeadCount = Annotated[LenientCount, Field(le=MAX_PEOPLE)]
