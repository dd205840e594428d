from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Sequence

from savings_bot.models import (
    CANONICAL_ORDER,
    CanonicalSlot,
    Contributor,
    SavingsAggregate,
)

# Historical first names and the one-letter codes they display as.
# Matching is on the whole trimmed entry, case-insensitive.
NAME_ALIASES: Dict[str, CanonicalSlot] = {
    "l": CanonicalSlot.L,
    "leo": CanonicalSlot.L,
    "simone": CanonicalSlot.L,
    "michela": CanonicalSlot.L,
    "x": CanonicalSlot.X,
    "pietro": CanonicalSlot.X,
    "y": CanonicalSlot.Y,
    "d": CanonicalSlot.D,
    "davide": CanonicalSlot.D,
}


def canonical_slot(name: str) -> CanonicalSlot:
    return NAME_ALIASES.get(name.strip().lower(), CanonicalSlot.OTHER)


def _split_names(raw: Any) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        entries = raw.split(",")
    else:
        entries = [str(item) for item in raw]
    return [entry.strip() for entry in entries if entry and entry.strip()]


def parse_names(raw: Any) -> List[Contributor]:
    """
    Build the ordered contributor list from a comma-separated string
    (a list of strings is accepted too).

    Order: the first L, X, Y, D entry found (each slot at most once), then
    every other name in input order. Later entries for an already-filled
    slot are dropped; non-canonical names are kept even when repeated.
    """
    entries = _split_names(raw)
    tagged = [Contributor(raw_label=entry, slot=canonical_slot(entry)) for entry in entries]

    ordered: List[Contributor] = []
    for slot in CANONICAL_ORDER:
        match = next((c for c in tagged if c.slot is slot), None)
        if match is not None:
            ordered.append(match)

    ordered.extend(c for c in tagged if c.slot is CanonicalSlot.OTHER)
    return ordered


def contributor_labels(contributors: Sequence[Contributor]) -> List[str]:
    return [c.label for c in contributors]


def normalize_names(raw: Any) -> str:
    """Canonical comma-separated form; stable under repeated application."""
    return ", ".join(contributor_labels(parse_names(raw)))


def _normalize_separators(text: str) -> str:
    """
    "100,5" -> "100.5" (decimal comma); "1,000.50" and "1,000,000" drop the
    commas as thousands separators.
    """
    text = text.strip()
    if "." in text or text.count(",") > 1:
        return text.replace(",", "")
    return text.replace(",", ".")


def coerce_number(value: Any) -> float:
    """Lenient numeric read: anything unusable (None, text, NaN, negatives) becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = _normalize_separators(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number


def aggregate(people_count: Any = None, per_person_amount: Any = None) -> SavingsAggregate:
    count = int(coerce_number(people_count))
    per_person = coerce_number(per_person_amount)
    return SavingsAggregate(
        people_count=count,
        per_person_monthly=per_person,
        monthly_total=count * per_person,
    )


def resolve_people_count(manual_count: Any, contributors: Optional[Sequence[Contributor]]) -> int:
    """
    The names win: a non-empty contributor list sets the head count even
    when it disagrees with the number typed in by hand.
    """
    if contributors:
        return len(contributors)
    return int(coerce_number(manual_count))


__all__ = [
    "NAME_ALIASES",
    "canonical_slot",
    "parse_names",
    "contributor_labels",
    "normalize_names",
    "coerce_number",
    "aggregate",
    "resolve_people_count",
]
