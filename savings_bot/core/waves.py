from __future__ import annotations

import math
from typing import List, Sequence

from pydantic import BaseModel

from savings_bot.models import PeriodResult

IMPULSE_WAVES = ["1", "2", "3", "4", "5"]
CORRECTIVE_WAVES = ["A", "B", "C"]
IMPULSE_SHARE = 0.625


class WavePoint(BaseModel):
    year: int
    value: float
    invested: float
    change: float  # % change of value versus the previous year
    wave: str
    index: int


def _wave_label(index: int, total: int) -> str:
    impulse_span = total * IMPULSE_SHARE
    if index < impulse_span:
        phase = math.floor(index / impulse_span * len(IMPULSE_WAVES))
        return IMPULSE_WAVES[min(phase, len(IMPULSE_WAVES) - 1)]
    corrective_span = total * (1 - IMPULSE_SHARE)
    phase = math.floor((index - impulse_span) / corrective_span * len(CORRECTIVE_WAVES))
    return CORRECTIVE_WAVES[min(phase, len(CORRECTIVE_WAVES) - 1)]


def label_waves(series: Sequence[PeriodResult]) -> List[WavePoint]:
    """
    Map a yearly series onto an Elliott pattern: the first 62.5% of the
    years are impulse waves 1-5, the rest corrective waves A-C.
    """
    total = len(series)
    points: List[WavePoint] = []
    for index, row in enumerate(series):
        change = 0.0
        if index > 0:
            previous = series[index - 1].value
            if previous != 0:
                change = (row.value - previous) / previous * 100
        points.append(
            WavePoint(
                year=row.year,
                value=row.value,
                invested=row.invested,
                change=change,
                wave=_wave_label(index, total),
                index=index,
            )
        )
    return points
