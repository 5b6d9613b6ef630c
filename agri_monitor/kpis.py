"""
KPI computation helpers: pure functions with no side effects.

Provides percent change with a zero-baseline guard, the shared three-way
trend classifier, and display rounding.
"""

import math
from typing import Iterable

from .config import GROWTH_TREND_THRESHOLD, TREND_DOWN, TREND_STABLE, TREND_UP


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ndigits with halves going up (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(value):
        return value
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Nearest integer, halves up; non-finite input collapses to 0."""
    if not math.isfinite(value):
        return 0
    return int(round_half_up(value))


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0.0 for an empty iterable."""
    total = 0.0
    count = 0
    for v in values:
        total += v
        count += 1
    return total / count if count else 0.0


def percent_change(current: float, previous: float | None, ndigits: int = 1) -> float:
    """Return (current - previous) / previous * 100, rounded.

    0.0 when there is no baseline or the baseline is not positive.
    """
    if previous is None or previous <= 0:
        return 0.0
    return round(((current - previous) / previous) * 100, ndigits)


def classify_trend(pct: float, threshold: float) -> str:
    """Return 'up', 'down' or 'stable' for a percent change.

    Logic
    -----
    up      if pct >  threshold
    down    if pct < -threshold
    stable  otherwise (including pct exactly on the band edge)
    """
    if pct > threshold:
        return TREND_UP
    if pct < -threshold:
        return TREND_DOWN
    return TREND_STABLE


def calc_growth_rate(
    current: float,
    previous: float,
    threshold: float = GROWTH_TREND_THRESHOLD,
) -> tuple[float, str]:
    """Return (growth_rate_pct, trend) between two values.

    growth_rate is 0.0 and trend 'stable' when previous is zero.
    """
    rate = percent_change(current, previous)
    return rate, classify_trend(rate, threshold)
