from __future__ import annotations

import datetime
from typing import List

import numpy as np
from dateutil.relativedelta import relativedelta

from .schema import TAX_BRACKETS, TOP_TAX_RATE


def round_to_k(amount: float) -> float:
    """
    Truncate to a "realistic" round number: multiples of 100 below 20,000,
    multiples of 1,000 from there on. Truncates toward zero like int().
    """
    if amount < 20000:
        return float(int(amount / 100) * 100)
    return float(int(amount / 1000) * 1000)


def percent_range(min_pct: int, max_pct: int, rng: np.random.Generator) -> float:
    """Fixed min_pct% when min == max, else a uniform integer percentage in [min, max)."""
    if min_pct == max_pct:
        return min_pct * 0.01
    return int(rng.integers(min_pct, max_pct)) * 0.01


def increment_by_percent_range(
    amount: float, min_pct: int, max_pct: int, rng: np.random.Generator
) -> float:
    return round_to_k(amount + amount * percent_range(min_pct, max_pct, rng))


def tax_rate(annual_income: float) -> float:
    for upper, rate in TAX_BRACKETS:
        if annual_income < upper:
            return rate
    return TOP_TAX_RATE


def format_amount(num: float) -> str:
    """Up to 4 decimals, trailing zeros and a trailing decimal point stripped."""
    s = f"{num:.4f}"
    return s.rstrip("0").rstrip(".")


def month_starts(start: datetime.date, end: datetime.date) -> List[datetime.date]:
    """
    Month cursor dates from start (inclusive) while the cursor is before end.
    The day of month of `start` is kept (relativedelta clamps to month end).
    """
    dates = []
    k = 0
    cursor = start
    while cursor < end:
        dates.append(cursor)
        k += 1
        cursor = start + relativedelta(months=k)
    return dates
