"""
Data quality validation for price series before they enter the index.

Catches problems early:
- Missing columns or empty series
- Non-positive / unparseable prices
- Series that start after the simulation start (every lookup before the
  first price would fail mid-run)
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

PRICE_COLUMNS = ("date", "value")


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one price series."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_prices(
    prices: pd.DataFrame,
    *,
    start_date: Optional[datetime.date] = None,
) -> ValidationResult:
    """
    Run all validation checks on one commodity's price frame.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Schema checks ---
    missing = [c for c in PRICE_COLUMNS if c not in prices.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result

    if len(prices) == 0:
        result.errors.append("Price series is empty (0 rows).")
        return result

    # --- Dates ---
    dts = pd.to_datetime(prices["date"], errors="coerce")
    n_null = int(dts.isna().sum())
    if n_null > 0:
        result.errors.append(f"{n_null} rows have null/unparseable date.")

    n_dup = int(dts.duplicated().sum())
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate dates found (last value wins).")

    if not dts.dropna().is_monotonic_increasing:
        result.warnings.append("Dates are not in ascending order.")

    # --- Values ---
    vals = pd.to_numeric(prices["value"], errors="coerce")
    n_bad = int(vals.isna().sum())
    n_nonpos = int((vals <= 0).sum())
    if n_bad > 0:
        result.errors.append(f"{n_bad} rows have null/unparseable value.")
    if n_nonpos > 0:
        result.errors.append(f"{n_nonpos} rows have zero or negative value.")

    # --- Coverage ---
    if start_date is not None and dts.notna().any():
        first = dts.min().date()
        if first > start_date:
            result.errors.append(
                f"First price is on {first}, after the simulation start {start_date}."
            )

    return result
