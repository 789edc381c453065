"""
Point-in-time price lookup.

Each commodity keeps its own date-ascending series (numpy datetime64[D] dates
plus float values). Lookups are a floor search via np.searchsorted, so every
transaction date costs O(log n) regardless of how long the history grows.

The index is built once from externally supplied price sequences and is
read-only afterwards; it is safe to share between consumers.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Tuple, Union

import numpy as np
import pandas as pd
from loguru import logger

from core.exceptions import ConfigurationError, DataUnavailableError, UnknownCommodityError


@dataclass(frozen=True, order=True)
class Price:
    date: datetime.date
    value: float


PriceInput = Union[pd.DataFrame, Iterable[Union[Price, Tuple[datetime.date, float]]]]


def prices_to_frame(prices: PriceInput) -> pd.DataFrame:
    """
    Normalize any accepted price input into a DataFrame with `date` (datetime64)
    and `value` (float) columns, in input order.
    """
    if isinstance(prices, pd.DataFrame):
        if "date" not in prices.columns or "value" not in prices.columns:
            raise ConfigurationError(
                f"Price frame needs 'date' and 'value' columns, got {list(prices.columns)}"
            )
        df = prices[["date", "value"]].copy()
    else:
        rows = []
        for p in prices:
            if isinstance(p, Price):
                rows.append((p.date, p.value))
            else:
                d, v = p
                rows.append((d, v))
        df = pd.DataFrame(rows, columns=["date", "value"])

    df["date"] = pd.to_datetime(df["date"], errors="coerce").dt.normalize()
    df["value"] = pd.to_numeric(df["value"], errors="coerce").astype(float)
    return df


class PriceIndex:
    """
    Usage:
        index = PriceIndex.from_prices({"NIFTY": [(date(2014, 1, 1), 10.0)]})
        index.price_at_or_before("NIFTY", date(2014, 3, 16))  # -> Price(2014-01-01, 10.0)
    """

    def __init__(self):
        self._dates: Dict[str, np.ndarray] = {}
        self._values: Dict[str, np.ndarray] = {}

    @classmethod
    def from_prices(cls, series: Mapping[str, PriceInput]) -> "PriceIndex":
        index = cls()
        for commodity, prices in series.items():
            index.add_series(commodity, prices)
        return index

    def add_series(self, commodity: str, prices: PriceInput) -> None:
        """
        Load one commodity's prices. Duplicate dates keep the last value seen;
        the stored series is sorted by date regardless of input order.
        """
        df = prices_to_frame(prices)
        if df.empty:
            raise ConfigurationError(f"No prices supplied for {commodity}")
        if df["date"].isna().any():
            raise ConfigurationError(f"Unparseable price dates for {commodity}")

        values = df["value"].to_numpy(dtype=float)
        if not np.all(np.isfinite(values)) or np.any(values <= 0):
            raise ConfigurationError(f"Prices for {commodity} must be positive numbers")

        df = df.drop_duplicates(subset="date", keep="last").sort_values("date", kind="stable")

        self._dates[commodity] = df["date"].to_numpy(dtype="datetime64[D]")
        self._values[commodity] = df["value"].to_numpy(dtype=float)

        logger.info(
            "Loaded {} prices for {} ({} .. {})",
            len(df),
            commodity,
            self.first_date(commodity),
            self.last_date(commodity),
        )

    def price_at_or_before(self, commodity: str, date: datetime.date) -> Price:
        """Return the price with the greatest date <= `date`."""
        if commodity not in self._dates:
            raise UnknownCommodityError(commodity, date)

        dates = self._dates[commodity]
        i = int(np.searchsorted(dates, np.datetime64(date, "D"), side="right")) - 1
        if i < 0:
            raise DataUnavailableError(commodity, date)

        return Price(date=dates[i].item(), value=float(self._values[commodity][i]))

    def require(self, commodities: Iterable[str]) -> None:
        missing = [c for c in commodities if c not in self._dates]
        if missing:
            raise ConfigurationError(f"Missing price series for commodities: {missing}")

    @property
    def commodities(self) -> Tuple[str, ...]:
        return tuple(self._dates)

    def __contains__(self, commodity: object) -> bool:
        return commodity in self._dates

    def __iter__(self) -> Iterator[str]:
        return iter(self._dates)

    def __len__(self) -> int:
        return len(self._dates)

    def first_date(self, commodity: str) -> datetime.date:
        if commodity not in self._dates:
            raise UnknownCommodityError(commodity)
        return self._dates[commodity][0].item()

    def last_date(self, commodity: str) -> datetime.date:
        if commodity not in self._dates:
            raise UnknownCommodityError(commodity)
        return self._dates[commodity][-1].item()

    def series(self, commodity: str) -> pd.Series:
        """Date-indexed copy of one commodity's prices."""
        if commodity not in self._dates:
            raise UnknownCommodityError(commodity)
        return pd.Series(
            self._values[commodity].copy(),
            index=pd.DatetimeIndex(self._dates[commodity].astype("datetime64[ns]"), name="date"),
            name=commodity,
        )
