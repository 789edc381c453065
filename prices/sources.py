"""
Price sources — where commodity histories come from.

The simulation only consumes a date-ascending sequence of prices per
commodity; these adapters decide how that sequence is obtained:

  RemotePriceSource    live NAV history (mfapi.in / NPS)
  CsvPriceSource       <directory>/<NAME>.csv with date,value columns
  ConstantPriceSource  flat monthly series, for offline demos and tests
"""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import Iterable, List, Literal, Optional, Tuple, Union

import pandas as pd
from loguru import logger
from pydantic import BaseModel

from core.exceptions import ConfigurationError
from core.utils import month_starts

from .scrapers import fetch_mutualfund_nav, fetch_nps_nav
from .series import Price, PriceIndex, prices_to_frame
from .validators import validate_prices


class CommodityConfig(BaseModel):
    name: str
    type: Literal["mutualfund", "nps"]
    code: str
    harvest: Optional[int] = None
    tax_category: Optional[Literal["equity", "debt"]] = None


DEFAULT_COMMODITIES: Tuple[CommodityConfig, ...] = (
    CommodityConfig(name="NIFTY", type="mutualfund", code="120716", harvest=365, tax_category="equity"),
    CommodityConfig(name="NIFTY_JR", type="mutualfund", code="120684", harvest=365, tax_category="equity"),
    CommodityConfig(name="ABCBF", type="mutualfund", code="119533", harvest=1095, tax_category="debt"),
    CommodityConfig(name="NPS_HDFC_E", type="nps", code="SM008001"),
    CommodityConfig(name="NPS_HDFC_C", type="nps", code="SM008002"),
    CommodityConfig(name="NPS_HDFC_G", type="nps", code="SM008003"),
)


class PriceSource:
    """Interface: return the full price history of one commodity."""

    def fetch(self, commodity: CommodityConfig) -> Union[pd.DataFrame, List[Price]]:
        raise NotImplementedError


class RemotePriceSource(PriceSource):
    def fetch(self, commodity: CommodityConfig) -> List[Price]:
        if commodity.type == "mutualfund":
            return fetch_mutualfund_nav(commodity.code, commodity.name)
        if commodity.type == "nps":
            return fetch_nps_nav(commodity.code, commodity.name)
        raise ConfigurationError(f"Unsupported commodity type: {commodity.type}")


class CsvPriceSource(PriceSource):
    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def fetch(self, commodity: CommodityConfig) -> pd.DataFrame:
        path = self.directory / f"{commodity.name}.csv"
        if not path.exists():
            raise ConfigurationError(f"Price file not found: {path}")
        return pd.read_csv(path)


class ConstantPriceSource(PriceSource):
    """Same value on the first of every month from `start` through `end` (default: today)."""

    def __init__(
        self,
        value: float,
        start: datetime.date,
        end: Optional[datetime.date] = None,
    ):
        if value <= 0:
            raise ConfigurationError(f"Constant price must be positive, got {value}")
        self.value = float(value)
        self.start = start
        self.end = end

    def fetch(self, commodity: CommodityConfig) -> List[Price]:
        end = self.end or datetime.date.today()
        dates = month_starts(self.start, end + datetime.timedelta(days=1)) or [self.start]
        return [Price(date=d, value=self.value) for d in dates]


def load_price_index(
    commodities: Iterable[CommodityConfig],
    source: PriceSource,
    *,
    start_date: Optional[datetime.date] = None,
) -> PriceIndex:
    """
    Fetch, validate and index every commodity. Any invalid series aborts with
    ConfigurationError listing the validation errors.
    """
    index = PriceIndex()
    for commodity in commodities:
        frame = prices_to_frame(source.fetch(commodity))
        result = validate_prices(frame, start_date=start_date)
        for w in result.warnings:
            logger.warning("{}: {}", commodity.name, w)
        if not result.is_valid:
            raise ConfigurationError(
                f"Invalid price series for {commodity.name}:\n{result.summary()}"
            )
        index.add_series(commodity.name, frame)
    return index
