"""
Prices package — commodity price histories and point-in-time lookup.
"""

from .series import Price, PriceIndex, prices_to_frame
from .validators import ValidationResult, validate_prices
from .sources import (
    CommodityConfig,
    DEFAULT_COMMODITIES,
    PriceSource,
    RemotePriceSource,
    CsvPriceSource,
    ConstantPriceSource,
    load_price_index,
)

__all__ = [
    "Price",
    "PriceIndex",
    "prices_to_frame",
    "ValidationResult",
    "validate_prices",
    "CommodityConfig",
    "DEFAULT_COMMODITIES",
    "PriceSource",
    "RemotePriceSource",
    "CsvPriceSource",
    "ConstantPriceSource",
    "load_price_index",
]
