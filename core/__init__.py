"""
Core package — configuration, account/commodity schema, errors, and shared utilities.
No simulation logic lives here.
"""

from .config import START_YEAR, GeneratorConfig
from .exceptions import (
    GeneratorError,
    DataUnavailableError,
    UnknownCommodityError,
    PriceFetchError,
    OutputError,
    ConfigurationError,
)
from .utils import (
    round_to_k,
    percent_range,
    increment_by_percent_range,
    tax_rate,
    format_amount,
    month_starts,
)

__all__ = [
    "START_YEAR",
    "GeneratorConfig",
    "GeneratorError",
    "DataUnavailableError",
    "UnknownCommodityError",
    "PriceFetchError",
    "OutputError",
    "ConfigurationError",
    "round_to_k",
    "percent_range",
    "increment_by_percent_range",
    "tax_rate",
    "format_amount",
    "month_starts",
]
