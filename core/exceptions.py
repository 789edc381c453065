"""
Typed errors for the generator.

Every error is terminal for a run: the engine never retries or skips. The
CLI catches GeneratorError at the top and exits non-zero.

    GeneratorError
    +-- DataUnavailableError      no price at or before a date
    |   +-- UnknownCommodityError
    |   +-- PriceFetchError       remote source failed or returned nothing
    +-- OutputError               the journal sink cannot be written
    +-- ConfigurationError        malformed inputs
"""

from __future__ import annotations

import datetime
from typing import Optional


class GeneratorError(Exception):
    """Base class for all generator errors."""


class DataUnavailableError(GeneratorError):
    def __init__(self, commodity: str, date: Optional[datetime.date] = None, message: str = ""):
        self.commodity = commodity
        self.date = date
        if not message:
            message = f"No price for {commodity} at or before {date}"
        super().__init__(message)


class UnknownCommodityError(DataUnavailableError):
    def __init__(self, commodity: str, date: Optional[datetime.date] = None):
        super().__init__(commodity, date, f"Unknown commodity: {commodity}")


class PriceFetchError(DataUnavailableError):
    def __init__(self, commodity: str, reason: str):
        self.reason = reason
        super().__init__(commodity, None, f"Failed to fetch prices for {commodity}: {reason}")


class OutputError(GeneratorError):
    """Raised when a posting cannot be written; wraps the underlying OSError."""


class ConfigurationError(GeneratorError):
    pass
