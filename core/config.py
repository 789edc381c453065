"""
Generator configuration.
Rule constants (accounts, splits, brackets) live in core/schema.py.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import ConfigurationError

START_YEAR = 2014


@dataclass(frozen=True)
class GeneratorConfig:
    start_date: datetime.date = field(default_factory=lambda: datetime.date(START_YEAR, 1, 1))
    end_date: Optional[datetime.date] = None  # None means "today" at run time

    # opening state of the fictitious person
    initial_balance: float = 0.0
    yearly_salary: float = 500000.0
    rent: float = 10000.0

    seed: int = 7
    currency: str = "INR"

    def __post_init__(self):
        if self.yearly_salary <= 0:
            raise ConfigurationError(f"yearly_salary must be positive, got {self.yearly_salary}")
        if self.rent <= 0:
            raise ConfigurationError(f"rent must be positive, got {self.rent}")
        if self.end_date is not None and self.end_date <= self.start_date:
            raise ConfigurationError(
                f"end_date {self.end_date} must be after start_date {self.start_date}"
            )
        if not self.currency:
            raise ConfigurationError("currency must not be empty")

    def resolved_end_date(self, today: Optional[datetime.date] = None) -> datetime.date:
        """Exclusive end bound. Without an explicit end_date, today's month start is included."""
        if self.end_date is not None:
            return self.end_date
        today = today or datetime.date.today()
        return today + datetime.timedelta(days=1)
