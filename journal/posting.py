from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Posting:
    """
    One debit/credit pair. `amount` is always the currency value moved from
    `from_account` to `to_account`. Investment postings additionally carry
    units @ unit_price of a commodity (amount == units * unit_price).
    """
    date: datetime.date
    payee: str
    to_account: str
    from_account: str
    amount: float
    commodity: Optional[str] = None
    units: Optional[float] = None
    unit_price: Optional[float] = None

    @property
    def is_investment(self) -> bool:
        return self.commodity is not None
