"""
Currency <-> unit conversion for investment postings.

buy and sell share one signed primitive: a sell is posted as a buy of a
negative currency amount, which yields negative units (a disposal).
"""

from __future__ import annotations

import datetime
from typing import Tuple

from core.schema import INVESTMENT_PAYEE
from prices.series import Price, PriceIndex

from .posting import Posting
from .sink import PostingSink


class CommodityLedger:
    def __init__(self, prices: PriceIndex, sink: PostingSink):
        self.prices = prices
        self.sink = sink

    def _post(
        self,
        date: datetime.date,
        commodity: str,
        price: Price,
        from_account: str,
        to_account: str,
        amount: float,
    ) -> float:
        units = amount / price.value
        self.sink.emit(
            Posting(
                date=date,
                payee=INVESTMENT_PAYEE,
                to_account=to_account,
                from_account=from_account,
                amount=amount,
                commodity=commodity,
                units=units,
                unit_price=price.value,
            )
        )
        return units

    def buy(
        self,
        date: datetime.date,
        commodity: str,
        from_account: str,
        to_account: str,
        amount: float,
    ) -> float:
        """
        Convert `amount` into units at the price at or before `date` and post it.
        Negative amounts post (and return) negative units.
        """
        price = self.prices.price_at_or_before(commodity, date)
        return self._post(date, commodity, price, from_account, to_account, amount)

    def sell(
        self,
        date: datetime.date,
        commodity: str,
        from_account: str,
        to_account: str,
        amount: float,
        available_units: float,
    ) -> Tuple[float, float]:
        """
        Dispose of up to `amount` worth of units, never more than `available_units`.

        Returns
        -------
        (units_sold, realized), both non-negative. Nothing is posted when no
        units are available.
        """
        if available_units <= 0:
            return 0.0, 0.0

        price = self.prices.price_at_or_before(commodity, date)
        required_units = amount / price.value
        units = min(available_units, required_units)
        realized = units * price.value
        self._post(date, commodity, price, from_account, to_account, -realized)
        return units, realized
