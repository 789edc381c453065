"""
Plain-text journal writer (ledger format).

    2014/01/01 Salary
        Assets:Checking                                39000 INR
        Income:Salary:Acme

Investment postings carry units, commodity and unit price instead:

    2014/01/01 Investment
        Assets:Equity:NIFTY                      1950 NIFTY @    10 INR
        Assets:Checking
"""

from __future__ import annotations

from typing import TextIO

from core.exceptions import OutputError
from core.utils import format_amount

from .posting import Posting

DATE_FORMAT = "%Y/%m/%d"


def format_posting(posting: Posting, currency: str = "INR") -> str:
    date = posting.date.strftime(DATE_FORMAT)
    if posting.is_investment:
        return (
            f"\n{date} {posting.payee}\n"
            f"    {posting.to_account}                      "
            f"{format_amount(posting.units)} {posting.commodity} @    "
            f"{format_amount(posting.unit_price)} {currency}\n"
            f"    {posting.from_account}\n"
        )
    return (
        f"\n{date} {posting.payee}\n"
        f"    {posting.to_account}                                "
        f"{format_amount(posting.amount)} {currency}\n"
        f"    {posting.from_account}\n"
    )


class PostingSink:
    """
    Writes each posting to `stream` as soon as it is emitted. The sink does not
    own the stream; whoever opened it closes it.
    """

    def __init__(self, stream: TextIO, currency: str = "INR"):
        self.stream = stream
        self.currency = currency
        self.count = 0

    def emit(self, posting: Posting) -> None:
        try:
            self.stream.write(format_posting(posting, self.currency))
        except OSError as exc:
            raise OutputError(f"Failed to write posting dated {posting.date}: {exc}") from exc
        self.count += 1
