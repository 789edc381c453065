import datetime
import io

import pytest

from core.exceptions import DataUnavailableError, OutputError
from journal.commodity import CommodityLedger
from journal.posting import Posting
from journal.sink import PostingSink, format_posting
from prices.series import PriceIndex


D = datetime.date


@pytest.fixture
def index() -> PriceIndex:
    return PriceIndex.from_prices(
        {"NIFTY": [(D(2014, 1, 1), 8.0), (D(2014, 3, 10), 12.5)]}
    )


@pytest.fixture
def ledger(index, sink) -> CommodityLedger:
    return CommodityLedger(index, sink)


class CountingIndex(PriceIndex):
    def __init__(self, inner):
        super().__init__()
        self.inner = inner
        self.lookups = 0

    def price_at_or_before(self, commodity, date):
        self.lookups += 1
        return self.inner.price_at_or_before(commodity, date)


class BrokenStream(io.StringIO):
    def write(self, s):
        raise OSError("disk full")


# ---------------------------------------------------------------- sink

def test_format_transaction():
    posting = Posting(
        date=D(2014, 1, 1),
        payee="Salary",
        to_account="Assets:Checking",
        from_account="Income:Salary:Acme",
        amount=28333.333333,
    )
    assert format_posting(posting) == (
        "\n2014/01/01 Salary\n"
        "    Assets:Checking                                28333.3333 INR\n"
        "    Income:Salary:Acme\n"
    )


def test_format_investment():
    posting = Posting(
        date=D(2014, 3, 16),
        payee="Investment",
        to_account="Assets:Equity:NIFTY",
        from_account="Assets:Checking",
        amount=-1000.0,
        commodity="NIFTY",
        units=-80.0,
        unit_price=12.5,
    )
    assert format_posting(posting, "USD") == (
        "\n2014/03/16 Investment\n"
        "    Assets:Equity:NIFTY                      -80 NIFTY @    12.5 USD\n"
        "    Assets:Checking\n"
    )


def test_sink_writes_in_order_and_counts(sink):
    for payee in ("Rent", "Internet"):
        sink.emit(Posting(D(2014, 1, 1), payee, "Expenses:Rent", "Assets:Checking", 100.0))
    assert sink.count == 2
    assert sink.text.index("Rent") < sink.text.index("Internet")


def test_sink_wraps_write_failures():
    sink = PostingSink(BrokenStream())
    with pytest.raises(OutputError, match="disk full"):
        sink.emit(Posting(D(2014, 1, 1), "Rent", "Expenses:Rent", "Assets:Checking", 100.0))
    assert sink.count == 0


# ---------------------------------------------------------------- buy

def test_buy_converts_at_price_at_or_before(ledger, sink):
    units = ledger.buy(D(2014, 2, 1), "NIFTY", "Assets:Checking", "Assets:Equity:NIFTY", 1000.0)
    assert units == 125.0

    (posting,) = sink.postings
    assert posting.payee == "Investment"
    assert posting.commodity == "NIFTY"
    assert posting.unit_price == 8.0
    assert posting.units * posting.unit_price == pytest.approx(1000.0)
    assert posting.to_account == "Assets:Equity:NIFTY"
    assert posting.from_account == "Assets:Checking"
    assert "125 NIFTY @    8 INR" in sink.text


def test_buy_negative_amount_posts_negative_units(ledger, sink):
    units = ledger.buy(D(2014, 3, 10), "NIFTY", "Assets:Checking", "Assets:Equity:NIFTY", -250.0)
    assert units == -20.0
    assert sink.postings[0].units == -20.0


def test_buy_before_first_price_fails_without_posting(ledger, sink):
    with pytest.raises(DataUnavailableError):
        ledger.buy(D(2013, 12, 1), "NIFTY", "Assets:Checking", "Assets:Equity:NIFTY", 100.0)
    assert sink.postings == []


def test_buy_does_one_lookup(index, sink):
    counting = CountingIndex(index)
    CommodityLedger(counting, sink).buy(D(2014, 2, 1), "NIFTY", "A", "B", 10.0)
    assert counting.lookups == 1
    assert sink.count == 1


# ---------------------------------------------------------------- sell

def test_sell_caps_at_available_units(ledger, sink):
    units, realized = ledger.sell(
        D(2014, 3, 16), "NIFTY", "Assets:Checking", "Assets:Equity:NIFTY", 75000.0, 100.0
    )
    assert units == 100.0
    assert realized == pytest.approx(1250.0)

    (posting,) = sink.postings
    assert posting.units == pytest.approx(-100.0)
    assert posting.unit_price == 12.5
    assert posting.amount == pytest.approx(-1250.0)


def test_sell_partial_when_position_is_large(ledger, sink):
    units, realized = ledger.sell(
        D(2014, 3, 16), "NIFTY", "Assets:Checking", "Assets:Equity:NIFTY", 1000.0, 500.0
    )
    assert units == pytest.approx(80.0)
    assert units < 500.0
    assert realized == pytest.approx(1000.0)
    assert sink.postings[0].units == pytest.approx(-80.0)


@pytest.mark.parametrize("available", [0.0, -5.0])
def test_sell_with_nothing_held_posts_nothing(ledger, sink, available):
    assert ledger.sell(D(2014, 3, 16), "NIFTY", "A", "B", 1000.0, available) == (0.0, 0.0)
    assert sink.postings == []


def test_sell_does_one_lookup(index, sink):
    counting = CountingIndex(index)
    CommodityLedger(counting, sink).sell(D(2014, 3, 16), "NIFTY", "A", "B", 1000.0, 10.0)
    assert counting.lookups == 1
    assert sink.count == 1


def test_sell_never_exceeds_available_units(ledger):
    for amount in (1.0, 50.0, 1250.0, 1251.0, 99999.0):
        for available in (0.1, 10.0, 100.0, 1000.0):
            units, _ = ledger.sell(D(2014, 4, 1), "NIFTY", "A", "B", amount, available)
            assert units <= available
            required = amount / 12.5
            if units == available:
                assert required >= available
