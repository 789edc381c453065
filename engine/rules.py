"""
Monthly rules — salary, expense and investment events for one calendar month.

Each rule posts through the sink and updates SimulationState in the same
step, so balances always match what has been written. The engine calls them
in a fixed order (salary, expense, investment): the later rules spend the
cash the salary rule just credited.
"""

from __future__ import annotations

import datetime

import numpy as np

from core import schema
from core.utils import increment_by_percent_range, percent_range, round_to_k, tax_rate
from journal.commodity import CommodityLedger
from journal.posting import Posting
from journal.sink import PostingSink

from .state import SimulationState


def emit_transaction(
    sink: PostingSink,
    date: datetime.date,
    payee: str,
    from_account: str,
    to_account: str,
    amount: float,
) -> None:
    sink.emit(
        Posting(date=date, payee=payee, to_account=to_account, from_account=from_account, amount=amount)
    )


def emit_salary(
    state: SimulationState,
    month: datetime.date,
    *,
    sink: PostingSink,
    ledger: CommodityLedger,
    rng: np.random.Generator,
) -> None:
    if month.month == schema.INCREMENT_MONTH:
        state.yearly_salary = increment_by_percent_range(
            state.yearly_salary, *schema.SALARY_INCREMENT_RANGE, rng
        )

    salary = state.yearly_salary / 12
    tax = salary * tax_rate(state.yearly_salary)
    epf = salary * schema.EPF_RATE
    nps = salary * schema.NPS_RATE
    net_salary = salary - tax - epf - nps

    state.epf_balance += epf
    state.cash_balance += net_salary

    salary_account = schema.salary_account(month.year)
    emit_transaction(sink, month, "Salary", salary_account, schema.CHECKING_ACCOUNT, net_salary)
    emit_transaction(sink, month, "Salary EPF", salary_account, schema.EPF_ACCOUNT, epf)
    emit_transaction(sink, month, "Salary Tax", salary_account, schema.TAX_ACCOUNT, tax)
    for fund in schema.PENSION_FUNDS:
        ledger.buy(month, fund.commodity, salary_account, fund.account, nps * fund.share)


def emit_expense(
    state: SimulationState,
    month: datetime.date,
    *,
    sink: PostingSink,
    rng: np.random.Generator,
) -> None:
    if month.month == schema.INCREMENT_MONTH:
        state.rent = increment_by_percent_range(state.rent, *schema.RENT_INCREMENT_RANGE, rng)

    def emit(rule: schema.ExpenseRule) -> None:
        base = state.rent if rule.amount is None else rule.amount
        actual = round_to_k(percent_range(rule.min_percent, 100, rng) * base)
        emit_transaction(sink, month, rule.payee, schema.CHECKING_ACCOUNT, rule.account, actual)
        state.cash_balance -= actual

    for rule in schema.MONTHLY_EXPENSES:
        emit(rule)

    if month.month in schema.SEASONAL_MONTHS:
        emit(schema.SEASONAL_EXPENSE)


def emit_investment(
    state: SimulationState,
    month: datetime.date,
    *,
    sink: PostingSink,
    ledger: CommodityLedger,
) -> None:
    if month.month == schema.INCREMENT_MONTH:
        interest = state.epf_balance * schema.EPF_INTEREST_RATE
        emit_transaction(
            sink, month, "EPF Interest", schema.EPF_INTEREST_ACCOUNT, schema.EPF_ACCOUNT, interest
        )
        state.epf_balance += interest

    # amounts are fixed from the balance before any of this month's buys
    amounts = [round_to_k(state.cash_balance * fund.share) for fund in schema.INVESTMENT_FUNDS]
    for fund, amount in zip(schema.INVESTMENT_FUNDS, amounts):
        state.cash_balance -= amount
        units = ledger.buy(month, fund.commodity, schema.CHECKING_ACCOUNT, fund.account, amount)
        if fund == schema.PRIMARY_EQUITY:
            state.primary_equity_units += units

    if month.month == schema.SELL_MONTH:
        units, realized = ledger.sell(
            month + datetime.timedelta(days=schema.SELL_DAY_OFFSET),
            schema.PRIMARY_EQUITY.commodity,
            schema.CHECKING_ACCOUNT,
            schema.PRIMARY_EQUITY.account,
            schema.SELL_AMOUNT,
            state.primary_equity_units,
        )
        state.primary_equity_units -= units
        state.cash_balance += realized
