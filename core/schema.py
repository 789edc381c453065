from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Accounts used by the generated journal. Naming follows ledger's colon-separated
# hierarchy so the output loads straight into ledger/hledger/paisa.
CHECKING_ACCOUNT = "Assets:Checking"
EPF_ACCOUNT = "Assets:Debt:EPF"
TAX_ACCOUNT = "Expenses:Tax"
EPF_INTEREST_ACCOUNT = "Income:Interest:EPF"
SALARY_ACCOUNT_PREFIX = "Income:Salary"

INVESTMENT_PAYEE = "Investment"


@dataclass(frozen=True)
class FundSplit:
    commodity: str
    account: str
    share: float


@dataclass(frozen=True)
class ExpenseRule:
    """
    One recurring expense. amount=None means "use the running rent base".
    min_percent is the floor of the random fraction drawn each month (100 = fixed).
    """
    payee: str
    account: str
    amount: Optional[float]
    min_percent: int = 100


# Salary
EPF_RATE = 0.12
NPS_RATE = 0.10
SALARY_INCREMENT_RANGE: Tuple[int, int] = (10, 15)

PENSION_FUNDS: Tuple[FundSplit, ...] = (
    FundSplit("NPS_HDFC_E", "Assets:Debt:NPS:HDFC:E", 0.75),
    FundSplit("NPS_HDFC_C", "Assets:Equity:NPS:HDFC:C", 0.15),
    FundSplit("NPS_HDFC_G", "Assets:Equity:NPS:HDFC:G", 0.10),
)

# (exclusive upper bound of annual income, rate); anything above the last bound is TOP_TAX_RATE
TAX_BRACKETS: Tuple[Tuple[float, float], ...] = (
    (500000, 0.0),
    (750000, 0.10),
    (1000000, 0.15),
    (1250000, 0.20),
    (1500000, 0.25),
)
TOP_TAX_RATE = 0.30

# Expenses
RENT_INCREMENT_RANGE: Tuple[int, int] = (5, 10)

MONTHLY_EXPENSES: Tuple[ExpenseRule, ...] = (
    ExpenseRule("Rent", "Expenses:Rent", None, 100),
    ExpenseRule("Internet", "Expenses:Utilities", 1500, 100),
    ExpenseRule("Mobile", "Expenses:Utilities", 430, 100),
    ExpenseRule("Shopping", "Expenses:Shopping", 3000, 50),
    ExpenseRule("Eat out", "Expenses:Restaurants", 2500, 50),
    ExpenseRule("Groceries", "Expenses:Food", 5000, 90),
)
SEASONAL_EXPENSE = ExpenseRule("Dress", "Expenses:Clothing", 5000, 50)
SEASONAL_MONTHS: Tuple[int, ...] = (1, 4, 11, 12)

# Investments
EPF_INTEREST_RATE = 0.08
INVESTMENT_FUNDS: Tuple[FundSplit, ...] = (
    FundSplit("NIFTY", "Assets:Equity:NIFTY", 0.5),
    FundSplit("NIFTY_JR", "Assets:Equity:NIFTY_JR", 0.2),
    FundSplit("ABCBF", "Assets:Debt:ABCBF", 0.3),
)
PRIMARY_EQUITY = INVESTMENT_FUNDS[0]

# Yearly calendar events
INCREMENT_MONTH = 4  # salary/rent revision and EPF interest
SELL_MONTH = 3
SELL_DAY_OFFSET = 15
SELL_AMOUNT = 75000.0

REQUIRED_COMMODITIES: Tuple[str, ...] = tuple(
    f.commodity for f in INVESTMENT_FUNDS + PENSION_FUNDS
)


def employer_for_year(year: int) -> str:
    return "Globex" if year > 2017 else "Acme"


def salary_account(year: int) -> str:
    return f"{SALARY_ACCOUNT_PREFIX}:{employer_for_year(year)}"
