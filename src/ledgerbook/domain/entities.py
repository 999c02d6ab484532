"""Domain model entities for ledgerbook.

These are pure data classes representing bookkeeping concepts, independent
of how transactions are persisted. Accounts and reports are derived values
recomputed from the transaction list on every request.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionCategory(str, Enum):
    """Category declared by the caller on each transaction."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"
    COST_OF_GOODS_SOLD = "cost_of_goods_sold"


class AccountType(str, Enum):
    """Account type inferred from an account name."""

    CURRENT_ASSET = "current_asset"
    FIXED_ASSET = "fixed_asset"
    CURRENT_LIABILITY = "current_liability"
    LONG_TERM_LIABILITY = "long_term_liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"
    COST_OF_GOODS_SOLD = "cost_of_goods_sold"


@dataclass(frozen=True)
class Transaction:
    """Double-entry transaction domain entity."""

    id: str
    date: date
    description: str
    debit_account: str
    credit_account: str
    amount: Decimal
    category: TransactionCategory
    reference: Optional[str] = None


@dataclass(frozen=True)
class Account:
    """Derived account with inferred type and signed balance."""

    name: str
    type: AccountType
    balance: Decimal


@dataclass(frozen=True)
class AssetSection:
    """Asset side of the balance sheet."""

    current_assets: tuple[Account, ...]
    fixed_assets: tuple[Account, ...]
    total_assets: Decimal


@dataclass(frozen=True)
class LiabilitySection:
    """Liability side of the balance sheet."""

    current_liabilities: tuple[Account, ...]
    long_term_liabilities: tuple[Account, ...]
    total_liabilities: Decimal


@dataclass(frozen=True)
class EquitySection:
    """Equity section of the balance sheet."""

    equity_accounts: tuple[Account, ...]
    total_equity: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Balance sheet report."""

    assets: AssetSection
    liabilities: LiabilitySection
    equity: EquitySection


@dataclass(frozen=True)
class TradingAccount:
    """Trading account report."""

    sales: Decimal
    cost_of_goods_sold: Decimal
    gross_profit: Decimal


@dataclass(frozen=True)
class ProfitLoss:
    """Profit and loss report."""

    gross_profit: Decimal
    operating_expenses: tuple[Account, ...]
    total_expenses: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class DashboardMetrics:
    """Headline figures drawn from the three statements."""

    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal
    net_profit: Decimal
    gross_profit: Decimal
    total_transactions: int
