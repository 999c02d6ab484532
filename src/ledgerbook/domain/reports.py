"""Financial report domain service."""

from decimal import Decimal
from typing import Iterable

from ledgerbook.domain.balances import calculate_account_balances
from ledgerbook.domain.classifier import classify_account
from ledgerbook.domain.entities import (
    Account,
    AccountType,
    AssetSection,
    BalanceSheet,
    DashboardMetrics,
    EquitySection,
    LiabilitySection,
    ProfitLoss,
    TradingAccount,
    TransactionCategory,
)
from ledgerbook.storage.transaction_store import TransactionStore


def _sum_absolute(accounts: Iterable[Account]) -> Decimal:
    return sum((abs(account.balance) for account in accounts), Decimal("0"))


class ReportService:
    """Service for deriving financial statements from stored transactions.

    Every report re-reads the full transaction list; nothing is cached.
    """

    def __init__(self, store: TransactionStore):
        """Initialize report service.

        Args:
            store: Transaction store to read from
        """
        self.store = store

    def get_accounts(self) -> list[Account]:
        """Get every referenced account with its inferred type and balance."""
        balances = calculate_account_balances(self.store.get_transactions())
        return [
            Account(name=name, type=classify_account(name), balance=balance)
            for name, balance in balances.items()
        ]

    def get_balance_sheet(self) -> BalanceSheet:
        """Build the balance sheet.

        Totals are sums of absolute balances, so an account carrying an
        abnormal balance direction still adds to its section total. Listed
        accounts keep their signed balances.
        """
        accounts = self.get_accounts()

        def of_type(account_type: AccountType) -> tuple[Account, ...]:
            return tuple(a for a in accounts if a.type == account_type)

        current_assets = of_type(AccountType.CURRENT_ASSET)
        fixed_assets = of_type(AccountType.FIXED_ASSET)
        current_liabilities = of_type(AccountType.CURRENT_LIABILITY)
        long_term_liabilities = of_type(AccountType.LONG_TERM_LIABILITY)
        equity_accounts = of_type(AccountType.EQUITY)

        return BalanceSheet(
            assets=AssetSection(
                current_assets=current_assets,
                fixed_assets=fixed_assets,
                total_assets=_sum_absolute(current_assets + fixed_assets),
            ),
            liabilities=LiabilitySection(
                current_liabilities=current_liabilities,
                long_term_liabilities=long_term_liabilities,
                total_liabilities=_sum_absolute(
                    current_liabilities + long_term_liabilities
                ),
            ),
            equity=EquitySection(
                equity_accounts=equity_accounts,
                total_equity=_sum_absolute(equity_accounts),
            ),
        )

    def get_trading_account(self) -> TradingAccount:
        """Build the trading account.

        Uses the category declared on each transaction, not the account
        type inferred from account names.
        """
        transactions = self.store.get_transactions()

        def total_for(category: TransactionCategory) -> Decimal:
            return sum(
                (t.amount for t in transactions if t.category == category),
                Decimal("0"),
            )

        sales = total_for(TransactionCategory.REVENUE)
        cost_of_goods_sold = total_for(TransactionCategory.COST_OF_GOODS_SOLD)
        return TradingAccount(
            sales=sales,
            cost_of_goods_sold=cost_of_goods_sold,
            gross_profit=sales - cost_of_goods_sold,
        )

    def get_profit_loss(self) -> ProfitLoss:
        """Build the profit and loss statement.

        Gross profit comes from declared transaction categories while
        operating expenses come from accounts classified as expenses.
        """
        trading_account = self.get_trading_account()
        operating_expenses = tuple(
            Account(name=a.name, type=a.type, balance=abs(a.balance))
            for a in self.get_accounts()
            if a.type == AccountType.EXPENSE
        )
        total_expenses = _sum_absolute(operating_expenses)
        return ProfitLoss(
            gross_profit=trading_account.gross_profit,
            operating_expenses=operating_expenses,
            total_expenses=total_expenses,
            net_profit=trading_account.gross_profit - total_expenses,
        )

    def get_dashboard_metrics(self) -> DashboardMetrics:
        """Collect headline figures from the three statements."""
        balance_sheet = self.get_balance_sheet()
        profit_loss = self.get_profit_loss()
        trading_account = self.get_trading_account()
        return DashboardMetrics(
            total_assets=balance_sheet.assets.total_assets,
            total_liabilities=balance_sheet.liabilities.total_liabilities,
            total_equity=balance_sheet.equity.total_equity,
            net_profit=profit_loss.net_profit,
            gross_profit=trading_account.gross_profit,
            total_transactions=len(self.store.get_transactions()),
        )
