"""Tests for the financial report service."""

from decimal import Decimal

from ledgerbook.domain.entities import AccountType, TransactionCategory


def _names(accounts):
    return [a.name for a in accounts]


class TestEmptyState:
    """Reports over a store with no transactions."""

    def test_balance_sheet(self, report_service):
        sheet = report_service.get_balance_sheet()

        assert sheet.assets.current_assets == ()
        assert sheet.assets.fixed_assets == ()
        assert sheet.assets.total_assets == 0
        assert sheet.liabilities.current_liabilities == ()
        assert sheet.liabilities.long_term_liabilities == ()
        assert sheet.liabilities.total_liabilities == 0
        assert sheet.equity.equity_accounts == ()
        assert sheet.equity.total_equity == 0

    def test_trading_account(self, report_service):
        trading = report_service.get_trading_account()
        assert (trading.sales, trading.cost_of_goods_sold, trading.gross_profit) == (0, 0, 0)

    def test_profit_loss(self, report_service):
        statement = report_service.get_profit_loss()

        assert statement.operating_expenses == ()
        assert statement.total_expenses == 0
        assert statement.gross_profit == 0
        assert statement.net_profit == 0

    def test_dashboard(self, report_service):
        metrics = report_service.get_dashboard_metrics()

        assert metrics.total_assets == 0
        assert metrics.total_liabilities == 0
        assert metrics.total_equity == 0
        assert metrics.net_profit == 0
        assert metrics.gross_profit == 0
        assert metrics.total_transactions == 0

    def test_accounts(self, report_service):
        assert report_service.get_accounts() == []


def test_cash_sale_scenario(store, report_service, make_transaction):
    store.save_transaction(
        make_transaction(
            id="test-1",
            description="Test Sale",
            debit_account="Cash",
            credit_account="Sales Revenue",
            amount="1000",
            category=TransactionCategory.REVENUE,
            reference="INV-001",
        )
    )

    transactions = store.get_transactions()
    assert len(transactions) == 1
    assert transactions[0].description == "Test Sale"

    sheet = report_service.get_balance_sheet()
    cash = next(a for a in sheet.assets.current_assets if a.name == "Cash")
    assert cash.balance == 1000
    assert cash.type == AccountType.CURRENT_ASSET
    assert sheet.equity.equity_accounts == ()

    trading = report_service.get_trading_account()
    assert trading.sales == 1000
    assert trading.gross_profit == 1000

    statement = report_service.get_profit_loss()
    assert statement.gross_profit == 1000
    assert statement.net_profit == 1000

    metrics = report_service.get_dashboard_metrics()
    assert metrics.total_assets > 0
    assert metrics.gross_profit == 1000


def test_delete_returns_reports_to_empty_state(store, report_service, make_transaction):
    store.save_transaction(
        make_transaction(
            id="test-2",
            description="Test Expense",
            debit_account="Rent Expense",
            credit_account="Cash",
            amount="500",
            category=TransactionCategory.EXPENSE,
            reference="BILL-001",
        )
    )
    assert len(store.get_transactions()) == 1
    assert report_service.get_profit_loss().total_expenses == 500

    store.delete_transaction("test-2")

    assert store.get_transactions() == []
    sheet = report_service.get_balance_sheet()
    assert sheet.assets.current_assets == ()
    assert sheet.assets.total_assets == 0
    statement = report_service.get_profit_loss()
    assert statement.operating_expenses == ()
    assert statement.net_profit == 0
    assert report_service.get_dashboard_metrics().total_transactions == 0


def test_balance_sheet_partitions_by_account_type(store, report_service, make_transaction):
    entries = [
        ("Cash", "Owner Capital", "10000", TransactionCategory.EQUITY),
        ("Office Equipment", "Cash", "2500", TransactionCategory.ASSET),
        ("Inventory", "Accounts Payable", "1200", TransactionCategory.ASSET),
        ("Cash", "Mortgage", "50000", TransactionCategory.LIABILITY),
        ("Building", "Cash", "45000", TransactionCategory.ASSET),
    ]
    for i, (debit, credit, amount, category) in enumerate(entries):
        store.save_transaction(
            make_transaction(
                id=str(i),
                debit_account=debit,
                credit_account=credit,
                amount=amount,
                category=category,
            )
        )

    sheet = report_service.get_balance_sheet()

    assert _names(sheet.assets.current_assets) == ["Cash", "Inventory"]
    assert _names(sheet.assets.fixed_assets) == ["Office Equipment", "Building"]
    assert _names(sheet.liabilities.current_liabilities) == ["Accounts Payable"]
    assert _names(sheet.liabilities.long_term_liabilities) == ["Mortgage"]
    assert _names(sheet.equity.equity_accounts) == ["Owner Capital"]

    # Cash: 10000 - 2500 + 50000 - 45000
    assert sheet.assets.current_assets[0].balance == Decimal("12500")
    assert sheet.assets.total_assets == Decimal("12500") + 1200 + 2500 + 45000
    assert sheet.liabilities.total_liabilities == Decimal("51200")
    assert sheet.equity.total_equity == Decimal("10000")


def test_balance_sheet_totals_use_absolute_balances(store, report_service, make_transaction):
    # Overdrawn cash still adds positively to total assets
    store.save_transaction(
        make_transaction(id="1", debit_account="Rent Expense", credit_account="Cash", amount="300")
    )
    # Liability with a debit balance still adds positively to total liabilities
    store.save_transaction(
        make_transaction(id="2", debit_account="Accounts Payable", credit_account="Sales", amount="80")
    )

    sheet = report_service.get_balance_sheet()

    assert sheet.assets.current_assets[0].balance == Decimal("-300")
    assert sheet.assets.total_assets == Decimal("300")
    assert sheet.liabilities.current_liabilities[0].balance == Decimal("80")
    assert sheet.liabilities.total_liabilities == Decimal("80")


def test_trading_account_uses_declared_category(store, report_service, make_transaction):
    store.save_transaction(
        make_transaction(id="1", debit_account="Cash", credit_account="Sales", amount="900",
                         category=TransactionCategory.REVENUE)
    )
    # Revenue-named account but declared as equity: not counted as sales
    store.save_transaction(
        make_transaction(id="2", debit_account="Cash", credit_account="Sales", amount="100",
                         category=TransactionCategory.EQUITY)
    )
    # Declared cost of goods sold with accounts that do not look like COGS
    store.save_transaction(
        make_transaction(id="3", debit_account="Purchases", credit_account="Cash", amount="350",
                         category=TransactionCategory.COST_OF_GOODS_SOLD)
    )

    trading = report_service.get_trading_account()

    assert trading.sales == Decimal("900")
    assert trading.cost_of_goods_sold == Decimal("350")
    assert trading.gross_profit == Decimal("550")


def test_profit_loss_mixes_category_and_account_type(store, report_service, make_transaction):
    store.save_transaction(
        make_transaction(id="1", debit_account="Cash", credit_account="Sales", amount="2000",
                         category=TransactionCategory.REVENUE)
    )
    store.save_transaction(
        make_transaction(id="2", debit_account="COGS", credit_account="Inventory", amount="800",
                         category=TransactionCategory.COST_OF_GOODS_SOLD)
    )
    # Declared as cost of goods sold, but "Purchases" classifies as an expense
    # account, so it is counted in both gross profit and operating expenses.
    store.save_transaction(
        make_transaction(id="3", debit_account="Purchases", credit_account="Cash", amount="200",
                         category=TransactionCategory.COST_OF_GOODS_SOLD)
    )
    store.save_transaction(
        make_transaction(id="4", debit_account="Rent", credit_account="Cash", amount="300",
                         category=TransactionCategory.EXPENSE)
    )

    statement = report_service.get_profit_loss()

    assert statement.gross_profit == Decimal("1000")
    assert _names(statement.operating_expenses) == ["Purchases", "Rent"]
    assert statement.total_expenses == Decimal("500")
    assert statement.net_profit == Decimal("500")


def test_operating_expenses_use_absolute_balance(store, report_service, make_transaction):
    # A refund credited to an expense account leaves it with a credit balance
    store.save_transaction(
        make_transaction(id="1", debit_account="Cash", credit_account="Supplies", amount="40",
                         category=TransactionCategory.EXPENSE)
    )

    statement = report_service.get_profit_loss()

    assert statement.operating_expenses[0].balance == Decimal("40")
    assert statement.operating_expenses[0].type == AccountType.EXPENSE
    assert statement.total_expenses == Decimal("40")
    assert statement.net_profit == Decimal("-40")


def test_dashboard_composes_statements(store, report_service, make_transaction):
    store.save_transaction(
        make_transaction(id="1", debit_account="Cash", credit_account="Owner Capital",
                         amount="5000", category=TransactionCategory.EQUITY)
    )
    store.save_transaction(
        make_transaction(id="2", debit_account="Cash", credit_account="Bank Loan",
                         amount="1000", category=TransactionCategory.LIABILITY)
    )
    store.save_transaction(
        make_transaction(id="3", debit_account="Cash", credit_account="Accounts Payable",
                         amount="250", category=TransactionCategory.LIABILITY)
    )
    store.save_transaction(
        make_transaction(id="4", debit_account="Cash", credit_account="Sales Revenue",
                         amount="700", category=TransactionCategory.REVENUE)
    )
    store.save_transaction(
        make_transaction(id="5", debit_account="Wages", credit_account="Cash",
                         amount="150", category=TransactionCategory.EXPENSE)
    )

    metrics = report_service.get_dashboard_metrics()
    sheet = report_service.get_balance_sheet()
    statement = report_service.get_profit_loss()

    assert metrics.total_assets == sheet.assets.total_assets
    assert metrics.total_liabilities == sheet.liabilities.total_liabilities
    assert metrics.total_equity == sheet.equity.total_equity
    assert metrics.net_profit == statement.net_profit == Decimal("550")
    assert metrics.gross_profit == Decimal("700")
    assert metrics.total_transactions == 5
    # "Bank Loan" contains "bank" and lands in current assets, not liabilities
    assert metrics.total_liabilities == Decimal("250")


def test_reports_reflect_latest_store_state(store, report_service, make_transaction):
    store.save_transaction(make_transaction(id="1", amount="100"))
    assert report_service.get_trading_account().sales == 100

    store.save_transaction(make_transaction(id="1", amount="250"))
    assert report_service.get_trading_account().sales == 250
