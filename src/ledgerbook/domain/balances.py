"""Account balance aggregation."""

from decimal import Decimal
from typing import Iterable

from ledgerbook.domain.entities import Transaction


def calculate_account_balances(
    transactions: Iterable[Transaction],
) -> dict[str, Decimal]:
    """Reduce transactions to a signed net balance per account name.

    Debits increase the account balance and credits decrease it. Accounts
    appear in the result in order of first reference.

    Args:
        transactions: Transactions to aggregate

    Returns:
        Mapping of account name to net balance
    """
    balances: dict[str, Decimal] = {}
    for txn in transactions:
        balances[txn.debit_account] = (
            balances.get(txn.debit_account, Decimal("0")) + txn.amount
        )
        balances[txn.credit_account] = (
            balances.get(txn.credit_account, Decimal("0")) - txn.amount
        )
    return balances
