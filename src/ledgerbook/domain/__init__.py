"""Domain layer for ledgerbook application.

Services live in their own modules (``ledgerbook.domain.reports`` and
``ledgerbook.domain.transaction``) because they depend on the storage layer.
"""

from ledgerbook.domain.entities import AccountType, Transaction, TransactionCategory
from ledgerbook.domain.classifier import classify_account
from ledgerbook.domain.balances import calculate_account_balances

__all__ = [
    "AccountType",
    "Transaction",
    "TransactionCategory",
    "classify_account",
    "calculate_account_balances",
]
