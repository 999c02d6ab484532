"""Transaction domain service."""

import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerbook.domain.entities import Transaction, TransactionCategory
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    blank_account_name,
    negative_amount,
    transaction_not_found,
    unknown_transaction_category,
)
from ledgerbook.storage.transaction_store import TransactionStore


def parse_category(category: TransactionCategory | str) -> TransactionCategory:
    """Resolve a category given as an enum member or its string value.

    Raises:
        ValidationError: If the value is not a known category
    """
    if isinstance(category, TransactionCategory):
        return category
    normalized = category.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return TransactionCategory(normalized)
    except ValueError:
        raise ValidationError(unknown_transaction_category(category))


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, store: TransactionStore):
        """Initialize transaction service.

        Args:
            store: Transaction store instance
        """
        self.store = store

    def create_transaction(
        self,
        date: date,
        description: str,
        debit_account: str,
        credit_account: str,
        amount: Decimal,
        category: TransactionCategory | str,
        reference: Optional[str] = None,
        transaction_id: Optional[str] = None,
    ) -> Transaction:
        """Create and store a transaction.

        Args:
            date: Transaction date
            description: Free-text description
            debit_account: Account name to debit
            credit_account: Account name to credit
            amount: Non-negative amount
            category: Transaction category or its string value
            reference: Optional reference text
            transaction_id: Optional ID; generated if not provided. An existing
                ID replaces the stored transaction.

        Returns:
            The stored Transaction

        Raises:
            ValidationError: If account names are blank, the amount is negative
                or the category is unknown
        """
        transaction = Transaction(
            id=transaction_id or uuid.uuid4().hex,
            date=date,
            description=description,
            debit_account=debit_account.strip(),
            credit_account=credit_account.strip(),
            amount=amount,
            category=parse_category(category),
            reference=reference,
        )
        self._validate(transaction)
        self.store.save_transaction(transaction)
        return transaction

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.store.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        transaction = self.store.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def list_transactions(self) -> list[Transaction]:
        """List all transactions in the order they were stored."""
        return self.store.get_transactions()

    def update_transaction(
        self,
        transaction_id: str,
        date: Optional[date] = None,
        description: Optional[str] = None,
        debit_account: Optional[str] = None,
        credit_account: Optional[str] = None,
        amount: Optional[Decimal] = None,
        category: Optional[TransactionCategory | str] = None,
        reference: Optional[str] = None,
    ) -> Transaction:
        """Update fields of an existing transaction.

        Only provided fields are changed. The transaction keeps its position
        in the stored list.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If the updated transaction is invalid
        """
        current = self.require_transaction(transaction_id)

        changes: dict = {}
        if date is not None:
            changes["date"] = date
        if description is not None:
            changes["description"] = description
        if debit_account is not None:
            changes["debit_account"] = debit_account.strip()
        if credit_account is not None:
            changes["credit_account"] = credit_account.strip()
        if amount is not None:
            changes["amount"] = amount
        if category is not None:
            changes["category"] = parse_category(category)
        if reference is not None:
            changes["reference"] = reference or None

        updated = replace(current, **changes)
        self._validate(updated)
        self.store.save_transaction(updated)
        return updated

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction.

        Returns:
            True if a transaction was removed, False if the ID was unknown
        """
        existed = self.store.get_transaction(transaction_id) is not None
        self.store.delete_transaction(transaction_id)
        return existed

    def _validate(self, transaction: Transaction) -> None:
        if not transaction.debit_account:
            raise ValidationError(blank_account_name("debit"))
        if not transaction.credit_account:
            raise ValidationError(blank_account_name("credit"))
        if transaction.amount < 0:
            raise ValidationError(negative_amount(transaction.amount))
