"""Persisted transaction list."""

import logging
from typing import Optional

from ledgerbook.domain.entities import Transaction
from ledgerbook.domain.errors import CorruptDataError
from ledgerbook.storage.base import KeyValueStore
from ledgerbook.storage.codec import decode_transactions, encode_transactions

logger = logging.getLogger(__name__)

STORAGE_KEY = "bookkeeping_transactions"


class TransactionStore:
    """Ordered transaction list kept under a single key of a KeyValueStore.

    Every mutation reads the whole list, changes it and writes it back. The
    sequence is not atomic across callers; the last write wins.
    """

    def __init__(self, kv_store: KeyValueStore, key: str = STORAGE_KEY):
        """Initialize transaction store.

        Args:
            kv_store: Key-value persistence backend
            key: Key holding the serialized transaction list
        """
        self.kv_store = kv_store
        self.key = key

    def get_transactions(self) -> list[Transaction]:
        """Get all stored transactions in insertion order.

        Missing or unreadable data yields an empty list.
        """
        payload = self.kv_store.get(self.key)
        if not payload:
            return []
        try:
            return decode_transactions(payload)
        except CorruptDataError as e:
            logger.warning("Ignoring unreadable data under key '%s': %s", self.key, e)
            return []

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get a transaction by ID, or None if not stored."""
        for txn in self.get_transactions():
            if txn.id == transaction_id:
                return txn
        return None

    def save_transaction(self, transaction: Transaction) -> None:
        """Insert a transaction, or replace the stored one with the same ID in place."""
        transactions = self.get_transactions()
        for index, existing in enumerate(transactions):
            if existing.id == transaction.id:
                transactions[index] = transaction
                break
        else:
            transactions.append(transaction)
        self._write(transactions)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction by ID. Unknown IDs are ignored."""
        transactions = [t for t in self.get_transactions() if t.id != transaction_id]
        self._write(transactions)

    def clear(self) -> None:
        """Remove all stored data from the backend."""
        self.kv_store.clear()

    def _write(self, transactions: list[Transaction]) -> None:
        self.kv_store.set(self.key, encode_transactions(transactions))
        logger.debug("Stored %d transactions under key '%s'", len(transactions), self.key)
