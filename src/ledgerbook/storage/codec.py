"""Conversion between domain transactions and their stored JSON form.

The whole transaction list is stored as one JSON array under a single key.
Records use camelCase field names. Amounts are written as decimal strings
so they read back exactly. Plain JSON numbers written by earlier versions
are still accepted.
"""

import json
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from ledgerbook.domain.entities import Transaction, TransactionCategory
from ledgerbook.domain.errors import CorruptDataError

logger = logging.getLogger(__name__)


def transaction_to_record(transaction: Transaction) -> dict[str, Any]:
    """Convert a domain Transaction into a JSON-ready record."""
    record: dict[str, Any] = {
        "id": transaction.id,
        "date": transaction.date.isoformat(),
        "description": transaction.description,
        "debitAccount": transaction.debit_account,
        "creditAccount": transaction.credit_account,
        "amount": str(transaction.amount),
        "category": transaction.category.value,
    }
    if transaction.reference is not None:
        record["reference"] = transaction.reference
    return record


def record_to_transaction(record: Any) -> Transaction:
    """Convert a stored record into a domain Transaction.

    Raises:
        CorruptDataError: If the record is missing fields or holds bad values
    """
    if not isinstance(record, dict):
        raise CorruptDataError(f"Expected a transaction object, got {type(record).__name__}")

    try:
        amount = record["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float, str)):
            raise CorruptDataError(f"Invalid amount {amount!r}")
        reference = record.get("reference")
        return Transaction(
            id=str(record["id"]),
            date=date.fromisoformat(record["date"]),
            description=str(record.get("description", "")),
            debit_account=str(record["debitAccount"]),
            credit_account=str(record["creditAccount"]),
            amount=Decimal(str(amount)),
            category=TransactionCategory(record["category"]),
            reference=str(reference) if reference is not None else None,
        )
    except CorruptDataError:
        raise
    except KeyError as e:
        raise CorruptDataError(f"Transaction record is missing field {e}") from e
    except (TypeError, ValueError, InvalidOperation) as e:
        raise CorruptDataError(f"Invalid transaction record: {e}") from e


def encode_transactions(transactions: Iterable[Transaction]) -> str:
    """Serialize transactions to the stored JSON string."""
    return json.dumps([transaction_to_record(t) for t in transactions])


def decode_transactions(payload: str) -> list[Transaction]:
    """Deserialize the stored JSON string into transactions.

    Records that cannot be decoded are skipped with a warning so the rest of
    the list survives.

    Raises:
        CorruptDataError: If the payload is not valid JSON or not a JSON array
    """
    try:
        records = json.loads(payload)
    except ValueError as e:
        raise CorruptDataError(f"Stored transactions are not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise CorruptDataError(
            f"Stored transactions must be a list, got {type(records).__name__}"
        )
    transactions = []
    for index, record in enumerate(records):
        try:
            transactions.append(record_to_transaction(record))
        except CorruptDataError as e:
            logger.warning("Skipping unreadable transaction record %d: %s", index, e)
    return transactions
