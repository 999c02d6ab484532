"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerbook.domain.entities import Transaction, TransactionCategory
from ledgerbook.domain.reports import ReportService
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.storage.factories import create_sqlite_store
from ledgerbook.storage.memory import InMemoryKeyValueStore
from ledgerbook.storage.transaction_store import TransactionStore


@pytest.fixture
def temp_kv_store():
    """Create a temporary SQLite key-value store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    kv_store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    kv_store.database_path = db_path
    kv_store.connect()

    yield kv_store

    kv_store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_kv_store():
    """Create an empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def store(memory_kv_store):
    """Create a TransactionStore over an in-memory backend."""
    return TransactionStore(memory_kv_store)


@pytest.fixture
def report_service(store):
    """Create a ReportService reading from the in-memory store."""
    return ReportService(store)


@pytest.fixture
def transaction_service(store):
    """Create a TransactionService writing to the in-memory store."""
    return TransactionService(store)


@pytest.fixture
def make_transaction():
    """Build Transaction entities with sensible defaults."""

    def _make(
        id="t-1",
        debit_account="Cash",
        credit_account="Sales Revenue",
        amount="1000",
        category=TransactionCategory.REVENUE,
        description="Test",
        txn_date=date(2024, 1, 1),
        reference=None,
    ):
        return Transaction(
            id=id,
            date=txn_date,
            description=description,
            debit_account=debit_account,
            credit_account=credit_account,
            amount=Decimal(amount),
            category=category,
            reference=reference,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
