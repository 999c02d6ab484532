"""Storage layer for ledgerbook application."""

from ledgerbook.storage.base import KeyValueStore
from ledgerbook.storage.memory import InMemoryKeyValueStore
from ledgerbook.storage.factories import create_sqlite_store

__all__ = ["KeyValueStore", "InMemoryKeyValueStore", "create_sqlite_store"]
