"""SQLAlchemy key-value store implementation."""

import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ledgerbook.storage.base import KeyValueStore
from ledgerbook.storage.models import KeyValueEntry, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """SQLAlchemy-based implementation of KeyValueStore interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy key-value store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key."""
        session = self._get_session()
        entry = session.get(KeyValueEntry, key)
        if entry is None:
            return None
        return entry.value

    def set(self, key: str, value: str) -> None:
        """Store value under key."""
        session = self._get_session()
        entry = session.get(KeyValueEntry, key)
        if entry is None:
            session.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        self._commit(session)
        logger.debug("Wrote %d characters to key '%s'", len(value), key)

    def clear(self) -> None:
        """Remove every stored key."""
        session = self._get_session()
        session.query(KeyValueEntry).delete()
        self._commit(session)
        logger.debug("Cleared all keys in %s", self.database_url)

    def _commit(self, session: Session) -> None:
        """Commit, rolling back so the session stays usable if the commit fails."""
        try:
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            raise
