"""Abstract key-value persistence interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Abstract string key-value store.

    Writes are durable until overwritten or cleared, and a read returns the
    last value written for the key or None.
    """

    def connect(self) -> None:
        """Open any underlying resources."""
        pass

    def disconnect(self) -> None:
        """Release any underlying resources."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if never written."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored key."""
        pass
