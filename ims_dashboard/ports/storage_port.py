"""
Storage Port - Interface for the durable key-value store.

Implementations:
- MemoryStorageAdapter: In-memory store (testing only)
- FileStorageAdapter: JSON file on local disk
- RedisStorageAdapter: Redis-backed store
- ScopedStorage: Key-prefix view over another store
"""

from abc import ABC, abstractmethod
from typing import Optional


class DurableStoragePort(ABC):
    """Port: Persist string values under string keys across restarts."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Storage key

        Returns:
            Stored value, or None if the key is absent

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Write a value, replacing any previous one.

        Args:
            key: Storage key
            value: String value

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> bool:
        """
        Remove a key.

        Args:
            key: Storage key

        Returns:
            True if removed, False if it was absent

        Raises:
            StorageError: If the backend cannot be written
        """
        pass

    def scoped(self, namespace: str) -> "DurableStoragePort":
        """
        Return a view of this store whose keys live under a namespace.

        Args:
            namespace: Namespace (e.g. a browser client id)

        Returns:
            Storage view sharing this backend
        """
        from ims_dashboard.adapters.scoped_storage import ScopedStorage
        return ScopedStorage(self, namespace)
