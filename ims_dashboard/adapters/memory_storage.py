"""
Memory Storage Adapter - In-memory key-value store (testing only).
"""

from typing import Optional, Dict
from ims_dashboard.ports.storage_port import DurableStoragePort


class MemoryStorageAdapter(DurableStoragePort):
    """
    In-memory key-value store.

    WARNING: Only for testing. Values are lost on restart.
    Not suitable for production or multi-worker deployments.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """Initialize in-memory storage."""
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def keys(self):
        """All stored keys (test helper)."""
        return sorted(self._data)
