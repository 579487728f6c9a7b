"""
Scoped Storage - Namespaced view over another durable store.
"""

from typing import Optional
from ims_dashboard.ports.storage_port import DurableStoragePort


class ScopedStorage(DurableStoragePort):
    """
    Prefixes every key with a namespace before delegating.

    Used to give each browser client its own copy of the session keys
    inside one shared backend.
    """

    def __init__(self, inner: DurableStoragePort, namespace: str):
        """
        Args:
            inner: Backing store
            namespace: Key namespace, must not be empty
        """
        if not namespace:
            raise ValueError("namespace must not be empty")
        self._inner = inner
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> Optional[str]:
        return self._inner.get(self._key(key))

    def set(self, key: str, value: str) -> None:
        self._inner.set(self._key(key), value)

    def remove(self, key: str) -> bool:
        return self._inner.remove(self._key(key))
