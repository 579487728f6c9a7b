"""
Adapters - Implementations of ports.

Durable storage:
- MemoryStorageAdapter: In-memory store (testing)
- FileStorageAdapter: JSON file on local disk
- RedisStorageAdapter: Redis-backed store
- ScopedStorage: Per-client namespace over any store

Remote API:
- HttpAuthAdapter: Login and token validation
- HttpResourceAdapter: Resource listings
"""

# Durable storage
from ims_dashboard.adapters.memory_storage import MemoryStorageAdapter
from ims_dashboard.adapters.file_storage import FileStorageAdapter
from ims_dashboard.adapters.redis_storage import RedisStorageAdapter
from ims_dashboard.adapters.scoped_storage import ScopedStorage

# Remote API
from ims_dashboard.adapters.http_auth import HttpAuthAdapter
from ims_dashboard.adapters.http_resources import HttpResourceAdapter

__all__ = [
    # Durable storage
    "MemoryStorageAdapter",
    "FileStorageAdapter",
    "RedisStorageAdapter",
    "ScopedStorage",
    # Remote API
    "HttpAuthAdapter",
    "HttpResourceAdapter",
]
