"""
Redis Storage Adapter - Redis-backed key-value store.
"""

from typing import Optional
import redis

from ims_dashboard.errors import StorageError
from ims_dashboard.ports.storage_port import DurableStoragePort


class RedisStorageAdapter(DurableStoragePort):
    """
    Redis-backed key-value store.

    Values are stored as plain strings under a common prefix.
    Supports multi-worker deployments.
    """

    def __init__(
        self,
        redis_client=None,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "ims:storage:",
        ttl: Optional[int] = None,
    ):
        """
        Initialize Redis storage adapter.

        Args:
            redis_client: Redis client instance (redis.Redis)
            redis_url: URL used when no client is given
            prefix: Key prefix for stored values
            ttl: Optional expiry in seconds applied on every write
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix
        self._ttl = ttl

    @property
    def ttl(self) -> Optional[int]:
        return self._ttl

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    def _key(self, key: str) -> str:
        """Generate Redis key."""
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._get_redis().get(self._key(key))
        except redis.exceptions.RedisError as e:
            raise StorageError(f"Redis read failed: {e}")

        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            if self._ttl:
                self._get_redis().setex(self._key(key), self._ttl, value)
            else:
                self._get_redis().set(self._key(key), value)
        except redis.exceptions.RedisError as e:
            raise StorageError(f"Redis write failed: {e}")

    def remove(self, key: str) -> bool:
        try:
            return bool(self._get_redis().delete(self._key(key)))
        except redis.exceptions.RedisError as e:
            raise StorageError(f"Redis delete failed: {e}")
