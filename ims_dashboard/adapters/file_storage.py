"""
File Storage Adapter - JSON file key-value store.
"""

from contextlib import suppress
from typing import Optional, Dict
import json
import logging
import os
import tempfile
import threading

from ims_dashboard.errors import StorageError
from ims_dashboard.ports.storage_port import DurableStoragePort

logger = logging.getLogger(__name__)

_path_locks: Dict[str, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: str) -> threading.Lock:
    """One lock per file path, shared by every adapter in the process."""
    with _path_locks_guard:
        return _path_locks.setdefault(path, threading.Lock())


class FileStorageAdapter(DurableStoragePort):
    """
    Key-value store kept in a single JSON file.

    Single-process only: adapters on the same path share one in-process
    lock around each read-modify-write, but separate worker processes
    would overwrite each other's keys. Use the Redis backend for multiple
    workers. Writes go to a temporary file that replaces the existing
    file, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: str):
        """
        Initialize file storage.

        Args:
            path: Location of the JSON file (created on first write)
        """
        self._path = os.path.abspath(path)
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> str:
        return self._path

    def _load(self) -> Dict[str, str]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read storage file: {e}")

        if not isinstance(data, dict):
            raise StorageError("Storage file does not hold a JSON object")
        return data

    def _dump(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(self._path)
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        except OSError as e:
            raise StorageError(f"Failed to write storage file: {e}")

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as e:
            with suppress(FileNotFoundError):
                os.unlink(tmp_path)
            raise StorageError(f"Failed to write storage file: {e}")

    def _load_for_write(self) -> Dict[str, str]:
        try:
            return self._load()
        except StorageError as e:
            # Unreadable contents are replaced rather than blocking every write.
            logger.warning("Discarding unreadable storage file %s: %s", self._path, e.message)
            return {}

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load_for_write()
            data[key] = value
            self._dump(data)

    def remove(self, key: str) -> bool:
        with self._lock:
            data = self._load_for_write()
            if key not in data:
                return False
            del data[key]
            self._dump(data)
        return True
