"""
Unit tests for durable storage adapters.
"""

import json
import os
import threading

import pytest
from ims_dashboard.adapters import FileStorageAdapter, MemoryStorageAdapter, ScopedStorage
from ims_dashboard.domain.user import User
from ims_dashboard.errors import StorageError
from ims_dashboard.sdk.session_store import SessionStore


class TestMemoryStorage:
    """Test in-memory storage."""

    def test_set_get_remove(self):
        storage = MemoryStorageAdapter()

        assert storage.get("k") is None
        storage.set("k", "v")
        assert storage.get("k") == "v"
        assert storage.remove("k") is True
        assert storage.remove("k") is False
        assert storage.get("k") is None


class TestScopedStorage:
    """Test per-client namespaces."""

    def test_prefixes_keys(self):
        inner = MemoryStorageAdapter()
        scoped = inner.scoped("client1")

        scoped.set("auth_token", "abc")

        assert inner.keys() == ["client1:auth_token"]
        assert scoped.get("auth_token") == "abc"
        assert isinstance(scoped, ScopedStorage)
        assert scoped.namespace == "client1"

    def test_clients_are_isolated(self):
        inner = MemoryStorageAdapter()
        SessionStore(inner.scoped("a")).login(User.from_username("admin"), "abc")

        assert SessionStore(inner.scoped("a")).is_authenticated
        assert not SessionStore(inner.scoped("b")).is_authenticated

    def test_empty_namespace_rejected(self):
        with pytest.raises(ValueError):
            ScopedStorage(MemoryStorageAdapter(), "")


class TestFileStorage:
    """Test JSON file storage."""

    def test_survives_new_instance(self, tmp_path):
        path = tmp_path / "storage.json"
        FileStorageAdapter(str(path)).set("auth_token", "abc")

        assert FileStorageAdapter(str(path)).get("auth_token") == "abc"
        assert json.loads(path.read_text()) == {"auth_token": "abc"}

    def test_missing_file_reads_empty(self, tmp_path):
        storage = FileStorageAdapter(str(tmp_path / "nested" / "storage.json"))

        assert storage.get("auth_token") is None
        assert storage.remove("auth_token") is False

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        FileStorageAdapter(str(path)).set("k", "v")
        assert path.exists()

    def test_remove(self, tmp_path):
        storage = FileStorageAdapter(str(tmp_path / "storage.json"))
        storage.set("a", "1")
        storage.set("b", "2")

        assert storage.remove("a") is True
        assert storage.get("a") is None
        assert storage.get("b") == "2"

    def test_corrupt_file_read_raises(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{broken")

        with pytest.raises(StorageError):
            FileStorageAdapter(str(path)).get("auth_token")

    def test_corrupt_file_is_replaced_on_write(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]")
        storage = FileStorageAdapter(str(path))

        storage.set("auth_token", "abc")
        assert storage.get("auth_token") == "abc"

    def test_session_restores_across_restart(self, tmp_path):
        path = str(tmp_path / "storage.json")
        SessionStore(FileStorageAdapter(path).scoped("c1")).login(User.from_username("admin"), "abc")

        restored = SessionStore(FileStorageAdapter(path).scoped("c1"))
        assert restored.is_authenticated
        assert restored.user.username == "admin"

    def test_corrupt_file_session_fails_open(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("not json")

        assert not SessionStore(FileStorageAdapter(str(path))).is_authenticated

    def test_instances_on_same_path_keep_all_keys(self, tmp_path):
        """Test concurrent writers through separate adapters lose no keys."""
        path = str(tmp_path / "storage.json")
        first = FileStorageAdapter(path)
        second = FileStorageAdapter(path)

        def write(storage, prefix):
            for i in range(50):
                storage.set(f"{prefix}:{i}", "v")

        threads = [
            threading.Thread(target=write, args=(storage, prefix))
            for storage, prefix in ((first, "a"), (second, "b"), (first, "c"), (second, "d"))
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stored = json.loads((tmp_path / "storage.json").read_text())
        missing = [
            f"{prefix}:{i}" for prefix in "abcd" for i in range(50)
            if f"{prefix}:{i}" not in stored
        ]
        assert missing == []

    def test_failed_write_leaves_no_temp_file(self, tmp_path, monkeypatch):
        storage = FileStorageAdapter(str(tmp_path / "storage.json"))
        storage.set("a", "1")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)

        with pytest.raises(StorageError):
            storage.set("b", "2")

        assert sorted(p.name for p in tmp_path.iterdir()) == ["storage.json"]
        monkeypatch.undo()
        assert storage.get("b") is None
        assert storage.get("a") == "1"
