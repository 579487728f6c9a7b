"""
Unit tests for SessionStore: persistence, restoration, logout.
"""

import pytest
from ims_dashboard.adapters import MemoryStorageAdapter
from ims_dashboard.errors import StorageError
from ims_dashboard.domain.user import User
from ims_dashboard.sdk.session_store import SessionStore, TOKEN_KEY, USER_KEY


@pytest.fixture
def admin():
    return User.from_username("admin")


def test_new_store_is_empty(store, storage):
    """Test a store over empty storage starts logged out."""
    assert store.user is None
    assert store.token is None
    assert not store.is_authenticated
    assert storage.keys() == []


def test_login_sets_state_and_storage(store, storage, admin):
    """Test login updates memory and both storage keys."""
    store.login(admin, "abc")

    assert store.user == admin
    assert store.token == "abc"
    assert store.is_authenticated
    assert storage.get(TOKEN_KEY) == "abc"
    assert User.from_json(storage.get(USER_KEY)) == admin


def test_logout_is_idempotent(store, storage, admin):
    """Test logging out twice gives the same empty state."""
    store.login(admin, "abc")

    for _ in range(2):
        store.logout()
        assert store.user is None
        assert store.token is None
        assert not store.is_authenticated
        assert storage.get(TOKEN_KEY) is None
        assert storage.get(USER_KEY) is None


def test_logout_when_never_logged_in(store, storage):
    """Test logout on an empty store is a no-op."""
    store.logout()
    assert not store.is_authenticated
    assert storage.keys() == []


def test_restoration_roundtrip(storage, admin):
    """Test a fresh store over the same storage reproduces the session."""
    SessionStore(storage).login(admin, "abc")

    restored = SessionStore.restore(storage)
    assert restored.user == admin
    assert restored.token == "abc"
    assert restored.is_authenticated
    assert restored.snapshot() == SessionStore(storage).snapshot()


def test_restoration_after_logout(storage, admin):
    """Test a logged-out session stays logged out after restart."""
    store = SessionStore(storage)
    store.login(admin, "abc")
    store.logout()

    assert not SessionStore(storage).is_authenticated


@pytest.mark.parametrize("raw_user", ["{not json", "[]", '{"email": "x@y.z"}'])
def test_malformed_user_fails_open(raw_user):
    """Test unparsable user data restores to the empty state."""
    storage = MemoryStorageAdapter({TOKEN_KEY: "abc", USER_KEY: raw_user})

    store = SessionStore(storage)
    assert store.user is None
    assert store.token is None
    assert not store.is_authenticated


@pytest.mark.parametrize("initial", [
    {TOKEN_KEY: "abc"},
    {USER_KEY: '{"username": "admin"}'},
    {TOKEN_KEY: "", USER_KEY: '{"username": "admin"}'},
])
def test_partial_storage_restores_empty(initial):
    """Test restoration needs both keys."""
    assert not SessionStore(MemoryStorageAdapter(initial)).is_authenticated


def test_storage_failure_on_restore(failing_storage):
    """Test an unreadable backend yields the empty state."""
    store = SessionStore(failing_storage)
    assert not store.is_authenticated


def test_storage_failure_on_login_keeps_memory_state(failing_storage, admin):
    """Test login still authenticates in memory when storage fails."""
    store = SessionStore(failing_storage)
    store.login(admin, "abc")

    assert store.is_authenticated
    assert store.token == "abc"


def test_storage_failure_on_logout_still_clears(failing_storage, admin):
    """Test logout clears memory state when storage fails."""
    store = SessionStore(failing_storage)
    store.login(admin, "abc")
    store.logout()

    assert not store.is_authenticated
    assert store.user is None


class UserWriteFails(MemoryStorageAdapter):
    """Memory storage that refuses to write the user record."""

    def set(self, key, value):
        if key == USER_KEY:
            raise StorageError("disk full")
        super().set(key, value)


def test_partial_write_leaves_no_orphan_token(admin):
    """Test a failed user write removes the token written before it."""
    storage = UserWriteFails()
    store = SessionStore(storage)

    store.login(admin, "abc")

    assert store.is_authenticated
    assert storage.get(TOKEN_KEY) is None
    assert storage.get(USER_KEY) is None
