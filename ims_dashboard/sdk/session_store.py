"""
Session Store - Single source of truth for authentication state.

The store mirrors its state into durable storage so a browser context
keeps its session across page loads and process restarts. Storage is
best-effort: a failing backend is logged but never blocks login or
logout.
"""

from typing import Optional
import logging

from ims_dashboard.domain.session import Session
from ims_dashboard.domain.user import User
from ims_dashboard.errors import MalformedPersistedState, StorageError
from ims_dashboard.ports.storage_port import DurableStoragePort

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_KEY = "user_info"


class SessionStore:
    """
    Holds the current session and keeps durable storage in step with it.

    Example:
        storage = MemoryStorageAdapter()
        store = SessionStore(storage)

        store.login(User.from_username("admin"), "abc")
        assert SessionStore(storage).is_authenticated
    """

    def __init__(self, storage: DurableStoragePort):
        """
        Create the store and restore any persisted session.

        Args:
            storage: Durable key-value store for this browser context
        """
        self._storage = storage
        self._session = self._restore()

    @classmethod
    def restore(cls, storage: DurableStoragePort) -> "SessionStore":
        """Build a store from whatever the storage currently holds."""
        return cls(storage)

    def _restore(self) -> Session:
        try:
            token = self._storage.get(TOKEN_KEY)
            raw_user = self._storage.get(USER_KEY)
        except StorageError as e:
            logger.warning("Could not read persisted session: %s", e.message)
            return Session.empty()

        if not token or raw_user is None:
            return Session.empty()

        try:
            user = User.from_json(raw_user)
        except MalformedPersistedState as e:
            logger.warning(
                "Ignoring malformed persisted session: %s", e.message,
                extra={"error_code": e.code},
            )
            return Session.empty()

        return Session.authenticated(user, token)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def user(self) -> Optional[User]:
        return self._session.user

    @property
    def token(self) -> Optional[str]:
        return self._session.token

    @property
    def is_authenticated(self) -> bool:
        return self._session.is_authenticated

    def snapshot(self) -> Session:
        """Current state as an immutable value."""
        return self._session

    def login(self, user: User, token: str) -> None:
        """
        Persist and activate a session.

        Args:
            user: Signed-in user
            token: Token issued by the backend
        """
        session = Session.authenticated(user, token)

        try:
            self._storage.set(TOKEN_KEY, token)
            self._storage.set(USER_KEY, user.to_json())
        except StorageError as e:
            logger.warning(
                "Session not persisted, keeping it in memory only: %s", e.message,
                extra={"username": user.username, "error_code": e.code},
            )
            # Never leave a token behind without its user record.
            try:
                self._storage.remove(TOKEN_KEY)
            except StorageError as cleanup_error:
                logger.warning("Could not remove partial session: %s", cleanup_error.message)

        self._session = session
        logger.info("Session started", extra={"username": user.username})

    def logout(self) -> None:
        """
        Clear the session. Safe to call when already logged out.
        """
        username = self.user.username if self.user else None

        for key in (TOKEN_KEY, USER_KEY):
            try:
                self._storage.remove(key)
            except StorageError as e:
                logger.warning(
                    "Could not remove %s from storage: %s", key, e.message,
                    extra={"error_code": e.code},
                )

        self._session = Session.empty()
        if username:
            logger.info("Session ended", extra={"username": username})
