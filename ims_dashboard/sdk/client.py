"""
Auth Client - High-level façade over the auth API and the session store.

Pages call this instead of wiring the auth adapter and the store together
themselves.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
import logging

from ims_dashboard.domain.session import Credentials
from ims_dashboard.domain.user import User
from ims_dashboard.errors import CredentialsInvalid, TransportFailure
from ims_dashboard.ports.auth_port import AuthenticationPort
from ims_dashboard.sdk.session_store import SessionStore
from ims_dashboard.sdk.tokens import is_expired

logger = logging.getLogger(__name__)

LOGIN_SUCCEEDED = "Login successful!"
LOGIN_FAILED = "Login failed"
LOGIN_TRANSPORT_ERROR = "An error occurred while logging in"


@dataclass
class LoginOutcome:
    """Result of a login attempt, ready to show to the user."""
    success: bool
    message: str
    errors: List[str] = field(default_factory=list)


class AuthClient:
    """
    Combines the authentication API with the session store.

    Example:
        client = AuthClient(
            auth=HttpAuthAdapter(base_url="http://localhost:8080"),
            store=SessionStore(FileStorageAdapter(".ims_storage.json")),
        )

        outcome = client.sign_in(Credentials("admin", "admin123"))
        if outcome.success:
            print(client.get_user_info())

        client.logout()
    """

    def __init__(self, auth: AuthenticationPort, store: SessionStore):
        """
        Initialize auth client.

        Args:
            auth: Authentication adapter
            store: Session store of the current browser context
        """
        self._auth = auth
        self._store = store

    @property
    def store(self) -> SessionStore:
        return self._store

    def sign_in(self, credentials: Credentials) -> LoginOutcome:
        """
        Log in with username and password.

        The store is only touched after the backend has answered with a
        token; every failure leaves the previous session as it was.

        Args:
            credentials: Form input

        Returns:
            Outcome with a user-facing message
        """
        try:
            credentials.validate()
        except CredentialsInvalid as e:
            return LoginOutcome(success=False, message=e.errors[0], errors=e.errors)

        try:
            result = self._auth.login(credentials)
        except TransportFailure as e:
            logger.error(
                "Login transport failure: %s", e.message,
                extra={"username": credentials.username, "error_code": e.code},
            )
            return LoginOutcome(success=False, message=LOGIN_TRANSPORT_ERROR)

        if not result.succeeded:
            return LoginOutcome(success=False, message=result.message or LOGIN_FAILED)

        user = User.from_username(result.username or credentials.username.strip())
        self._store.login(user, result.token)
        return LoginOutcome(success=True, message=LOGIN_SUCCEEDED)

    def logout(self) -> None:
        """Log out the current session (idempotent)."""
        self._store.logout()

    def validate_session(self, remote: bool = True) -> bool:
        """
        Check that the stored token is still usable.

        An expired JWT is detected locally; otherwise the backend's
        validation endpoint decides. A session that fails the check is
        logged out.

        Args:
            remote: Also ask the backend (fails closed on errors)

        Returns:
            True if the session is authenticated and still valid
        """
        token = self._store.token
        if not self._store.is_authenticated or token is None:
            return False

        if is_expired(token):
            logger.info("Stored token has expired")
            self._store.logout()
            return False

        if remote and not self._auth.validate_token(token):
            logger.info("Backend rejected stored token")
            self._store.logout()
            return False

        return True

    def get_token(self) -> Optional[str]:
        return self._store.token

    def get_user_info(self) -> Optional[Dict[str, Any]]:
        user = self._store.user
        return user.to_dict() if user else None

    def is_authenticated(self) -> bool:
        return self._store.is_authenticated
