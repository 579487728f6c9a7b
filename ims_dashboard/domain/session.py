"""
Session Domain Model - Authentication state of one browser context.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
from enum import Enum

from ims_dashboard.domain.user import User
from ims_dashboard.errors import CredentialsInvalid

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class SessionStatus(Enum):
    """Session lifecycle states."""
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class Session:
    """
    Session value - immutable snapshot of the authentication state.

    Domain rules:
    - is_authenticated is True iff both user and token are set
    - user and token are set and cleared together
    """
    user: Optional[User] = None
    token: Optional[str] = None

    @classmethod
    def empty(cls) -> "Session":
        return cls()

    @classmethod
    def authenticated(cls, user: User, token: str) -> "Session":
        """
        Build an authenticated session.

        Raises:
            ValueError: If user or token is missing
        """
        if user is None or not token:
            raise ValueError("an authenticated session needs both a user and a token")
        return cls(user=user, token=token)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and self.token is not None

    @property
    def status(self) -> SessionStatus:
        if self.is_authenticated:
            return SessionStatus.AUTHENTICATED
        return SessionStatus.ANONYMOUS

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (for display and debugging, token excluded)."""
        return {
            "user": self.user.to_dict() if self.user else None,
            "is_authenticated": self.is_authenticated,
            "status": self.status.value,
        }


@dataclass
class Credentials:
    """
    Login form input. Transient, never persisted or logged.
    """
    username: str
    password: str = field(repr=False)

    def validation_errors(self) -> List[str]:
        """Return the form rules this input breaks, in display order."""
        errors = []
        username = (self.username or "").strip()
        if not username:
            errors.append("Please enter your username!")
        elif len(username) < MIN_USERNAME_LENGTH:
            errors.append(f"Username must be at least {MIN_USERNAME_LENGTH} characters!")

        if not self.password:
            errors.append("Please enter your password!")
        elif len(self.password) < MIN_PASSWORD_LENGTH:
            errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters!")
        return errors

    def validate(self):
        """
        Raises:
            CredentialsInvalid: If any form rule is broken
        """
        errors = self.validation_errors()
        if errors:
            raise CredentialsInvalid(errors)

    def to_dict(self) -> Dict[str, Any]:
        """Request body for the login endpoint."""
        return {"username": self.username.strip(), "password": self.password}


@dataclass
class LoginResult:
    """
    Login endpoint response. A present token signals success.
    """
    token: Optional[str] = None
    username: Optional[str] = None
    authorities: List[str] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return bool(self.token)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoginResult":
        """
        Deserialize from the endpoint's JSON body.

        The backend reports some failures under "error" instead of
        "message"; both are accepted.
        """
        authorities = []
        for item in data.get("authorities") or []:
            if isinstance(item, dict) and "authority" in item:
                authorities.append(str(item["authority"]))
            elif isinstance(item, str):
                authorities.append(item)

        token = data.get("token")
        message = data.get("message") or data.get("error")
        return cls(
            token=token if isinstance(token, str) and token else None,
            username=data.get("username"),
            authorities=authorities,
            message=str(message) if message else None,
        )
