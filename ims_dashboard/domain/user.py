"""
User Domain Model - The signed-in administrator as shown in the dashboard.
"""

from dataclasses import dataclass
from typing import Dict, Any
import json

from ims_dashboard.errors import MalformedPersistedState

MOCK_EMAIL_DOMAIN = "admin.com"


@dataclass(frozen=True)
class User:
    """
    User entity - identity of the administrator owning the session.

    Domain rules:
    - username is never empty
    - the serialized form uses the backend's camelCase field names
    """
    username: str
    email: str
    full_name: str

    @classmethod
    def from_username(cls, username: str) -> "User":
        """
        Derive a user from the bare username the login endpoint returns.

        The login endpoint does not return profile fields, so email and
        full name are filled in from the username.
        """
        return cls(
            username=username,
            email=f"{username}@{MOCK_EMAIL_DOMAIN}",
            full_name=username,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "username": self.username,
            "email": self.email,
            "fullName": self.full_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """Deserialize from dict."""
        return cls(
            username=data["username"],
            email=data.get("email", ""),
            full_name=data.get("fullName") or data["username"],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> "User":
        """
        Parse a persisted user record.

        Args:
            raw: JSON text as written by to_json()

        Returns:
            User instance

        Raises:
            MalformedPersistedState: If the record is not a JSON object
                with a non-empty string username
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedPersistedState(f"user record is not valid JSON: {e}")

        if not isinstance(data, dict):
            raise MalformedPersistedState("user record is not a JSON object")

        username = data.get("username")
        if not isinstance(username, str) or not username:
            raise MalformedPersistedState("user record has no username")

        for key in ("email", "fullName"):
            if key in data and not isinstance(data[key], str):
                raise MalformedPersistedState(f"user record field {key!r} is not a string")

        return cls.from_dict(data)
