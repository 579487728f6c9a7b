"""
Errors - Typed exceptions for the dashboard's failure modes.

Every error carries a code and an HTTP status so the web layer can render
or log it uniformly. User-facing messages never include tokens or
passwords.
"""

from typing import Dict, Any, List, Optional


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

    code = "DASHBOARD_ERROR"
    http_status = 500

    def __init__(self, message: str, code: Optional[str] = None, http_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            },
        }


class AuthenticationFailure(DashboardError):
    """The remote API refused the credentials or the token."""

    code = "AUTHENTICATION_FAILURE"
    http_status = 401


class TransportFailure(DashboardError):
    """Network or server error while talking to the remote API."""

    code = "TRANSPORT_FAILURE"
    http_status = 502


class MalformedPersistedState(DashboardError):
    """A persisted session record could not be parsed."""

    code = "MALFORMED_PERSISTED_STATE"
    http_status = 500


class StorageError(DashboardError):
    """The durable key-value store failed."""

    code = "STORAGE_ERROR"
    http_status = 503


class CredentialsInvalid(DashboardError):
    """Login form input failed validation."""

    code = "CREDENTIALS_INVALID"
    http_status = 400

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors

    def to_response(self) -> Dict[str, Any]:
        response = super().to_response()
        response["error"]["details"] = list(self.errors)
        return response
