"""
HTTP Authentication Adapter - Implements AuthenticationPort over the inventory REST API.
"""

from typing import Optional
import logging

import httpx

from ims_dashboard.domain.session import Credentials, LoginResult
from ims_dashboard.errors import TransportFailure
from ims_dashboard.ports.auth_port import AuthenticationPort

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"
VALIDATE_PATH = "/api/v1/auth/validate"


class HttpAuthAdapter(AuthenticationPort):
    """
    httpx-based authentication adapter.

    Stateless apart from the connection pool: it never reads or writes
    session storage. Callers feed successful results into the SessionStore.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize HTTP auth adapter.

        Args:
            base_url: Root URL of the inventory API
            timeout: Request timeout in seconds
            client: Preconfigured httpx client (overrides base_url/timeout)
            transport: Custom transport, e.g. httpx.MockTransport in tests
        """
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    def login(self, credentials: Credentials) -> LoginResult:
        """
        POST the credentials to the login endpoint.

        Client errors that carry a JSON body (e.g. 401 with a message) are
        returned as a token-less result so the caller can show the
        server's reason.

        Args:
            credentials: Username and password

        Returns:
            Parsed login result

        Raises:
            TransportFailure: On network errors, 5xx responses, or bodies
                that are not a JSON object
        """
        try:
            response = self._client.post(LOGIN_PATH, json=credentials.to_dict())
        except httpx.HTTPError as e:
            logger.warning("Login request failed: %s", e.__class__.__name__)
            raise TransportFailure(f"Login request failed: {e}")

        if response.status_code >= 500:
            raise TransportFailure(f"Login endpoint returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            raise TransportFailure(
                f"Login endpoint returned a non-JSON body (HTTP {response.status_code})"
            )

        if not isinstance(data, dict):
            raise TransportFailure("Login endpoint returned an unexpected payload")

        result = LoginResult.from_dict(data)
        if not result.succeeded:
            logger.info(
                "Login rejected by backend (HTTP %s)", response.status_code,
                extra={"username": credentials.username},
            )
        return result

    def validate_token(self, token: str) -> bool:
        """
        POST the token to the validation endpoint.

        Args:
            token: Token to check

        Returns:
            True only when the backend answers with a JSON true
        """
        if not token:
            return False

        try:
            response = self._client.post(VALIDATE_PATH, params={"token": token})
            response.raise_for_status()
            return response.json() is True
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Token validation failed closed: %s", e.__class__.__name__)
            return False

    def close(self):
        """Close the underlying connection pool."""
        self._client.close()
