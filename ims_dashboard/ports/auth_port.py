"""
Authentication Port - Interface to the remote authentication API.

Implementations:
- HttpAuthAdapter: httpx client for the inventory backend
"""

from abc import ABC, abstractmethod
from ims_dashboard.domain.session import Credentials, LoginResult


class AuthenticationPort(ABC):
    """Port: Exchange credentials for tokens and check tokens. Stateless."""

    @abstractmethod
    def login(self, credentials: Credentials) -> LoginResult:
        """
        Send credentials to the login endpoint.

        Args:
            credentials: Username and password

        Returns:
            Raw login result; a missing token means the login failed

        Raises:
            TransportFailure: If the endpoint could not be reached or
                answered with something that is not a login result
        """
        pass

    @abstractmethod
    def validate_token(self, token: str) -> bool:
        """
        Ask the backend whether a token is currently valid.

        Args:
            token: Token to check

        Returns:
            True if valid; False if invalid or on any error (fails closed)
        """
        pass
