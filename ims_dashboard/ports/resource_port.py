"""
Resource Port - Interface for reading inventory resources.

Implementations:
- HttpResourceAdapter: httpx client for the inventory backend
"""

from abc import ABC, abstractmethod
from ims_dashboard.domain.resource import Resource, Page


class ResourcePort(ABC):
    """Port: List inventory resources on behalf of a signed-in user."""

    @abstractmethod
    def list(self, resource: Resource, token: str) -> Page:
        """
        Fetch a resource listing.

        Args:
            resource: Resource to list
            token: Session token sent as bearer credential

        Returns:
            Page of records

        Raises:
            AuthenticationFailure: If the backend rejects the token
            TransportFailure: On network errors or unexpected responses
        """
        pass
