"""
HTTP Resource Adapter - Implements ResourcePort over the inventory REST API.
"""

from typing import Optional
import logging

import httpx

from ims_dashboard.domain.resource import Resource, Page
from ims_dashboard.errors import AuthenticationFailure, TransportFailure
from ims_dashboard.ports.resource_port import ResourcePort

logger = logging.getLogger(__name__)


class HttpResourceAdapter(ResourcePort):
    """
    httpx-based resource reader.

    Sends the session token as a bearer credential and normalizes the
    backend's list and paged responses into Page objects.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        page_size: int = 100,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize HTTP resource adapter.

        Args:
            base_url: Root URL of the inventory API
            timeout: Request timeout in seconds
            page_size: Records requested from paged endpoints
            client: Preconfigured httpx client (overrides base_url/timeout)
            transport: Custom transport, e.g. httpx.MockTransport in tests
        """
        self._page_size = page_size
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    def list(self, resource: Resource, token: str) -> Page:
        """
        GET a resource listing.

        Args:
            resource: Resource to list
            token: Session token

        Returns:
            Page of records

        Raises:
            AuthenticationFailure: On 401/403
            TransportFailure: On network errors, other error statuses, or
                payloads that are not a listing
        """
        try:
            response = self._client.get(
                resource.api_path,
                params={"page": 0, "size": self._page_size},
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Listing request failed: %s", e.__class__.__name__,
                extra={"resource": resource.value},
            )
            raise TransportFailure(f"Could not load {resource.title.lower()}: {e}")

        if response.status_code in (401, 403):
            raise AuthenticationFailure(
                "Session is no longer accepted by the server",
                http_status=response.status_code,
            )

        if response.is_error:
            raise TransportFailure(
                f"Could not load {resource.title.lower()} (HTTP {response.status_code})"
            )

        try:
            return Page.from_json(response.json())
        except ValueError:
            raise TransportFailure(f"Unexpected response while loading {resource.title.lower()}")

    def close(self):
        """Close the underlying connection pool."""
        self._client.close()
