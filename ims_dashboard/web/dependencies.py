"""
Request-scoped dependencies - wire adapters, session store and guard per request.

Each browser gets a random client id cookie. Its session keys live under
that id inside the shared durable store, so the store built for a request
only ever sees that browser's session.
"""

import logging
import re
import uuid

from fastapi import Depends, Request

from ims_dashboard.adapters import FileStorageAdapter, MemoryStorageAdapter, RedisStorageAdapter
from ims_dashboard.config import Settings
from ims_dashboard.ports.auth_port import AuthenticationPort
from ims_dashboard.ports.resource_port import ResourcePort
from ims_dashboard.ports.storage_port import DurableStoragePort
from ims_dashboard.sdk.client import AuthClient
from ims_dashboard.sdk.guard import RouteGuard
from ims_dashboard.sdk.session_store import SessionStore

logger = logging.getLogger(__name__)

_CLIENT_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def build_storage(settings: Settings) -> DurableStoragePort:
    """Create the durable store selected by settings.storage_backend."""
    if settings.storage_backend == "memory":
        return MemoryStorageAdapter()
    if settings.storage_backend == "redis":
        return RedisStorageAdapter(
            redis_url=settings.redis_url,
            prefix=settings.storage_prefix,
            ttl=settings.session_ttl_seconds,
        )
    return FileStorageAdapter(settings.storage_path)


def is_valid_client_id(value) -> bool:
    return isinstance(value, str) and _CLIENT_ID_PATTERN.fullmatch(value) is not None


def new_client_id() -> str:
    return uuid.uuid4().hex


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_client_id(request: Request) -> str:
    return request.state.client_id


def get_session_store(request: Request, client_id: str = Depends(get_client_id)) -> SessionStore:
    """Restore the session of the requesting browser from durable storage."""
    storage: DurableStoragePort = request.app.state.storage
    return SessionStore.restore(storage.scoped(client_id))


def get_auth_port(request: Request) -> AuthenticationPort:
    return request.app.state.auth


def get_resource_port(request: Request) -> ResourcePort:
    return request.app.state.resources


def get_auth_client(
    store: SessionStore = Depends(get_session_store),
    auth: AuthenticationPort = Depends(get_auth_port),
) -> AuthClient:
    return AuthClient(auth=auth, store=store)


def get_route_guard(
    client: AuthClient = Depends(get_auth_client),
    settings: Settings = Depends(get_settings_dep),
) -> RouteGuard:
    if settings.validate_token_on_entry:
        return RouteGuard(validate=client.validate_session)
    return RouteGuard()
