"""
IMS Dashboard - Admin dashboard for the inventory management API.

Hexagonal architecture: the session lifecycle (login, persistence, guarded
pages, logout) is independent of the storage backend and of the web layer.

Usage:
    from ims_dashboard import AuthClient, SessionStore, Credentials
    from ims_dashboard.adapters import HttpAuthAdapter, FileStorageAdapter

    store = SessionStore(FileStorageAdapter(".ims_storage.json"))
    client = AuthClient(auth=HttpAuthAdapter("http://localhost:8080"), store=store)

    # Log in
    outcome = client.sign_in(Credentials("admin", "admin123"))

    # Serve the dashboard
    #   python -m ims_dashboard
"""

__version__ = "0.1.0"

from ims_dashboard.sdk.client import AuthClient
from ims_dashboard.sdk.session_store import SessionStore
from ims_dashboard.sdk.guard import RouteGuard
from ims_dashboard.domain.user import User
from ims_dashboard.domain.session import Session, Credentials, LoginResult

__all__ = [
    "AuthClient",
    "SessionStore",
    "RouteGuard",
    "User",
    "Session",
    "Credentials",
    "LoginResult",
]
