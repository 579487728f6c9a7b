"""
SDK - Session lifecycle services used by the web pages.
"""

from ims_dashboard.sdk.session_store import SessionStore
from ims_dashboard.sdk.client import AuthClient, LoginOutcome
from ims_dashboard.sdk.guard import RouteGuard, GuardState, GuardDecision

__all__ = [
    "SessionStore",
    "AuthClient",
    "LoginOutcome",
    "RouteGuard",
    "GuardState",
    "GuardDecision",
]
