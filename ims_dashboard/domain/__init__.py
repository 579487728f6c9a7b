"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from ims_dashboard.domain.user import User
from ims_dashboard.domain.session import Session, SessionStatus, Credentials, LoginResult
from ims_dashboard.domain.resource import Resource, Page

__all__ = [
    "User",
    "Session",
    "SessionStatus",
    "Credentials",
    "LoginResult",
    "Resource",
    "Page",
]
