"""
Token inspection helpers.

The backend issues JWTs. The dashboard cannot verify their signature (it
does not hold the key) but can read the expiry claim to drop a stale
session before the backend rejects it.
"""

from datetime import datetime, timezone
from typing import Optional

import jwt


def token_expiry(token: str) -> Optional[datetime]:
    """
    Read the exp claim of a JWT without verifying it.

    Args:
        token: Token string

    Returns:
        Expiry as an aware UTC datetime, or None for opaque tokens and
        tokens without a numeric exp claim
    """
    try:
        claims = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.InvalidTokenError:
        return None

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    return datetime.fromtimestamp(exp, tz=timezone.utc)


def is_expired(token: str, now: Optional[datetime] = None) -> bool:
    """
    Check whether a JWT's exp claim lies in the past.

    Opaque tokens are never considered expired here; the backend's
    validation endpoint is the authority for those.
    """
    expiry = token_expiry(token)
    if expiry is None:
        return False
    return (now or datetime.now(timezone.utc)) >= expiry
