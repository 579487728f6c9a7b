"""
Route Guard - Per-render access check for protected pages.
"""

from dataclasses import dataclass
from typing import Callable, Optional, TypeVar
from enum import Enum
import logging

from ims_dashboard.sdk.session_store import SessionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

LOGIN_PATH = "/login"
SESSION_EXPIRED_NOTICE = "session_expired"


class GuardState(Enum):
    """Guard states. CHECKING is transient; the other two are terminal."""
    CHECKING = "checking"
    ALLOWED = "allowed"
    REDIRECTING = "redirecting"


@dataclass(frozen=True)
class GuardDecision:
    """Outcome of one guard evaluation."""
    state: GuardState
    redirect_to: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.state == GuardState.ALLOWED


class RouteGuard:
    """
    Decides whether a protected page may render.

    A guard is built for each request and only remembers the state of its
    current evaluation: CHECKING while the session is inspected, then
    ALLOWED or REDIRECTING. Once it decides to redirect, that decision is
    final for the render.
    """

    def __init__(
        self,
        login_path: str = LOGIN_PATH,
        validate: Optional[Callable[[], bool]] = None,
    ):
        """
        Args:
            login_path: Where unauthenticated visitors are sent
            validate: Optional token check run for authenticated sessions;
                returning False logs the visitor out and redirects
        """
        self._login_path = login_path
        self._validate = validate
        self._state = GuardState.CHECKING

    @property
    def login_path(self) -> str:
        return self._login_path

    @property
    def state(self) -> GuardState:
        """CHECKING until evaluate() resolves, then the terminal state."""
        return self._state

    def evaluate(self, store: SessionStore) -> GuardDecision:
        """
        Resolve the guard for the current session.

        Args:
            store: Session store of the requesting browser context

        Returns:
            ALLOWED, or REDIRECTING with the target URL
        """
        self._state = GuardState.CHECKING

        if not store.is_authenticated:
            decision = GuardDecision(GuardState.REDIRECTING, self._login_path)
        elif self._validate is not None and not self._validate():
            decision = GuardDecision(GuardState.REDIRECTING, f"{self._login_path}?notice={SESSION_EXPIRED_NOTICE}")
        else:
            decision = GuardDecision(GuardState.ALLOWED)

        self._state = decision.state
        return decision

    def render(
        self,
        store: SessionStore,
        children: Callable[[], T],
        navigate: Callable[[str], R],
    ):
        """
        Render protected content or navigate away, never both.

        Args:
            store: Session store
            children: Produces the protected content
            navigate: Issues the redirect; called at most once

        Returns:
            Result of children() when allowed, else result of navigate()
        """
        decision = self.evaluate(store)
        if decision.allowed:
            return children()

        logger.debug("Redirecting visitor to %s", decision.redirect_to)
        return navigate(decision.redirect_to)
