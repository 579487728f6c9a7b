"""
Unit tests for RouteGuard.
"""

from ims_dashboard.domain.user import User
from ims_dashboard.sdk.guard import RouteGuard, GuardState, LOGIN_PATH


class Recorder:
    """Counts calls to the render and navigate callbacks."""

    def __init__(self):
        self.rendered = 0
        self.navigations = []

    def children(self):
        self.rendered += 1
        return "protected content"

    def navigate(self, url):
        self.navigations.append(url)
        return f"redirect:{url}"


def test_guard_redirects_anonymous(store):
    """Test unauthenticated render navigates once and hides content."""
    recorder = Recorder()

    result = RouteGuard().render(store, recorder.children, recorder.navigate)

    assert result == f"redirect:{LOGIN_PATH}"
    assert recorder.navigations == [LOGIN_PATH]
    assert recorder.rendered == 0


def test_guard_passes_authenticated(store):
    """Test authenticated render shows children without navigating."""
    store.login(User.from_username("admin"), "abc")
    recorder = Recorder()

    result = RouteGuard().render(store, recorder.children, recorder.navigate)

    assert result == "protected content"
    assert recorder.rendered == 1
    assert recorder.navigations == []


def test_guard_evaluate(store):
    """Test evaluate resolves to a terminal state."""
    guard = RouteGuard()

    decision = guard.evaluate(store)
    assert decision.state == GuardState.REDIRECTING
    assert decision.redirect_to == LOGIN_PATH
    assert not decision.allowed

    store.login(User.from_username("admin"), "abc")
    decision = guard.evaluate(store)
    assert decision.state == GuardState.ALLOWED
    assert decision.redirect_to is None


def test_guard_reevaluates_each_render(store):
    """Test the guard follows the session between renders."""
    guard = RouteGuard()
    recorder = Recorder()

    guard.render(store, recorder.children, recorder.navigate)
    store.login(User.from_username("admin"), "abc")
    guard.render(store, recorder.children, recorder.navigate)

    assert recorder.navigations == [LOGIN_PATH]
    assert recorder.rendered == 1


def test_guard_failed_validation_redirects_with_notice(store):
    """Test a session failing validation is sent to login as expired."""
    store.login(User.from_username("admin"), "abc")
    recorder = Recorder()

    guard = RouteGuard(validate=lambda: False)
    guard.render(store, recorder.children, recorder.navigate)

    assert recorder.navigations == ["/login?notice=session_expired"]
    assert recorder.rendered == 0


def test_guard_skips_validation_for_anonymous(store):
    """Test validation only runs for authenticated sessions."""
    calls = []

    def validate():
        calls.append(1)
        return True

    RouteGuard(validate=validate).evaluate(store)
    assert calls == []


def test_guard_is_checking_while_validating(store):
    """Test the guard reports CHECKING until the token check resolves."""
    store.login(User.from_username("admin"), "abc")
    seen = []

    def validate():
        seen.append(guard.state)
        return False

    guard = RouteGuard(validate=validate)
    assert guard.state == GuardState.CHECKING

    decision = guard.evaluate(store)

    assert seen == [GuardState.CHECKING]
    assert decision.state == GuardState.REDIRECTING
    assert guard.state == GuardState.REDIRECTING
