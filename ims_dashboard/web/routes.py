"""
Routes - login, logout and the guarded dashboard pages.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from ims_dashboard.domain.resource import Resource, Page
from ims_dashboard.domain.session import Credentials
from ims_dashboard.errors import AuthenticationFailure, TransportFailure
from ims_dashboard.ports.resource_port import ResourcePort
from ims_dashboard.sdk.client import AuthClient
from ims_dashboard.sdk.guard import RouteGuard, SESSION_EXPIRED_NOTICE
from ims_dashboard.sdk.session_store import SessionStore
from ims_dashboard.sdk.stats import collect_stats, format_amount
from ims_dashboard.web.dependencies import (
    get_auth_client,
    get_client_id,
    get_resource_port,
    get_route_guard,
    get_session_store,
)

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()

NOTICES = {
    "login_success": ("success", "Login successful!"),
    "logged_out": ("info", "You have been logged out."),
    SESSION_EXPIRED_NOTICE: ("warning", "Your session has expired. Please log in again."),
}

AMOUNT_FIELDS = {"price", "totalAmount"}


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def resolve_notice(key: Optional[str]) -> Optional[Dict[str, str]]:
    if key not in NOTICES:
        return None
    level, text = NOTICES[key]
    return {"level": level, "text": text}


def menu_items(active: str) -> List[Dict[str, Any]]:
    items = [{"key": "dashboard", "label": "Overview", "href": "/dashboard", "active": active == "dashboard"}]
    for resource in Resource:
        items.append({
            "key": resource.value,
            "label": resource.title,
            "href": f"/dashboard/{resource.value}",
            "active": active == resource.value,
        })
    return items


def format_cell(field: str, value: Any) -> str:
    if value is None:
        return "-"
    if field in AMOUNT_FIELDS:
        return format_amount(value)
    if isinstance(value, dict):
        return str(value.get("name") or value.get("id") or "-")
    return str(value)


def table_rows(resource: Resource, page: Page) -> List[List[str]]:
    return [
        [format_cell(field, item.get(field)) for field, _ in resource.columns]
        for item in page.items
    ]


def end_session(client: AuthClient, client_id: str) -> RedirectResponse:
    """Drop a session the backend no longer accepts."""
    logger.info("Backend rejected session token, logging out", extra={"client_id": client_id})
    client.logout()
    return redirect(f"/login?notice={SESSION_EXPIRED_NOTICE}")


@router.get("/health")
def health():
    return {"status": "healthy"}


@router.get("/")
def index(store: SessionStore = Depends(get_session_store)):
    """Send visitors to the dashboard or the login page."""
    if store.is_authenticated:
        return redirect("/dashboard")
    return redirect("/login")


@router.get("/login")
def login_page(request: Request, notice: Optional[str] = None):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"notice": resolve_notice(notice), "error": None, "username": ""},
    )


@router.post("/login")
def login_submit(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    client: AuthClient = Depends(get_auth_client),
    client_id: str = Depends(get_client_id),
):
    """
    Handle the login form.

    Success redirects to the dashboard. Failure re-renders the form with
    the reason and the entered username; the session is left untouched.
    """
    outcome = client.sign_in(Credentials(username=username, password=password))

    if outcome.success:
        logger.info("Login succeeded", extra={"client_id": client_id, "username": username.strip()})
        return redirect("/dashboard?notice=login_success")

    logger.info("Login failed: %s", outcome.message, extra={"client_id": client_id})
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "notice": None,
            "error": outcome.message,
            "errors": outcome.errors,
            "username": username,
        },
    )


@router.post("/logout")
def logout(client: AuthClient = Depends(get_auth_client)):
    client.logout()
    return redirect("/login?notice=logged_out")


@router.get("/dashboard")
def dashboard(
    request: Request,
    notice: Optional[str] = None,
    store: SessionStore = Depends(get_session_store),
    client: AuthClient = Depends(get_auth_client),
    guard: RouteGuard = Depends(get_route_guard),
    resources: ResourcePort = Depends(get_resource_port),
    client_id: str = Depends(get_client_id),
):
    def render():
        try:
            stats = collect_stats(resources, store.token)
        except AuthenticationFailure:
            return end_session(client, client_id)

        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "user": store.user,
                "menu": menu_items("dashboard"),
                "notice": resolve_notice(notice),
                "stats": stats,
            },
        )

    return guard.render(store, render, redirect)


@router.get("/dashboard/{slug}")
def resource_page(
    request: Request,
    slug: str,
    store: SessionStore = Depends(get_session_store),
    client: AuthClient = Depends(get_auth_client),
    guard: RouteGuard = Depends(get_route_guard),
    resources: ResourcePort = Depends(get_resource_port),
    client_id: str = Depends(get_client_id),
):
    def render():
        resource = Resource.from_slug(slug)
        if resource is None:
            return templates.TemplateResponse(
                request,
                "error.html",
                {"user": store.user, "menu": menu_items(""), "message": f"Unknown page: {slug}"},
                status_code=status.HTTP_404_NOT_FOUND,
            )

        error = None
        page = Page()
        try:
            page = resources.list(resource, store.token)
        except AuthenticationFailure:
            return end_session(client, client_id)
        except TransportFailure as e:
            logger.warning(
                "Listing failed: %s", e.message,
                extra={"client_id": client_id, "resource": resource.value, "error_code": e.code},
            )
            error = e.message

        return templates.TemplateResponse(
            request,
            "resource.html",
            {
                "user": store.user,
                "menu": menu_items(resource.value),
                "notice": None,
                "error": error,
                "resource": resource,
                "headings": [heading for _, heading in resource.columns],
                "rows": table_rows(resource, page),
                "total": page.total,
            },
        )

    return guard.render(store, render, redirect)
