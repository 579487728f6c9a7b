"""
Dashboard web application - FastAPI app factory.

Adapters are created from settings unless given explicitly, which is how
tests substitute in-memory storage and mocked HTTP transports.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status

from ims_dashboard import __version__
from ims_dashboard.adapters import HttpAuthAdapter, HttpResourceAdapter
from ims_dashboard.config import Settings, get_settings
from ims_dashboard.errors import DashboardError
from ims_dashboard.observability import setup_logging
from ims_dashboard.ports.auth_port import AuthenticationPort
from ims_dashboard.ports.resource_port import ResourcePort
from ims_dashboard.ports.storage_port import DurableStoragePort
from ims_dashboard.web import routes
from ims_dashboard.web.dependencies import build_storage, is_valid_client_id, new_client_id

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[DurableStoragePort] = None,
    auth: Optional[AuthenticationPort] = None,
    resources: Optional[ResourcePort] = None,
) -> FastAPI:
    """
    Build the dashboard application.

    Args:
        settings: Settings (defaults to get_settings())
        storage: Durable store shared by all browser clients
        auth: Authentication adapter
        resources: Resource adapter

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    owned = []

    if storage is None:
        storage = build_storage(settings)
    if auth is None:
        auth = HttpAuthAdapter(settings.api_base_url, timeout=settings.api_timeout_seconds)
        owned.append(auth)
    if resources is None:
        resources = HttpResourceAdapter(settings.api_base_url, timeout=settings.api_timeout_seconds)
        owned.append(resources)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info("IMS dashboard started (API at %s, %s storage)", settings.api_base_url, settings.storage_backend)
        yield
        for adapter in owned:
            adapter.close()
        logger.info("IMS dashboard shutting down")

    app = FastAPI(title="IMS Dashboard", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.storage = storage
    app.state.auth = auth
    app.state.resources = resources

    @app.middleware("http")
    async def assign_client_id(request: Request, call_next):
        """Give every browser a stable client id cookie."""
        client_id = request.cookies.get(settings.client_cookie_name)
        is_new = not is_valid_client_id(client_id)
        if is_new:
            client_id = new_client_id()
        request.state.client_id = client_id

        response = await call_next(request)

        if is_new:
            response.set_cookie(
                settings.client_cookie_name,
                client_id,
                max_age=settings.client_cookie_max_age,
                httponly=True,
                samesite="lax",
                secure=settings.cookie_secure,
            )
        return response

    app.include_router(routes.router)

    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError):
        logger.error(
            "DashboardError: %s", exc.message,
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return routes.templates.TemplateResponse(
            request,
            "error.html",
            {"user": None, "menu": [], "message": exc.message},
            status_code=exc.http_status,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
            extra={"path": request.url.path},
        )
        return routes.templates.TemplateResponse(
            request,
            "error.html",
            {"user": None, "menu": [], "message": "An unexpected error occurred"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return app
