"""
Shared fixtures - fresh storage and stores per test, fake auth port, fake backend.
"""

import json
from typing import Dict, Any, List, Optional

import httpx
import pytest

from ims_dashboard.adapters import MemoryStorageAdapter
from ims_dashboard.domain.session import Credentials, LoginResult
from ims_dashboard.errors import StorageError
from ims_dashboard.ports.auth_port import AuthenticationPort
from ims_dashboard.ports.storage_port import DurableStoragePort
from ims_dashboard.sdk.session_store import SessionStore

API_BASE_URL = "http://api.test"


class FakeAuth(AuthenticationPort):
    """Scriptable auth port recording its calls."""

    def __init__(self, result: Optional[LoginResult] = None, error: Optional[Exception] = None, valid: bool = True):
        self.result = result or LoginResult(token="abc", username="admin")
        self.error = error
        self.valid = valid
        self.login_calls: List[Credentials] = []
        self.validate_calls: List[str] = []

    def login(self, credentials: Credentials) -> LoginResult:
        self.login_calls.append(credentials)
        if self.error:
            raise self.error
        return self.result

    def validate_token(self, token: str) -> bool:
        self.validate_calls.append(token)
        return self.valid


class FailingStorage(DurableStoragePort):
    """Storage whose every operation fails."""

    def get(self, key):
        raise StorageError("backend down")

    def set(self, key, value):
        raise StorageError("backend down")

    def remove(self, key):
        raise StorageError("backend down")


class FakeBackend:
    """
    In-process stand-in for the inventory REST API, served through
    httpx.MockTransport.
    """

    def __init__(self):
        self.accounts = {"admin": "admin123"}
        self.valid_tokens = {"abc"}
        self.down = False
        self.listings: Dict[str, Any] = {
            "/api/v1/products": {
                "items": [
                    {"id": 1, "name": "iPhone 15", "price": 25000000, "quantityInStock": 10},
                    {"id": 2, "name": "Galaxy S24", "price": 21000000, "quantityInStock": 5},
                ],
                "page": 0,
                "size": 100,
                "totalElements": 2,
                "totalPages": 1,
            },
            "/api/v1/customers": [
                {"id": 7, "name": "Nguyen Van A", "contactInfo": "a@example.com"},
            ],
            "/api/v1/orders": [
                {"id": 11, "customerId": 7, "orderDate": "2024-01-13", "totalAmount": 2100000},
                {"id": 12, "customerId": 7, "orderDate": "2024-01-15", "totalAmount": 1250000,
                 "customer": {"id": 7, "name": "Nguyen Van A"}},
            ],
            "/api/v1/suppliers": [],
            "/api/v1/stock-entries": [],
            "/api/v1/administrators": [
                {"id": 1, "username": "admin", "email": "admin@example.com", "fullName": "Admin"},
            ],
        }
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)

        path = request.url.path
        if path == "/auth/login":
            body = json.loads(request.content)
            if self.accounts.get(body.get("username")) == body.get("password"):
                return httpx.Response(200, json={
                    "token": "abc",
                    "username": body["username"],
                    "authorities": [{"authority": "ROLE_ADMIN"}],
                })
            return httpx.Response(401, json={"message": "bad credentials"})

        if path == "/api/v1/auth/validate":
            return httpx.Response(200, json=request.url.params.get("token") in self.valid_tokens)

        if path in self.listings:
            auth_header = request.headers.get("Authorization", "")
            if auth_header.removeprefix("Bearer ") not in self.valid_tokens:
                return httpx.Response(401, json={"error": "unauthorized"})
            return httpx.Response(200, json=self.listings[path])

        return httpx.Response(404, json={"error": "not found"})

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def storage():
    return MemoryStorageAdapter()


@pytest.fixture
def store(storage):
    return SessionStore(storage)


@pytest.fixture
def fake_auth():
    return FakeAuth()


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def transport(backend):
    return httpx.MockTransport(backend)


@pytest.fixture
def make_auth():
    """Factory for FakeAuth with custom results."""
    return FakeAuth


@pytest.fixture
def failing_storage():
    return FailingStorage()
