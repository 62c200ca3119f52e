"""Shared test fixtures."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest
from fastapi.testclient import TestClient

from caloriv_admin.adapters.backend_client import HttpxBackendClient
from caloriv_admin.api.app import create_app
from caloriv_admin.config import Settings
from caloriv_admin.containers import AppContainer
from caloriv_admin.services.admin_api import AdminApi
from caloriv_admin.services.approvals import ApprovalService
from caloriv_admin.services.auth import AuthService, SessionStore

BASE_URL = "http://backend.test/api"
ADMIN_KEY = "admin-key"
ADMIN_EMAIL = "admin@caloriv.app"
ADMIN_PASSWORD = "s3cret"


@dataclass
class InMemorySessionStore(SessionStore):
    """In-memory session store for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: httpx.Headers
    params: dict[str, str]
    body: object | None


@dataclass
class FakeBackend:
    """Canned backend responses keyed by method and path; records every call."""

    responses: dict[tuple[str, str], tuple[int, object]] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)
    failures: set[tuple[str, str]] = field(default_factory=set)

    def respond(
        self, method: str, path: str, payload: object, status_code: int = 200
    ) -> None:
        self.responses[(method, path)] = (status_code, payload)

    def fail_transport(self, method: str, path: str) -> None:
        self.failures.add((method, path))

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/api")
        body = json.loads(request.content.decode()) if request.content else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                headers=request.headers,
                params=dict(request.url.params),
                body=body,
            )
        )
        if (request.method, path) in self.failures:
            raise httpx.ConnectError("connection refused", request=request)
        status_code, payload = self.responses.get(
            (request.method, path), (200, {"success": True, "data": []})
        )
        return httpx.Response(status_code, json=payload)

    def calls(self, method: str | None = None) -> list[tuple[str, str]]:
        return [
            (item.method, item.path)
            for item in self.requests
            if method is None or item.method == method
        ]

    def last(self, method: str, path: str) -> RecordedRequest:
        matches = [
            item for item in self.requests if (item.method, item.path) == (method, path)
        ]
        assert matches, f"no {method} {path} request was made"
        return matches[-1]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        api_base_url=f"{BASE_URL}/",
        admin_api_key=ADMIN_KEY,
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        session_file=str(tmp_path / "session.json"),
    )


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def backend_client(fake_backend: FakeBackend) -> HttpxBackendClient:
    transport = httpx.MockTransport(fake_backend.handler)
    return HttpxBackendClient(
        base_url=BASE_URL,
        admin_key=ADMIN_KEY,
        http_client=httpx.AsyncClient(transport=transport),
    )


@pytest.fixture
def admin_api(backend_client: HttpxBackendClient) -> AdminApi:
    return AdminApi(backend_client)


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def auth_service(session_store: InMemorySessionStore) -> AuthService:
    return AuthService(
        store=session_store, admin_email=ADMIN_EMAIL, admin_password=ADMIN_PASSWORD
    )


@pytest.fixture
def container(
    settings: Settings,
    backend_client: HttpxBackendClient,
    admin_api: AdminApi,
    auth_service: AuthService,
) -> AppContainer:
    async def close_resources() -> None:
        await backend_client.close()

    return AppContainer(
        settings=settings,
        backend_client=backend_client,
        admin_api=admin_api,
        auth_service=auth_service,
        approval_service=ApprovalService(admin_api),
        close_resources=close_resources,
    )


@pytest.fixture
def anonymous_client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def client(anonymous_client: TestClient) -> TestClient:
    """Test client holding a signed-in admin session cookie."""
    response = anonymous_client.post(
        "/login",
        data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return anonymous_client


@pytest.fixture
def food_row() -> Callable[..., dict[str, object]]:
    def build(**overrides: object) -> dict[str, object]:
        row: dict[str, object] = {
            "id": "food-1",
            "name": "Paneer Tikka",
            "nameHindi": "पनीर टिक्का",
            "category": "Protein",
            "calories": 265,
            "protein": 18,
            "carbs": 6,
            "fat": 19,
            "servingSize": "100 g",
            "searchTerms": "cottage cheese, grilled",
            "isActive": True,
        }
        row.update(overrides)
        return row

    return build


@pytest.fixture
def exercise_row() -> Callable[..., dict[str, object]]:
    def build(**overrides: object) -> dict[str, object]:
        row: dict[str, object] = {
            "id": "ex-1",
            "name": "Bench Press",
            "category": "chest",
            "difficulty": "intermediate",
            "defaultSets": "3x10",
            "targetMuscles": ["pectorals", "triceps"],
            "isActive": True,
        }
        row.update(overrides)
        return row

    return build
