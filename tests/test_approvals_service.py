"""Tests for loading and resolving submissions."""

import asyncio

import httpx
import pytest

from caloriv_admin.adapters.backend_client import HttpxBackendClient
from caloriv_admin.services.admin_api import AdminApi
from caloriv_admin.services.approvals import ApprovalService


def test_load_pending_returns_both_queues(
    admin_api, fake_backend, food_row, exercise_row
) -> None:
    fake_backend.respond("GET", "/admin/food-submissions", {"data": [food_row()]})
    fake_backend.respond(
        "GET", "/admin/exercise-submissions", {"data": [exercise_row()]}
    )

    pending = asyncio.run(ApprovalService(admin_api).load_pending())

    assert [food.name for food in pending.foods] == ["Paneer Tikka"]
    assert [ex.name for ex in pending.exercises] == ["Bench Press"]
    assert pending.error is None


def test_load_pending_fetches_concurrently() -> None:
    events: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        events.append(f"start {request.url.path}")
        await asyncio.sleep(0)
        events.append(f"end {request.url.path}")
        return httpx.Response(200, json={"data": []})

    client = HttpxBackendClient(
        base_url="http://backend.test/api",
        admin_key="admin-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    asyncio.run(ApprovalService(AdminApi(client)).load_pending())

    assert events.index("start /api/admin/exercise-submissions") < events.index(
        "end /api/admin/food-submissions"
    )


def test_load_pending_reports_failure(admin_api, fake_backend) -> None:
    fake_backend.respond(
        "GET", "/admin/exercise-submissions", {"error": "Unauthorized"}, 401
    )

    pending = asyncio.run(ApprovalService(admin_api).load_pending())

    assert pending.foods == []
    assert pending.exercises == []
    assert pending.error == "Unauthorized"


@pytest.mark.parametrize(
    ("kind", "action", "expected"),
    [
        ("foods", "approve", ("POST", "/admin/food-submissions/s1/approve")),
        ("foods", "reject", ("DELETE", "/admin/food-submissions/s1")),
        ("exercises", "approve", ("POST", "/admin/exercise-submissions/s1/approve")),
        ("exercises", "reject", ("DELETE", "/admin/exercise-submissions/s1")),
    ],
)
def test_resolve_calls_matching_endpoint(
    admin_api, fake_backend, kind: str, action: str, expected: tuple[str, str]
) -> None:
    asyncio.run(ApprovalService(admin_api).resolve(kind, "s1", action))

    assert fake_backend.calls() == [expected]


def test_resolve_rejects_unknown_action(admin_api, fake_backend) -> None:
    with pytest.raises(ValueError):
        asyncio.run(ApprovalService(admin_api).resolve("foods", "s1", "archive"))

    assert fake_backend.calls() == []


def test_load_pending_failure_waits_for_other_queue() -> None:
    finished: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/food-submissions"):
            return httpx.Response(500, json={"error": "Queue offline"})
        await asyncio.sleep(0.05)
        finished.append("exercises")
        return httpx.Response(200, json={"data": []})

    client = HttpxBackendClient(
        base_url="http://backend.test/api",
        admin_key="admin-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    pending = asyncio.run(ApprovalService(AdminApi(client)).load_pending())

    assert finished == ["exercises"]
    assert pending.error == "Queue offline"
    assert pending.foods == []
    assert pending.exercises == []
