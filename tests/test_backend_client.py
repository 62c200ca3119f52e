"""Tests for the backend HTTP client."""

import asyncio

import httpx
import pytest

from caloriv_admin.adapters.backend_client import (
    NETWORK_ERROR_MESSAGE,
    BackendError,
    HttpxBackendClient,
)

ADMIN_KEY = "admin-key"


def test_call_sends_admin_key_only_when_required(backend_client, fake_backend) -> None:
    asyncio.run(backend_client.call("/foods"))
    asyncio.run(backend_client.call("/admin/users", requires_auth=True))

    public, private = fake_backend.requests
    assert public.headers["content-type"] == "application/json"
    assert "x-admin-key" not in public.headers
    assert private.headers["x-admin-key"] == ADMIN_KEY


def test_call_drops_empty_query_params(backend_client, fake_backend) -> None:
    asyncio.run(
        backend_client.call(
            "/exercises", params={"category": "chest", "difficulty": None, "search": ""}
        )
    )

    assert fake_backend.requests[0].params == {"category": "chest"}


def test_call_sends_json_body(backend_client, fake_backend) -> None:
    asyncio.run(
        backend_client.call(
            "/admin/foods", method="POST", body={"name": "Dal"}, requires_auth=True
        )
    )

    request = fake_backend.last("POST", "/admin/foods")
    assert request.body == {"name": "Dal"}


def test_call_returns_parsed_body(backend_client, fake_backend) -> None:
    fake_backend.respond("GET", "/foods", {"success": True, "data": [{"id": "1"}]})

    result = asyncio.run(backend_client.call("/foods"))

    assert result == {"success": True, "data": [{"id": "1"}]}


def test_error_field_is_surfaced(backend_client, fake_backend) -> None:
    fake_backend.respond("GET", "/foods", {"error": "Database offline"}, 500)

    with pytest.raises(BackendError) as excinfo:
        asyncio.run(backend_client.call("/foods"))

    assert excinfo.value.message == "Database offline"
    assert excinfo.value.status_code == 500


def test_message_field_takes_precedence(backend_client, fake_backend) -> None:
    fake_backend.respond(
        "GET", "/admin/users", {"message": "Forbidden", "error": "bad key"}, 403
    )

    with pytest.raises(BackendError) as excinfo:
        asyncio.run(backend_client.call("/admin/users", requires_auth=True))

    assert str(excinfo.value) == "Forbidden"


def test_error_without_body_uses_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad gateway")

    client = HttpxBackendClient(
        base_url="http://backend.test/api",
        admin_key=ADMIN_KEY,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(BackendError) as excinfo:
        asyncio.run(client.call("/foods"))

    assert excinfo.value.message == "Request failed with status 502"


def test_network_failure_is_wrapped(backend_client, fake_backend) -> None:
    fake_backend.fail_transport("GET", "/foods")

    with pytest.raises(BackendError) as excinfo:
        asyncio.run(backend_client.call("/foods"))

    assert excinfo.value.message == NETWORK_ERROR_MESSAGE
    assert excinfo.value.status_code is None


def test_non_object_json_is_wrapped_in_data() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[1, 2, 3])

    client = HttpxBackendClient(
        base_url="http://backend.test/api",
        admin_key=ADMIN_KEY,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    assert asyncio.run(client.call("/foods")) == {"data": [1, 2, 3]}
