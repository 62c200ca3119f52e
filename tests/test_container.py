"""Tests for container wiring."""

import asyncio

from caloriv_admin.containers import build_container
from caloriv_admin.services.auth import AuthService


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.admin_api.client is container.backend_client
    assert container.backend_client.base_url == "http://backend.test/api"
    assert container.backend_client.admin_key == "admin-key"
    assert container.approval_service.api is container.admin_api
    assert container.auth_service.session is None
    asyncio.run(container.close_resources())


def test_build_container_restores_stored_session(settings) -> None:
    first = build_container(settings)
    session = first.auth_service.login("admin@caloriv.app", "s3cret")
    asyncio.run(first.close_resources())

    second = build_container(settings)

    assert isinstance(second.auth_service, AuthService)
    assert second.auth_service.is_authenticated(session.token)
    asyncio.run(second.close_resources())
