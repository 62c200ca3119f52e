"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from caloriv_admin.adapters.backend_client import BackendClient, HttpxBackendClient
from caloriv_admin.adapters.session_store import JsonFileSessionStore
from caloriv_admin.config import Settings, normalize_base_url
from caloriv_admin.services.admin_api import AdminApi
from caloriv_admin.services.approvals import ApprovalService
from caloriv_admin.services.auth import AuthService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    backend_client: BackendClient
    admin_api: AdminApi
    auth_service: AuthService
    approval_service: ApprovalService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend_client = HttpxBackendClient.create(
        normalize_base_url(resolved_settings.api_base_url),
        resolved_settings.admin_api_key,
        timeout=resolved_settings.request_timeout,
    )
    admin_api = AdminApi(backend_client)
    auth_service = AuthService(
        store=JsonFileSessionStore(Path(resolved_settings.session_file)),
        admin_email=resolved_settings.admin_email,
        admin_password=resolved_settings.admin_password,
    )
    auth_service.restore()

    async def close_resources() -> None:
        await backend_client.close()

    return AppContainer(
        settings=resolved_settings,
        backend_client=backend_client,
        admin_api=admin_api,
        auth_service=auth_service,
        approval_service=ApprovalService(admin_api),
        close_resources=close_resources,
    )
