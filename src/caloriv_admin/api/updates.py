"""Mobile app update configuration screen."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.forms import AppConfigForm, describe_validation_error
from caloriv_admin.api.responses import get_container, redirect, render
from caloriv_admin.domain.content import AppConfig

logger = logging.getLogger(__name__)

PAGE_URL = "/admin/updates"
SAVED_MESSAGE = (
    "App config updated successfully! Changes will apply on next app launch."
)

router = APIRouter(
    prefix=PAGE_URL, tags=["updates"], dependencies=[Depends(require_session)]
)


@router.get("", response_class=HTMLResponse)
async def show_config(request: Request, saved: bool = False) -> HTMLResponse:
    """Show the current config, or defaults when the backend has none."""
    config = AppConfig()
    error = None
    try:
        config = await get_container(request).admin_api.get_app_config() or config
    except BackendError as exc:
        logger.warning("Failed to load app config: %s", exc)
        error = exc.message or "Failed to load config"
    message = SAVED_MESSAGE if saved else None
    return render(
        request,
        "App Updates",
        views.updates_page(config, message=message, error=error),
    )


@router.post("", response_class=HTMLResponse)
async def save_config(request: Request) -> Response:
    """Replace the remote config with the submitted values."""
    values = dict(await request.form())
    try:
        form = AppConfigForm.model_validate(values)
    except ValidationError as exc:
        return _render_error(
            request, AppConfig(), describe_validation_error(exc), values
        )
    config = form.to_config()
    try:
        result = await get_container(request).admin_api.update_app_config(config)
    except BackendError as exc:
        return _render_error(request, config, exc.message or "Failed to update config")
    if result.get("success") is False:
        message = result.get("error") or result.get("message")
        return _render_error(request, config, str(message or "Failed to update config"))
    logger.info(
        "App config saved: version=%s force=%s",
        config.required_version,
        config.force_update,
    )
    return redirect(PAGE_URL, saved="1")


def _render_error(
    request: Request,
    config: AppConfig,
    error: str,
    values: dict[str, object] | None = None,
) -> HTMLResponse:
    return render(
        request,
        "App Updates",
        views.updates_page(config, error=error, values=values),
        status_code=status.HTTP_400_BAD_REQUEST,
    )
