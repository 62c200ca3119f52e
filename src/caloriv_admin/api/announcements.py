"""Announcement screens."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.forms import AnnouncementForm, describe_validation_error
from caloriv_admin.api.responses import get_container, item_url, redirect, render
from caloriv_admin.domain.content import Announcement

logger = logging.getLogger(__name__)

LIST_URL = "/admin/announcements"

router = APIRouter(
    prefix=LIST_URL, tags=["announcements"], dependencies=[Depends(require_session)]
)


async def _load(request: Request) -> list[Announcement]:
    try:
        return await get_container(request).admin_api.list_announcements()
    except BackendError:
        logger.exception("Failed to load announcements")
        return []


@router.get("", response_class=HTMLResponse)
async def list_announcements(
    request: Request, error: str | None = None
) -> HTMLResponse:
    """List announcements alongside the posting form."""
    return render(
        request,
        "Announcements",
        views.announcements_page(await _load(request), error=error),
    )


@router.post("", response_class=HTMLResponse)
async def create_announcement(request: Request) -> Response:
    """Post an announcement, then reload the list."""
    values = dict(await request.form())
    try:
        form = AnnouncementForm.model_validate(values)
        await get_container(request).admin_api.create_announcement(form.to_payload())
    except ValidationError as exc:
        error = describe_validation_error(exc)
    except BackendError as exc:
        error = exc.message or "Failed to post"
    else:
        logger.info("Posted announcement %r", form.title)
        return redirect(LIST_URL)
    return render(
        request,
        "Announcements",
        views.announcements_page(await _load(request), values=values, error=error),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/{announcement_id}/delete", response_class=HTMLResponse)
async def confirm_delete_announcement(
    request: Request, announcement_id: str
) -> HTMLResponse:
    return render(
        request,
        "Announcements",
        views.confirm_page(
            "Delete this announcement?",
            item_url(LIST_URL, announcement_id, "delete"),
            LIST_URL,
        ),
    )


@router.post("/{announcement_id}/delete")
async def delete_announcement(
    request: Request, announcement_id: str, confirm: str = Form("")
) -> RedirectResponse:
    if confirm != "yes":
        return redirect(LIST_URL)
    try:
        await get_container(request).admin_api.delete_announcement(announcement_id)
    except BackendError as exc:
        return redirect(LIST_URL, error=exc.message or "Failed to delete")
    logger.info("Deleted announcement %s", announcement_id)
    return redirect(LIST_URL)
