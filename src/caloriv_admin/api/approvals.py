"""Submission review screens."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.responses import get_container, redirect, render

logger = logging.getLogger(__name__)

PAGE_URL = "/admin/approvals"

router = APIRouter(
    prefix=PAGE_URL, tags=["approvals"], dependencies=[Depends(require_session)]
)

Kind = Literal["foods", "exercises"]
Action = Literal["approve", "reject"]

_SINGULAR = {"foods": "food", "exercises": "exercise"}


@router.get("", response_class=HTMLResponse)
async def show_pending(
    request: Request, tab: Kind = "foods", error: str | None = None
) -> HTMLResponse:
    """Load both pending queues together and render the selected tab."""
    pending = await get_container(request).approval_service.load_pending()
    return render(request, "Approvals", views.approvals_page(pending, tab, error))


@router.get("/{kind}/{submission_id}/{action}", response_class=HTMLResponse)
async def confirm_resolution(
    request: Request, kind: Kind, submission_id: str, action: Action
) -> HTMLResponse:
    return render(
        request,
        "Approvals",
        views.confirm_page(
            f"{action.capitalize()} this {_SINGULAR[kind]}?",
            f"{PAGE_URL}/{kind}/{views.url_segment(submission_id)}/{action}",
            f"{PAGE_URL}?tab={kind}",
        ),
    )


@router.post("/{kind}/{submission_id}/{action}")
async def resolve_submission(
    request: Request,
    kind: Kind,
    submission_id: str,
    action: Action,
    confirm: str = Form(""),
) -> RedirectResponse:
    """Approve or reject once confirmed, then reload both queues."""
    if confirm != "yes":
        return redirect(PAGE_URL, tab=kind)
    try:
        await get_container(request).approval_service.resolve(
            kind, submission_id, action
        )
    except BackendError as exc:
        logger.warning("Failed to %s %s %s: %s", action, kind, submission_id, exc)
        return redirect(PAGE_URL, tab=kind, error=exc.message)
    return redirect(PAGE_URL, tab=kind)
