"""Promotional banner screens."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.forms import (
    NEW_PROMOTION_FORM,
    PromotionForm,
    describe_validation_error,
    promotion_to_form,
)
from caloriv_admin.api.responses import get_container, item_url, redirect, render
from caloriv_admin.domain.content import Promotion

logger = logging.getLogger(__name__)

LIST_URL = "/admin/promotions"

router = APIRouter(
    prefix=LIST_URL, tags=["promotions"], dependencies=[Depends(require_session)]
)


@router.get("", response_class=HTMLResponse)
async def list_promotions(request: Request, error: str | None = None) -> HTMLResponse:
    """List promotional banners."""
    promotions: list[Promotion] = []
    try:
        promotions = await get_container(request).admin_api.list_promotions()
    except BackendError as exc:
        logger.warning("Failed to load promotions: %s", exc)
        error = exc.message or "Failed to load promotions"
    return render(request, "Promotions", views.promotions_page(promotions, error))


@router.get("/new", response_class=HTMLResponse)
async def new_promotion_form(request: Request) -> HTMLResponse:
    return render(
        request,
        "Promotions",
        views.promotion_form_page(
            "New Promotion", f"{LIST_URL}/new", NEW_PROMOTION_FORM
        ),
    )


@router.post("/new", response_class=HTMLResponse)
async def create_promotion(request: Request) -> Response:
    return await _save(request, None)


@router.get("/{promotion_id}/edit", response_class=HTMLResponse)
async def edit_promotion_form(request: Request, promotion_id: str) -> HTMLResponse:
    """Render the edit form for a promotion found in the full list."""
    try:
        promotions = await get_container(request).admin_api.list_promotions()
    except BackendError as exc:
        return _not_found(request, exc.message or "Failed to load promotion")
    promotion = next((item for item in promotions if item.id == promotion_id), None)
    if promotion is None:
        return _not_found(request, "Promotion not found")
    return render(
        request,
        "Promotions",
        views.promotion_form_page(
            "Edit Promotion",
            item_url(LIST_URL, promotion_id, "edit"),
            promotion_to_form(promotion),
        ),
    )


@router.post("/{promotion_id}/edit", response_class=HTMLResponse)
async def update_promotion(request: Request, promotion_id: str) -> Response:
    return await _save(request, promotion_id)


@router.get("/{promotion_id}/delete", response_class=HTMLResponse)
async def confirm_delete_promotion(request: Request, promotion_id: str) -> HTMLResponse:
    return render(
        request,
        "Promotions",
        views.confirm_page(
            "Delete this promotion?",
            item_url(LIST_URL, promotion_id, "delete"),
            LIST_URL,
        ),
    )


@router.post("/{promotion_id}/delete")
async def delete_promotion(
    request: Request, promotion_id: str, confirm: str = Form("")
) -> RedirectResponse:
    if confirm != "yes":
        return redirect(LIST_URL)
    try:
        await get_container(request).admin_api.delete_promotion(promotion_id)
    except BackendError as exc:
        return redirect(LIST_URL, error=exc.message or "Delete failed")
    logger.info("Deleted promotion %s", promotion_id)
    return redirect(LIST_URL)


async def _save(request: Request, promotion_id: str | None) -> Response:
    values = dict(await request.form())
    api = get_container(request).admin_api
    try:
        form = PromotionForm.model_validate(values)
        if promotion_id:
            await api.update_promotion(promotion_id, form.to_payload())
        else:
            await api.create_promotion(form.to_payload())
    except ValidationError as exc:
        error = describe_validation_error(exc)
    except BackendError as exc:
        error = exc.message or "Save failed"
    else:
        logger.info("Saved promotion %s", promotion_id or "(new)")
        return redirect(LIST_URL)
    if promotion_id:
        heading, action = "Edit Promotion", item_url(LIST_URL, promotion_id, "edit")
    else:
        heading, action = "New Promotion", f"{LIST_URL}/new"
    return render(
        request,
        "Promotions",
        views.promotion_form_page(heading, action, values, error),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def _not_found(request: Request, message: str) -> HTMLResponse:
    return render(
        request,
        "Promotions",
        views.not_found_page(message, LIST_URL),
        status_code=status.HTTP_404_NOT_FOUND,
    )
