"""Food catalog screens."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.forms import (
    NEW_FOOD_FORM,
    FoodForm,
    describe_validation_error,
    food_to_form,
)
from caloriv_admin.api.responses import get_container, item_url, redirect, render
from caloriv_admin.domain.catalog import Food
from caloriv_admin.services.bulk import BulkUploadError, parse_bulk_foods
from caloriv_admin.services.filters import filter_foods

logger = logging.getLogger(__name__)

LIST_URL = "/admin/foods"

router = APIRouter(
    prefix=LIST_URL, tags=["foods"], dependencies=[Depends(require_session)]
)


@router.get("", response_class=HTMLResponse)
async def list_foods(
    request: Request,
    category: str = "",
    search: str = "",
    error: str | None = None,
) -> HTMLResponse:
    """List foods; category is filtered server-side, search locally."""
    foods: list[Food] = []
    try:
        foods = await get_container(request).admin_api.list_foods(category or None)
    except BackendError as exc:
        logger.warning("Failed to load foods: %s", exc)
        error = exc.message or "Failed to load foods"
    visible = filter_foods(foods, search)
    return render(
        request,
        "Foods",
        views.foods_page(
            visible, len(foods), category=category, search=search, error=error
        ),
    )


@router.get("/new", response_class=HTMLResponse)
async def new_food_form(request: Request) -> HTMLResponse:
    """Render an empty food form."""
    return render(
        request,
        "Foods",
        views.food_form_page("Add Food", f"{LIST_URL}/new", NEW_FOOD_FORM),
    )


@router.post("/new", response_class=HTMLResponse)
async def create_food(request: Request) -> Response:
    """Create a food from the submitted form and return to the list."""
    values = dict(await request.form())
    try:
        form = FoodForm.model_validate(values)
        await get_container(request).admin_api.create_food(form.to_payload())
    except ValidationError as exc:
        error = describe_validation_error(exc)
    except BackendError as exc:
        error = exc.message or "Failed to save food"
    else:
        logger.info("Created food %s", form.name)
        return redirect(LIST_URL)
    return render(
        request,
        "Foods",
        views.food_form_page("Add Food", f"{LIST_URL}/new", values, error),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/bulk", response_class=HTMLResponse)
async def bulk_upload_form(request: Request) -> HTMLResponse:
    """Render the bulk upload textarea."""
    return render(request, "Foods", views.bulk_upload_page())


@router.post("/bulk", response_class=HTMLResponse)
async def bulk_upload(request: Request, payload: str = Form("")) -> HTMLResponse:
    """Validate pasted JSON locally, then send it in a single request."""
    try:
        items = parse_bulk_foods(payload)
    except BulkUploadError as exc:
        return render(
            request,
            "Foods",
            views.bulk_upload_page(payload, error=str(exc)),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    try:
        result = await get_container(request).admin_api.bulk_upload_foods(items)
    except BackendError as exc:
        return render(
            request,
            "Foods",
            views.bulk_upload_page(payload, error=exc.message or "Network Error"),
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    if result.get("success") is False:
        message = result.get("error")
        return render(
            request,
            "Foods",
            views.bulk_upload_page(payload, error=str(message or "Upload failed")),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    logger.info("Bulk uploaded %d foods", len(items))
    message = result.get("message")
    return render(
        request,
        "Foods",
        views.bulk_upload_page(message=str(message or "Upload successful!")),
    )


@router.get("/{food_id}/edit", response_class=HTMLResponse)
async def edit_food_form(request: Request, food_id: str) -> HTMLResponse:
    """Render the edit form for a food found by scanning the full list."""
    try:
        food = await _find_food(request, food_id)
    except BackendError as exc:
        return _not_found(request, exc.message or "Failed to load food")
    if food is None:
        return _not_found(request, "Food not found")
    return render(
        request,
        "Foods",
        views.food_form_page(
            "Edit Food", item_url(LIST_URL, food_id, "edit"), food_to_form(food)
        ),
    )


@router.post("/{food_id}/edit", response_class=HTMLResponse)
async def update_food(request: Request, food_id: str) -> Response:
    """Save the edited food and return to the list."""
    values = dict(await request.form())
    try:
        form = FoodForm.model_validate(values)
        await get_container(request).admin_api.update_food(food_id, form.to_payload())
    except ValidationError as exc:
        error = describe_validation_error(exc)
    except BackendError as exc:
        error = exc.message or "Failed to save food"
    else:
        logger.info("Updated food %s", food_id)
        return redirect(LIST_URL)
    return render(
        request,
        "Foods",
        views.food_form_page(
            "Edit Food", item_url(LIST_URL, food_id, "edit"), values, error
        ),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/{food_id}/delete", response_class=HTMLResponse)
async def confirm_delete_food(request: Request, food_id: str) -> HTMLResponse:
    """Ask before deleting."""
    try:
        food = await _find_food(request, food_id)
    except BackendError:
        food = None
    name = food.name if food else "this food"
    return render(
        request,
        "Foods",
        views.confirm_page(
            f'Are you sure you want to delete "{name}"?',
            item_url(LIST_URL, food_id, "delete"),
            LIST_URL,
        ),
    )


@router.post("/{food_id}/delete")
async def delete_food(
    request: Request, food_id: str, confirm: str = Form("")
) -> RedirectResponse:
    """Delete the food only when the operator confirmed."""
    if confirm != "yes":
        return redirect(LIST_URL)
    try:
        await get_container(request).admin_api.delete_food(food_id)
    except BackendError as exc:
        return redirect(LIST_URL, error=exc.message or "Failed to delete food")
    logger.info("Deleted food %s", food_id)
    return redirect(LIST_URL)


async def _find_food(request: Request, food_id: str) -> Food | None:
    foods = await get_container(request).admin_api.list_foods()
    return next((food for food in foods if food.id == food_id), None)


def _not_found(request: Request, message: str) -> HTMLResponse:
    return render(
        request,
        "Foods",
        views.not_found_page(message, LIST_URL),
        status_code=status.HTTP_404_NOT_FOUND,
    )
