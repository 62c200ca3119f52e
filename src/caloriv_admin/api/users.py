"""App user management screens."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.responses import get_container, item_url, redirect, render
from caloriv_admin.domain.users import AppUser
from caloriv_admin.services.filters import filter_users

logger = logging.getLogger(__name__)

LIST_URL = "/admin/users"

router = APIRouter(
    prefix=LIST_URL, tags=["users"], dependencies=[Depends(require_session)]
)


@router.get("", response_class=HTMLResponse)
async def list_users(
    request: Request, search: str = "", error: str | None = None
) -> HTMLResponse:
    """List app users; a failed load leaves the list empty."""
    users: list[AppUser] = []
    try:
        users = await get_container(request).admin_api.list_users()
    except BackendError:
        logger.exception("Error fetching users")
    return render(
        request,
        "Users",
        views.users_page(
            filter_users(users, search), len(users), search=search, error=error
        ),
    )


@router.get("/{user_id}", response_class=HTMLResponse)
async def user_detail(
    request: Request,
    user_id: str,
    message: str | None = None,
    error: str | None = None,
) -> HTMLResponse:
    """Show one user, located by scanning the full list."""
    try:
        users = await get_container(request).admin_api.list_users()
    except BackendError as exc:
        return _not_found(request, exc.message or "Failed to load user")
    user = next((item for item in users if item.id == user_id), None)
    if user is None:
        return _not_found(request, "User not found")
    return render(
        request,
        "Users",
        views.user_detail_page(user, message=message, error=error),
    )


@router.post("/{user_id}/password")
async def reset_password(
    request: Request, user_id: str, password: str = Form("")
) -> RedirectResponse:
    """Set a temporary password; a blank entry does nothing."""
    detail_url = item_url(LIST_URL, user_id)
    if not password:
        return redirect(detail_url)
    try:
        result = await get_container(request).admin_api.reset_user_password(
            user_id, password
        )
    except BackendError as exc:
        return redirect(detail_url, error=f"Failed to reset password: {exc.message}")
    logger.info("Reset password for user %s", user_id)
    message = result.get("message")
    return redirect(detail_url, message=str(message or "Password reset successfully"))


@router.get("/{user_id}/delete", response_class=HTMLResponse)
async def confirm_delete_user(request: Request, user_id: str) -> HTMLResponse:
    try:
        users = await get_container(request).admin_api.list_users()
    except BackendError:
        users = []
    user = next((item for item in users if item.id == user_id), None)
    name = user.name if user else "this user"
    return render(
        request,
        "Users",
        views.confirm_page(
            f'Are you sure you want to delete user "{name}"? '
            "This action cannot be undone.",
            item_url(LIST_URL, user_id, "delete"),
            LIST_URL,
        ),
    )


@router.post("/{user_id}/delete")
async def delete_user(
    request: Request, user_id: str, confirm: str = Form("")
) -> RedirectResponse:
    if confirm != "yes":
        return redirect(LIST_URL)
    try:
        await get_container(request).admin_api.delete_user(user_id)
    except BackendError as exc:
        return redirect(LIST_URL, error=exc.message or "Failed to delete user")
    logger.info("Deleted user %s", user_id)
    return redirect(LIST_URL)


def _not_found(request: Request, message: str) -> HTMLResponse:
    return render(
        request,
        "Users",
        views.not_found_page(message, LIST_URL),
        status_code=status.HTTP_404_NOT_FOUND,
    )
