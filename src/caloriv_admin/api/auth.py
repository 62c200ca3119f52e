"""Login, logout and theme endpoints plus the session guard."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from caloriv_admin.api import views
from caloriv_admin.api.responses import get_container, redirect, render
from caloriv_admin.services.auth import AuthenticationError

logger = logging.getLogger(__name__)

SESSION_COOKIE = "admin_token"
LOGIN_URL = "/login"
DASHBOARD_URL = "/admin/dashboard"

router = APIRouter(tags=["auth"])


async def require_session(request: Request) -> None:
    """Send unauthenticated visitors to the login screen."""
    token = request.cookies.get(SESSION_COOKIE)
    if not get_container(request).auth_service.is_authenticated(token):
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER, headers={"Location": LOGIN_URL}
        )


@router.get("/login", response_class=HTMLResponse)
async def login_form(request: Request) -> Response:
    """Render the login screen, skipping it for signed-in operators."""
    token = request.cookies.get(SESSION_COOKIE)
    if get_container(request).auth_service.is_authenticated(token):
        return redirect(DASHBOARD_URL)
    return render(request, "Login", views.login_page(), signed_in=False)


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request, email: str = Form(""), password: str = Form("")
) -> Response:
    """Verify credentials, store the session and open the dashboard."""
    try:
        session = get_container(request).auth_service.login(email, password)
    except AuthenticationError as exc:
        return render(
            request,
            "Login",
            views.login_page(error=str(exc), email=email),
            status_code=status.HTTP_401_UNAUTHORIZED,
            signed_in=False,
        )
    response = redirect(DASHBOARD_URL)
    response.set_cookie(SESSION_COOKIE, session.token, httponly=True, samesite="lax")
    return response


@router.post("/logout")
async def logout(request: Request) -> RedirectResponse:
    """Clear the stored session and return to the login screen."""
    get_container(request).auth_service.logout()
    response = redirect(LOGIN_URL)
    response.delete_cookie(SESSION_COOKIE)
    return response


@router.post("/theme", dependencies=[Depends(require_session)])
async def toggle_theme(request: Request) -> RedirectResponse:
    """Flip the persisted light/dark preference."""
    theme = get_container(request).auth_service.toggle_theme()
    logger.info("Theme switched to %s", theme)
    referer = request.headers.get("referer") or ""
    target = referer if referer.startswith(str(request.base_url)) else DASHBOARD_URL
    return redirect(target)
