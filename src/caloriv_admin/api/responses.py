"""Response helpers shared by the screen routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse

from caloriv_admin.api.views import render_page, url_segment

if TYPE_CHECKING:
    from caloriv_admin.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def render(
    request: Request,
    title: str,
    body: str,
    *,
    status_code: int = 200,
    signed_in: bool = True,
) -> HTMLResponse:
    """Render a screen inside the shared layout with the stored theme."""
    theme = get_container(request).auth_service.get_theme()
    return HTMLResponse(
        render_page(title, body, theme=theme, signed_in=signed_in),
        status_code=status_code,
    )


def redirect(url: str, **params: str | None) -> RedirectResponse:
    """Post/redirect/get helper; empty query values are dropped."""
    query = urlencode({key: value for key, value in params.items() if value})
    return RedirectResponse(f"{url}?{query}" if query else url, status_code=303)


def item_url(base: str, item_id: str, action: str = "") -> str:
    """Build a screen URL for one record with its id percent-encoded."""
    url = f"{base}/{url_segment(item_id)}"
    return f"{url}/{action}" if action else url
