"""Dashboard landing screen."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import DASHBOARD_URL, require_session
from caloriv_admin.api.responses import get_container, redirect, render
from caloriv_admin.domain.content import DashboardStats

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_session)])


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return redirect(DASHBOARD_URL)


@router.get(DASHBOARD_URL, response_class=HTMLResponse)
async def dashboard(request: Request) -> HTMLResponse:
    """Show headline counters; a failed load shows zeros."""
    stats = DashboardStats()
    try:
        stats = await get_container(request).admin_api.get_stats()
    except BackendError:
        logger.exception("Failed to load stats")
    return render(request, "Dashboard", views.dashboard_page(stats))
