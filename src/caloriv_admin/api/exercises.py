"""Exercise catalog screens."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from caloriv_admin.adapters.backend_client import BackendError
from caloriv_admin.api import views
from caloriv_admin.api.auth import require_session
from caloriv_admin.api.forms import (
    NEW_EXERCISE_FORM,
    ExerciseForm,
    describe_validation_error,
    exercise_to_form,
)
from caloriv_admin.api.responses import get_container, item_url, redirect, render
from caloriv_admin.domain.catalog import Exercise
from caloriv_admin.services.filters import filter_exercises

logger = logging.getLogger(__name__)

LIST_URL = "/admin/exercises"

router = APIRouter(
    prefix=LIST_URL, tags=["exercises"], dependencies=[Depends(require_session)]
)


@router.get("", response_class=HTMLResponse)
async def list_exercises(
    request: Request,
    category: str = "",
    difficulty: str = "",
    search: str = "",
    error: str | None = None,
) -> HTMLResponse:
    """List exercises with server-side filters and a local search pass."""
    exercises: list[Exercise] = []
    try:
        exercises = await get_container(request).admin_api.list_exercises(
            category or None, difficulty or None, search or None
        )
    except BackendError as exc:
        logger.warning("Failed to load exercises: %s", exc)
        error = exc.message or "Failed to load exercises"
    return render(
        request,
        "Exercises",
        views.exercises_page(
            filter_exercises(exercises, search),
            len(exercises),
            category=category,
            difficulty=difficulty,
            search=search,
            error=error,
        ),
    )


@router.get("/new", response_class=HTMLResponse)
async def new_exercise_form(request: Request) -> HTMLResponse:
    return render(
        request,
        "Exercises",
        views.exercise_form_page(
            "Add Exercise", f"{LIST_URL}/new", NEW_EXERCISE_FORM
        ),
    )


@router.post("/new", response_class=HTMLResponse)
async def create_exercise(request: Request) -> Response:
    values = dict(await request.form())
    try:
        form = ExerciseForm.model_validate(values)
        await get_container(request).admin_api.create_exercise(form.to_payload())
    except ValidationError as exc:
        error = describe_validation_error(exc)
    except BackendError as exc:
        error = exc.message or "Failed to save exercise"
    else:
        logger.info("Created exercise %s", form.name)
        return redirect(LIST_URL)
    return render(
        request,
        "Exercises",
        views.exercise_form_page("Add Exercise", f"{LIST_URL}/new", values, error),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/{exercise_id}/edit", response_class=HTMLResponse)
async def edit_exercise_form(request: Request, exercise_id: str) -> HTMLResponse:
    """Render the edit form, locating the exercise in the full list."""
    try:
        exercise = await _find_exercise(request, exercise_id)
    except BackendError as exc:
        return _not_found(request, exc.message or "Failed to load exercise")
    if exercise is None:
        return _not_found(request, "Exercise not found")
    return render(
        request,
        "Exercises",
        views.exercise_form_page(
            "Edit Exercise",
            item_url(LIST_URL, exercise_id, "edit"),
            exercise_to_form(exercise),
        ),
    )


@router.post("/{exercise_id}/edit", response_class=HTMLResponse)
async def update_exercise(request: Request, exercise_id: str) -> Response:
    values = dict(await request.form())
    try:
        form = ExerciseForm.model_validate(values)
        await get_container(request).admin_api.update_exercise(
            exercise_id, form.to_payload()
        )
    except ValidationError as exc:
        error = describe_validation_error(exc)
    except BackendError as exc:
        error = exc.message or "Failed to save exercise"
    else:
        logger.info("Updated exercise %s", exercise_id)
        return redirect(LIST_URL)
    return render(
        request,
        "Exercises",
        views.exercise_form_page(
            "Edit Exercise", item_url(LIST_URL, exercise_id, "edit"), values, error
        ),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@router.get("/{exercise_id}/delete", response_class=HTMLResponse)
async def confirm_delete_exercise(request: Request, exercise_id: str) -> HTMLResponse:
    try:
        exercise = await _find_exercise(request, exercise_id)
    except BackendError:
        exercise = None
    name = exercise.name if exercise else "this exercise"
    return render(
        request,
        "Exercises",
        views.confirm_page(
            f'Are you sure you want to delete "{name}"?',
            item_url(LIST_URL, exercise_id, "delete"),
            LIST_URL,
        ),
    )


@router.post("/{exercise_id}/delete")
async def delete_exercise(
    request: Request, exercise_id: str, confirm: str = Form("")
) -> RedirectResponse:
    if confirm != "yes":
        return redirect(LIST_URL)
    try:
        await get_container(request).admin_api.delete_exercise(exercise_id)
    except BackendError as exc:
        return redirect(LIST_URL, error=exc.message or "Failed to delete exercise")
    logger.info("Deleted exercise %s", exercise_id)
    return redirect(LIST_URL)


async def _find_exercise(request: Request, exercise_id: str) -> Exercise | None:
    exercises = await get_container(request).admin_api.list_exercises()
    return next((item for item in exercises if item.id == exercise_id), None)


def _not_found(request: Request, message: str) -> HTMLResponse:
    return render(
        request,
        "Exercises",
        views.not_found_page(message, LIST_URL),
        status_code=status.HTTP_404_NOT_FOUND,
    )
