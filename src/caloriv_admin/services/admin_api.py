"""One-call-per-endpoint facade over the Caloriv backend."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar
from urllib.parse import quote

from caloriv_admin.adapters.backend_client import BackendClient
from caloriv_admin.domain.catalog import Exercise, Food
from caloriv_admin.domain.content import (
    Announcement,
    AppConfig,
    DashboardStats,
    Promotion,
)
from caloriv_admin.domain.users import AppUser

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AdminApi:
    """Thin wrappers around each backend endpoint the dashboard uses.

    No operation validates, retries or paginates. Mutations return whatever
    the backend echoes back; callers refetch lists to observe new state.
    """

    client: BackendClient

    # Exercises

    async def list_exercises(
        self,
        category: str | None = None,
        difficulty: str | None = None,
        search: str | None = None,
    ) -> list[Exercise]:
        """Return catalog exercises, optionally filtered server-side."""
        response = await self.client.call(
            "/exercises",
            params={"category": category, "difficulty": difficulty, "search": search},
        )
        return [exercise_from_row(row) for row in _rows(response)]

    async def create_exercise(self, payload: dict[str, object]) -> Exercise | None:
        """Create a catalog exercise."""
        response = await self.client.call(
            "/admin/exercises", method="POST", body=payload, requires_auth=True
        )
        return _single(response, exercise_from_row)

    async def update_exercise(
        self, exercise_id: str, payload: dict[str, object]
    ) -> Exercise | None:
        """Update a catalog exercise."""
        response = await self.client.call(
            f"/admin/exercises/{_segment(exercise_id)}",
            method="PUT",
            body=payload,
            requires_auth=True,
        )
        return _single(response, exercise_from_row)

    async def delete_exercise(self, exercise_id: str) -> None:
        """Delete a catalog exercise."""
        await self.client.call(
            f"/admin/exercises/{_segment(exercise_id)}",
            method="DELETE",
            requires_auth=True,
        )

    # Foods

    async def list_foods(self, category: str | None = None) -> list[Food]:
        """Return catalog foods, optionally filtered by category."""
        response = await self.client.call("/foods", params={"category": category})
        return [food_from_row(row) for row in _rows(response)]

    async def create_food(self, payload: dict[str, object]) -> Food | None:
        """Create a catalog food."""
        response = await self.client.call(
            "/admin/foods", method="POST", body=payload, requires_auth=True
        )
        return _single(response, food_from_row)

    async def update_food(
        self, food_id: str, payload: dict[str, object]
    ) -> Food | None:
        """Update a catalog food."""
        response = await self.client.call(
            f"/admin/foods/{_segment(food_id)}",
            method="PUT",
            body=payload,
            requires_auth=True,
        )
        return _single(response, food_from_row)

    async def delete_food(self, food_id: str) -> None:
        """Delete a catalog food."""
        await self.client.call(
            f"/admin/foods/{_segment(food_id)}", method="DELETE", requires_auth=True
        )

    async def bulk_upload_foods(self, items: list[object]) -> dict[str, object]:
        """Import a JSON array of foods in one request."""
        return await self.client.call(
            "/admin/foods/bulk", method="POST", body=items, requires_auth=True
        )

    # App config

    async def get_app_config(self) -> AppConfig | None:
        """Return the remote app update config, if the backend has one."""
        response = await self.client.call("/admin/config", requires_auth=True)
        data = response.get("data")
        if not isinstance(data, dict):
            return None
        return app_config_from_row(data)

    async def update_app_config(self, config: AppConfig) -> dict[str, object]:
        """Replace the remote app update config."""
        return await self.client.call(
            "/admin/config",
            method="PUT",
            body=app_config_to_payload(config),
            requires_auth=True,
        )

    # Users

    async def list_users(self) -> list[AppUser]:
        """Return registered app users."""
        response = await self.client.call("/admin/users", requires_auth=True)
        return [user_from_row(row) for row in _rows(response)]

    async def delete_user(self, user_id: str) -> None:
        """Delete an app user."""
        await self.client.call(
            f"/admin/users/{_segment(user_id)}", method="DELETE", requires_auth=True
        )

    async def reset_user_password(
        self, user_id: str, new_password: str
    ) -> dict[str, object]:
        """Set a new password for an app user."""
        return await self.client.call(
            f"/admin/users/{_segment(user_id)}/password",
            method="PUT",
            body={"password": new_password},
            requires_auth=True,
        )

    # Submissions

    async def list_food_submissions(self) -> list[Food]:
        """Return pending user-submitted foods."""
        response = await self.client.call(
            "/admin/food-submissions", requires_auth=True
        )
        return [food_from_row(row) for row in _rows(response)]

    async def approve_food_submission(self, submission_id: str) -> None:
        """Move a food submission into the catalog."""
        await self.client.call(
            f"/admin/food-submissions/{_segment(submission_id)}/approve",
            method="POST",
            requires_auth=True,
        )

    async def reject_food_submission(self, submission_id: str) -> None:
        """Discard a food submission."""
        await self.client.call(
            f"/admin/food-submissions/{_segment(submission_id)}",
            method="DELETE",
            requires_auth=True,
        )

    async def list_exercise_submissions(self) -> list[Exercise]:
        """Return pending user-submitted exercises."""
        response = await self.client.call(
            "/admin/exercise-submissions", requires_auth=True
        )
        return [exercise_from_row(row) for row in _rows(response)]

    async def approve_exercise_submission(self, submission_id: str) -> None:
        """Move an exercise submission into the catalog."""
        await self.client.call(
            f"/admin/exercise-submissions/{_segment(submission_id)}/approve",
            method="POST",
            requires_auth=True,
        )

    async def reject_exercise_submission(self, submission_id: str) -> None:
        """Discard an exercise submission."""
        await self.client.call(
            f"/admin/exercise-submissions/{_segment(submission_id)}",
            method="DELETE",
            requires_auth=True,
        )

    # Promotions

    async def list_promotions(self) -> list[Promotion]:
        """Return promotional banners."""
        response = await self.client.call("/admin/promotions", requires_auth=True)
        return [promotion_from_row(row) for row in _rows(response)]

    async def create_promotion(self, payload: dict[str, object]) -> Promotion | None:
        """Create a promotional banner."""
        response = await self.client.call(
            "/admin/promotions", method="POST", body=payload, requires_auth=True
        )
        return _single(response, promotion_from_row)

    async def update_promotion(
        self, promotion_id: str, payload: dict[str, object]
    ) -> Promotion | None:
        """Update a promotional banner."""
        response = await self.client.call(
            f"/admin/promotions/{_segment(promotion_id)}",
            method="PUT",
            body=payload,
            requires_auth=True,
        )
        return _single(response, promotion_from_row)

    async def delete_promotion(self, promotion_id: str) -> None:
        """Delete a promotional banner."""
        await self.client.call(
            f"/admin/promotions/{_segment(promotion_id)}",
            method="DELETE",
            requires_auth=True,
        )

    # Announcements

    async def list_announcements(self) -> list[Announcement]:
        """Return broadcast announcements."""
        response = await self.client.call("/admin/announcements", requires_auth=True)
        return [announcement_from_row(row) for row in _rows(response)]

    async def create_announcement(
        self, payload: dict[str, object]
    ) -> Announcement | None:
        """Post a new announcement."""
        response = await self.client.call(
            "/admin/announcements", method="POST", body=payload, requires_auth=True
        )
        return _single(response, announcement_from_row)

    async def delete_announcement(self, announcement_id: str) -> None:
        """Remove an announcement."""
        await self.client.call(
            f"/admin/announcements/{_segment(announcement_id)}",
            method="DELETE",
            requires_auth=True,
        )

    # Dashboard

    async def get_stats(self) -> DashboardStats:
        """Return headline counters for the dashboard."""
        response = await self.client.call("/admin/stats", requires_auth=True)
        data = response.get("data")
        if not isinstance(data, dict):
            return DashboardStats()
        return DashboardStats(
            users=_as_int(data.get("users")) or 0,
            foods=_as_int(data.get("foods")) or 0,
            exercises=_as_int(data.get("exercises")) or 0,
            pending=_as_int(data.get("pending")) or 0,
        )


def food_from_row(row: dict[str, object]) -> Food:
    """Build a Food from a backend JSON object."""
    return Food(
        id=str(row.get("id") or row.get("_id") or ""),
        name=str(row.get("name") or ""),
        category=str(row.get("category") or ""),
        calories=_as_float(row.get("calories")),
        name_hindi=_as_str(row.get("nameHindi")),
        emoji=_as_str(row.get("emoji")),
        image_url=_as_str(row.get("imageUrl")),
        serving_size=_as_str(row.get("servingSize")),
        protein=_as_float(row.get("protein")),
        carbs=_as_float(row.get("carbs")),
        fat=_as_float(row.get("fat")),
        fiber=_as_float(row.get("fiber")),
        search_terms=_as_str(row.get("searchTerms")),
        pairing_tags=_as_str(row.get("pairingTags")),
        is_active=row.get("isActive") is not False,
    )


def exercise_from_row(row: dict[str, object]) -> Exercise:
    """Build an Exercise from a backend JSON object."""
    muscles = row.get("targetMuscles")
    return Exercise(
        id=str(row.get("id") or row.get("_id") or ""),
        name=str(row.get("name") or ""),
        category=str(row.get("category") or ""),
        difficulty=str(row.get("difficulty") or ""),
        gif_url=_as_str(row.get("gifUrl")),
        default_sets=_as_str(row.get("defaultSets")),
        description=_as_str(row.get("description")),
        instructions=_as_str(row.get("instructions")),
        equipment=_as_str(row.get("equipment")),
        target_muscles=[str(m) for m in muscles] if isinstance(muscles, list) else [],
        is_active=row.get("isActive") is not False,
    )


def user_from_row(row: dict[str, object]) -> AppUser:
    """Build an AppUser from a backend JSON object."""
    return AppUser(
        id=str(row.get("id") or row.get("_id") or ""),
        email=str(row.get("email") or ""),
        name=str(row.get("name") or ""),
        created_at=_as_str(row.get("createdAt")),
        password=_as_str(row.get("password")),
        age=_as_int(row.get("age")),
        gender=_as_str(row.get("gender")),
        height=_as_float(row.get("height")),
        current_weight=_as_float(row.get("currentWeight") or row.get("weight")),
        target_weight=_as_float(row.get("targetWeight")),
        goal=_as_str(row.get("goal")) or "maintain",
        chest=_as_float(row.get("chest")),
        waist=_as_float(row.get("waist")),
        arms=_as_float(row.get("arms")),
        hips=_as_float(row.get("hips")),
    )


def promotion_from_row(row: dict[str, object]) -> Promotion:
    """Build a Promotion from a backend JSON object."""
    return Promotion(
        id=str(row.get("id") or row.get("_id") or ""),
        image_url=str(row.get("imageUrl") or ""),
        external_link=str(row.get("externalLink") or ""),
        delay_days=_as_int(row.get("delayDays")) or 0,
        is_active=bool(row.get("isActive")),
        title=_as_str(row.get("title")),
    )


def announcement_from_row(row: dict[str, object]) -> Announcement:
    """Build an Announcement from a backend JSON object."""
    return Announcement(
        id=str(row.get("id") or row.get("_id") or ""),
        title=str(row.get("title") or ""),
        message=str(row.get("message") or ""),
        type=_as_str(row.get("type")) or "info",
        expires_at=_as_str(row.get("expiresAt")),
        created_at=_as_str(row.get("createdAt")),
    )


def app_config_from_row(row: dict[str, object]) -> AppConfig:
    """Build an AppConfig, falling back to defaults for missing fields."""
    defaults = AppConfig()
    return AppConfig(
        required_version=_as_str(row.get("requiredVersion"))
        or defaults.required_version,
        force_update=bool(row.get("forceUpdate")),
        update_message=_as_str(row.get("updateMessage")) or defaults.update_message,
        update_url=_as_str(row.get("updateUrl")) or defaults.update_url,
    )


def app_config_to_payload(config: AppConfig) -> dict[str, object]:
    """Serialize an AppConfig to the backend's camelCase shape."""
    return {
        "requiredVersion": config.required_version,
        "forceUpdate": config.force_update,
        "updateMessage": config.update_message,
        "updateUrl": config.update_url,
    }


def _segment(value: str) -> str:
    return quote(value, safe="")


def _rows(response: dict[str, object]) -> list[dict[str, object]]:
    data = response.get("data")
    if not isinstance(data, list):
        return []
    return [row for row in data if isinstance(row, dict)]


def _single(
    response: dict[str, object], build: Callable[[dict[str, object]], T]
) -> T | None:
    data = response.get("data")
    if isinstance(data, dict):
        return build(data)
    return None


def _as_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _as_float(value: object) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number):
        logger.warning("Ignoring non-numeric value %r", value)
        return None
    return number


def _as_int(value: object) -> int | None:
    number = _as_float(value)
    return int(number) if number is not None else None
