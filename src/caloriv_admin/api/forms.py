"""Pydantic models for the dashboard's HTML forms."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from caloriv_admin.domain.catalog import Exercise, Food
from caloriv_admin.domain.content import AppConfig, Promotion


class _FormModel(BaseModel):
    """Form fields are posted under the backend's camelCase names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, object]:
        """Return the backend payload for the submitted form state."""
        return self.model_dump(by_alias=True, exclude_none=True)


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class FoodForm(_FormModel):
    """Create/edit form for a catalog food."""

    name: str = Field(min_length=1)
    name_hindi: str = ""
    category: str = "Grains"
    serving_size: str = ""
    calories: float = Field(ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    emoji: str = ""
    image_url: str = ""
    search_terms: str = ""
    pairing_tags: str = ""
    is_active: bool = False

    @field_validator("calories", "protein", "carbs", "fat", "fiber", mode="before")
    @classmethod
    def blank_numbers_to_none(cls, value: object) -> object:
        return _blank_to_none(value)


class ExerciseForm(_FormModel):
    """Create/edit form for a catalog exercise."""

    name: str = Field(min_length=1)
    category: Literal[
        "chest",
        "back",
        "shoulders",
        "legs",
        "arms",
        "core",
        "cardio",
        "flexibility",
        "other",
    ] = "chest"
    difficulty: Literal["beginner", "intermediate", "advanced"] = "beginner"
    gif_url: str = ""
    default_sets: str = ""
    description: str = ""
    instructions: str = ""
    is_active: bool = False


class PromotionForm(_FormModel):
    """Create/edit form for a promotional banner."""

    title: str = ""
    image_url: str = Field(min_length=1)
    external_link: str = Field(min_length=1)
    delay_days: int = Field(default=0, ge=0)
    is_active: bool = False

    @field_validator("delay_days", mode="before")
    @classmethod
    def blank_delay_to_zero(cls, value: object) -> object:
        return 0 if _blank_to_none(value) is None else value


class AnnouncementForm(_FormModel):
    """Form for posting an announcement."""

    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    type: Literal["info", "warning", "success"] = "info"
    expires_at: str | None = None

    @field_validator("expires_at", mode="before")
    @classmethod
    def blank_expiry_to_none(cls, value: object) -> object:
        return _blank_to_none(value)


class AppConfigForm(_FormModel):
    """Form controlling the mobile app update screen."""

    required_version: str = Field(min_length=1)
    force_update: bool = False
    update_message: str = ""
    update_url: str = ""

    def to_config(self) -> AppConfig:
        return AppConfig(
            required_version=self.required_version,
            force_update=self.force_update,
            update_message=self.update_message,
            update_url=self.update_url,
        )


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into one line for an inline banner."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid form data"


def food_to_form(food: Food) -> dict[str, object]:
    """Pre-populate the food form from an existing record."""
    return {
        "name": food.name,
        "nameHindi": food.name_hindi or "",
        "category": food.category or "Grains",
        "servingSize": food.serving_size or "",
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "fiber": food.fiber,
        "emoji": food.emoji or "",
        "imageUrl": food.image_url or "",
        "searchTerms": food.search_terms or "",
        "pairingTags": food.pairing_tags or "",
        "isActive": food.is_active,
    }


def exercise_to_form(exercise: Exercise) -> dict[str, object]:
    """Pre-populate the exercise form from an existing record."""
    return {
        "name": exercise.name,
        "category": exercise.category or "chest",
        "difficulty": exercise.difficulty or "beginner",
        "gifUrl": exercise.gif_url or "",
        "defaultSets": exercise.default_sets or "",
        "description": exercise.description or "",
        "instructions": exercise.instructions or "",
        "isActive": exercise.is_active,
    }


def promotion_to_form(promotion: Promotion) -> dict[str, object]:
    """Pre-populate the promotion form from an existing record."""
    return {
        "title": promotion.title or "",
        "imageUrl": promotion.image_url,
        "externalLink": promotion.external_link,
        "delayDays": promotion.delay_days,
        "isActive": promotion.is_active,
    }


NEW_FOOD_FORM: dict[str, object] = {"category": "Grains", "isActive": True}
NEW_EXERCISE_FORM: dict[str, object] = {
    "category": "chest",
    "difficulty": "beginner",
    "isActive": True,
}
NEW_PROMOTION_FORM: dict[str, object] = {"delayDays": 2, "isActive": True}
