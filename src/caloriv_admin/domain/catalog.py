"""Domain models for the shared food and exercise catalog."""

from dataclasses import dataclass, field

FOOD_CATEGORIES = (
    "Grains",
    "Protein",
    "Fruits",
    "Vegetables",
    "Dairy",
    "Snacks",
    "Beverages",
    "Sweets",
    "Other",
)

EXERCISE_CATEGORIES = (
    "chest",
    "back",
    "shoulders",
    "legs",
    "arms",
    "core",
    "cardio",
    "flexibility",
    "other",
)

EXERCISE_DIFFICULTIES = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class Food:
    """Food entry in the catalog, as returned by the backend."""

    id: str
    name: str
    category: str
    calories: float | None = None
    name_hindi: str | None = None
    emoji: str | None = None
    image_url: str | None = None
    serving_size: str | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    search_terms: str | None = None
    pairing_tags: str | None = None
    is_active: bool = True

    @property
    def has_macros(self) -> bool:
        return bool(self.protein or self.carbs or self.fat)


@dataclass(frozen=True)
class Exercise:
    """Exercise entry in the catalog."""

    id: str
    name: str
    category: str
    difficulty: str
    gif_url: str | None = None
    default_sets: str | None = None
    description: str | None = None
    instructions: str | None = None
    equipment: str | None = None
    target_muscles: list[str] = field(default_factory=list)
    is_active: bool = True
