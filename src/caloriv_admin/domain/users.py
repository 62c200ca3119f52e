"""Domain models for mobile app users."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AppUser:
    """Mobile app user as exposed by the admin users endpoint."""

    id: str
    email: str
    name: str
    created_at: str | None = None
    password: str | None = None
    age: int | None = None
    gender: str | None = None
    height: float | None = None
    current_weight: float | None = None
    target_weight: float | None = None
    goal: str = "maintain"
    chest: float | None = None
    waist: float | None = None
    arms: float | None = None
    hips: float | None = None

    @property
    def password_preview(self) -> str:
        if not self.password:
            return "-"
        return f"{self.password[:10]}..."
