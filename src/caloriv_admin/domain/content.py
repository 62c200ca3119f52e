"""Domain models for app-wide content and configuration."""

from dataclasses import dataclass

ANNOUNCEMENT_TYPES = ("info", "warning", "success")


@dataclass(frozen=True)
class Announcement:
    """Broadcast message shown in the mobile app."""

    id: str
    title: str
    message: str
    type: str = "info"
    expires_at: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class Promotion:
    """Promotional banner shown after an install delay."""

    id: str
    image_url: str
    external_link: str
    delay_days: int = 0
    is_active: bool = False
    title: str | None = None


@dataclass(frozen=True)
class AppConfig:
    """Remote configuration controlling the mobile app update screen."""

    required_version: str = "1.0.0"
    force_update: bool = False
    update_message: str = (
        "A new version of Caloriv is available! Update now for the best experience."
    )
    update_url: str = "https://caloriv-web.vercel.app/"


@dataclass(frozen=True)
class DashboardStats:
    """Headline counters for the dashboard."""

    users: int = 0
    foods: int = 0
    exercises: int = 0
    pending: int = 0
