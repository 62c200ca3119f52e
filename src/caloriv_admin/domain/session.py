"""Domain models for the admin session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminUser:
    """Signed-in dashboard operator."""

    email: str
    role: str = "admin"
    name: str | None = None


@dataclass(frozen=True)
class AdminSession:
    """Token and user record for the signed-in operator."""

    token: str
    user: AdminUser
