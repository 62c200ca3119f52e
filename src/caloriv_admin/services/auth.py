"""Admin session lifecycle: restore, login, logout and theme preference."""

import json
import logging
import secrets
from dataclasses import dataclass, field
from typing import Protocol

from caloriv_admin.domain.session import AdminSession, AdminUser

logger = logging.getLogger(__name__)

TOKEN_KEY = "admin_token"
USER_KEY = "admin_user"
THEME_KEY = "theme"
THEMES = ("light", "dark")
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthenticationError(Exception):
    """Raised when the supplied admin credentials are rejected."""


class SessionStore(Protocol):
    """Persistent key-value storage for the session."""

    def get(self, key: str) -> str | None:
        """Return a stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value."""

    def remove(self, key: str) -> None:
        """Remove a value if it exists."""


@dataclass
class AuthService:
    """Holds the current admin session and persists it to the store.

    A stored token is trusted until an explicit logout; there is no expiry
    and no re-validation against the backend.
    """

    store: SessionStore
    admin_email: str
    admin_password: str
    session: AdminSession | None = field(default=None, init=False)

    def restore(self) -> AdminSession | None:
        """Load a previously stored session, if any."""
        token = self.store.get(TOKEN_KEY)
        raw_user = self.store.get(USER_KEY)
        if not token or not raw_user:
            self.session = None
            return None
        try:
            user = _user_from_json(raw_user)
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding malformed stored admin user")
            self.session = None
            return None
        self.session = AdminSession(token=token, user=user)
        return self.session

    def login(self, email: str, password: str) -> AdminSession:
        """Verify credentials and start a new session."""
        email_ok = secrets.compare_digest(
            email.strip().encode(), self.admin_email.encode()
        )
        password_ok = secrets.compare_digest(
            password.encode(), self.admin_password.encode()
        )
        if not (email_ok and password_ok):
            logger.info("Rejected admin login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        session = AdminSession(
            token=secrets.token_urlsafe(32),
            user=AdminUser(email=self.admin_email, role="admin", name="Admin"),
        )
        self.store.set(TOKEN_KEY, session.token)
        self.store.set(USER_KEY, _user_to_json(session.user))
        self.session = session
        logger.info("Admin signed in")
        return session

    def logout(self) -> None:
        """Forget the current session."""
        self.store.remove(TOKEN_KEY)
        self.store.remove(USER_KEY)
        self.session = None
        logger.info("Admin signed out")

    def is_authenticated(self, token: str | None) -> bool:
        """Return true when the token belongs to the current session."""
        if not token or self.session is None:
            return False
        return secrets.compare_digest(token.encode(), self.session.token.encode())

    def get_theme(self) -> str:
        """Return the persisted theme preference."""
        theme = self.store.get(THEME_KEY)
        return theme if theme in THEMES else "light"

    def toggle_theme(self) -> str:
        """Flip between light and dark themes and persist the choice."""
        theme = "dark" if self.get_theme() == "light" else "light"
        self.store.set(THEME_KEY, theme)
        return theme


def _user_to_json(user: AdminUser) -> str:
    return json.dumps({"email": user.email, "name": user.name, "role": user.role})


def _user_from_json(raw: str) -> AdminUser:
    data = json.loads(raw)
    return AdminUser(
        email=data["email"], role=data.get("role") or "admin", name=data.get("name")
    )
