"""File-backed storage for the admin session and UI preferences."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from caloriv_admin.services.auth import SessionStore

logger = logging.getLogger(__name__)


@dataclass
class JsonFileSessionStore(SessionStore):
    """Keeps string values in a small JSON document on disk."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return a stored value, if present."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store a value and flush the document."""
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        """Remove a value if it exists."""
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable session file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
