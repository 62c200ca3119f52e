"""HTTP client for the Caloriv REST backend."""

from dataclasses import dataclass
from typing import Protocol

import httpx

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and backend status."


class BackendError(Exception):
    """Raised when the backend rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class BackendClient(Protocol):
    """Interface for calls against the Caloriv backend."""

    async def call(
        self,
        path: str,
        method: str = "GET",
        body: object | None = None,
        requires_auth: bool = False,
        params: dict[str, str | None] | None = None,
    ) -> dict[str, object]:
        """Issue a request and return the parsed JSON body."""


@dataclass
class HttpxBackendClient(BackendClient):
    """Backend client implemented with httpx."""

    base_url: str
    admin_key: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, base_url: str, admin_key: str, timeout: float = 15
    ) -> "HttpxBackendClient":
        """Create a backend client with a managed httpx session."""
        return cls(
            base_url=base_url,
            admin_key=admin_key,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def call(
        self,
        path: str,
        method: str = "GET",
        body: object | None = None,
        requires_auth: bool = False,
        params: dict[str, str | None] | None = None,
    ) -> dict[str, object]:
        """Send a JSON request, raising BackendError on any failure."""
        headers = {"Content-Type": "application/json"}
        if requires_auth:
            headers["X-Admin-Key"] = self.admin_key
        query = {key: value for key, value in (params or {}).items() if value}
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                params=query or None,
                json=body,
                timeout=self.timeout,
            )
        except httpx.TransportError as exc:
            raise BackendError(NETWORK_ERROR_MESSAGE) from exc

        data = _parse_body(response)
        if not response.is_success:
            raise BackendError(
                _error_message(data, response.status_code),
                status_code=response.status_code,
            )
        return data

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _parse_body(response: httpx.Response) -> dict[str, object]:
    try:
        data = response.json()
    except ValueError:
        return {}
    if isinstance(data, dict):
        return data
    return {"data": data}


def _error_message(data: dict[str, object], status_code: int) -> str:
    for key in ("message", "error"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return f"Request failed with status {status_code}"
