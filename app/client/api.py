"""HTTP client for the notification endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from app.domain.entities import ROLE_ADMIN, ROLE_STUDENT
from app.interfaces.api.schemas import NotificationRead

logger = logging.getLogger(__name__)

_ROLE_PATHS = {
    ROLE_ADMIN: "/notifications/admin",
    ROLE_STUDENT: "/notifications/student",
}


class NotificationApiError(RuntimeError):
    """Raised when the notification API cannot be reached or answers an error."""


def _path_for(role: str) -> str:
    try:
        return _ROLE_PATHS[role]
    except KeyError:
        raise ValueError(f"Unsupported role '{role}'") from None


class NotificationApiClient:
    """Thin async wrapper over ``httpx.AsyncClient``.

    Pass ``client`` to share a connection pool (or a mock transport in tests);
    otherwise one is created for ``base_url`` and closed by :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._token = token

    def set_token(self, token: str | None) -> None:
        self._token = token

    def _headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    async def _request(self, method: str, path: str) -> Any:
        try:
            response = await self._client.request(method, path, headers=self._headers())
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise NotificationApiError(
                f"{method} {path} failed with status {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise NotificationApiError(f"{method} {path} failed: {exc}") from exc

    async def fetch(self, role: str) -> list[NotificationRead]:
        """Return the current feed for ``role``, newest first."""

        payload = await self._request("GET", _path_for(role))
        if not isinstance(payload, list):
            raise NotificationApiError("Notification feed must be a JSON array")
        try:
            return [NotificationRead.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise NotificationApiError("Malformed notification payload") from exc

    async def clear(self, role: str) -> bool:
        """Ask the server to advance the caller's watermark."""

        payload = await self._request("POST", f"{_path_for(role)}/clear")
        return bool(isinstance(payload, dict) and payload.get("success"))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["NotificationApiClient", "NotificationApiError"]
