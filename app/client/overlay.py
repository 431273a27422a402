"""State holder behind the notification panel.

The panel moves through ``CLOSED -> OPENING -> OPEN -> CLOSING -> CLOSED``.
Every open fetches a fresh list; results that arrive after the panel was
closed or reopened are discarded. Clearing empties the list right away and
puts it back if the server rejects the clear.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from app.interfaces.api.schemas import NotificationRead

from .api import NotificationApiClient, NotificationApiError
from .routing import Route, resolve_route

logger = logging.getLogger(__name__)


class OverlayState(Enum):
    CLOSED = "closed"
    OPENING = "opening"
    OPEN = "open"
    CLOSING = "closing"


class NotificationOverlay:
    def __init__(
        self,
        api: NotificationApiClient,
        *,
        role: str,
        navigate: Callable[[Route], None],
        on_state_change: Callable[[OverlayState], None] | None = None,
    ) -> None:
        self._api = api
        self.role = role
        self._navigate = navigate
        self._on_state_change = on_state_change
        self.state = OverlayState.CLOSED
        self.items: list[NotificationRead] = []
        self._generation = 0

    @property
    def count(self) -> int:
        return len(self.items)

    def _set_state(self, state: OverlayState) -> None:
        self.state = state
        if self._on_state_change is not None:
            self._on_state_change(state)

    async def open(self) -> list[NotificationRead]:
        """Open the panel and load a fresh list."""

        self._generation += 1
        request_id = self._generation
        self.items = []
        self._set_state(OverlayState.OPENING)

        try:
            items = await self._api.fetch(self.role)
        except NotificationApiError:
            logger.warning("Could not load notifications", exc_info=True)
            items = []

        if request_id != self._generation or self.state is not OverlayState.OPENING:
            logger.debug("Discarding stale notification response %s", request_id)
            return self.items

        self.items = items
        self._set_state(OverlayState.OPEN)
        return self.items

    def close(self) -> None:
        if self.state is OverlayState.CLOSED:
            return
        self._generation += 1
        self._set_state(OverlayState.CLOSING)
        self.items = []
        self._set_state(OverlayState.CLOSED)

    async def clear(self) -> bool:
        """Empty the list optimistically; restore it when the clear fails."""

        if not self.items:
            return False

        previous = list(self.items)
        request_id = self._generation
        self.items = []

        try:
            cleared = await self._api.clear(self.role)
        except NotificationApiError:
            logger.warning("Could not clear notifications", exc_info=True)
            cleared = False

        if not cleared and request_id == self._generation:
            self.items = previous
        return cleared

    def press(self, item: NotificationRead) -> Route | None:
        """Close the panel and navigate to the screen for ``item``."""

        route = resolve_route(self.role, item.type, item.data)
        self.close()
        if route is not None:
            self._navigate(route)
        return route


__all__ = ["NotificationOverlay", "OverlayState"]
