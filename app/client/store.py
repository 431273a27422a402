"""Polling store that keeps the unread notification badge up to date."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from app.domain.entities import ROLE_ADMIN, ROLE_STUDENT, NotificationType
from app.interfaces.api.schemas import NotificationRead

from .api import NotificationApiClient, NotificationApiError

logger = logging.getLogger(__name__)

FEED_POLL_INTERVAL = 10.0
NOTICE_POLL_INTERVAL = 30.0


class NotificationStore:
    """Own the current feed for one signed-in user.

    The store is created for an explicit ``(user_id, role)`` pair. Without a
    user it stays inert and reports zero counts. Each timer tick starts one
    fetch without waiting for the previous one; a response older than the
    last one applied is dropped, and a failed fetch keeps the last known
    state. ``types`` narrows the feed to the given notification types.
    """

    def __init__(
        self,
        api: NotificationApiClient,
        *,
        user_id: int | None,
        role: str | None,
        interval: float = FEED_POLL_INTERVAL,
        types: Iterable[str] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._api = api
        self.user_id = user_id
        self.role = role
        self.interval = interval
        self.types = frozenset(types) if types is not None else None
        self._counts = {ROLE_ADMIN: 0, ROLE_STUDENT: 0}
        self.items: list[NotificationRead] = []
        self.new_items: list[NotificationRead] = []
        self._poll_task: asyncio.Task | None = None
        self._inflight: set[asyncio.Task] = set()
        self._issued = 0
        self._applied = 0

    @classmethod
    def for_notices(
        cls, api: NotificationApiClient, *, user_id: int | None
    ) -> "NotificationStore":
        """Return a student store that only tracks hostel notices."""

        return cls(
            api,
            user_id=user_id,
            role=ROLE_STUDENT,
            interval=NOTICE_POLL_INTERVAL,
            types=[NotificationType.NOTICE.value],
        )

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None and self.role in self._counts

    @property
    def admin_count(self) -> int:
        return self._counts[ROLE_ADMIN]

    @property
    def student_count(self) -> int:
        return self._counts[ROLE_STUDENT]

    @property
    def running(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    async def refresh(self, request_id: int | None = None) -> None:
        """Fetch the feed once and update counts and items.

        ``request_id`` orders concurrent fetches; when omitted the next number
        is taken. A result older than the last applied one is discarded.
        """

        if not self.is_authenticated:
            return
        if request_id is None:
            request_id = self._next_request_id()
        try:
            items = await self._api.fetch(self.role)
        except NotificationApiError:
            logger.warning("Notification poll failed for user %s", self.user_id, exc_info=True)
            return

        if request_id < self._applied:
            logger.debug("Discarding stale notification poll %s", request_id)
            return
        self._applied = request_id
        if self.types is not None:
            items = [item for item in items if item.type in self.types]
        known = {item.id for item in self.items}
        self.new_items = [item for item in items if item.id not in known]
        self.items = items
        self._counts[self.role] = len(items)

    def start(self) -> None:
        """Fetch now and then on every tick. Must be called from a running loop."""

        if not self.is_authenticated:
            self._reset()
            return
        if self.running:
            return
        self._poll_task = asyncio.get_running_loop().create_task(self._poll())

    def stop(self) -> None:
        """Cancel the timer and any fetch still in flight."""

        if self._poll_task is not None:
            self._poll_task.cancel()
            self._poll_task = None
        for task in list(self._inflight):
            task.cancel()
        self._inflight.clear()

    def _reset(self) -> None:
        self._counts = {ROLE_ADMIN: 0, ROLE_STUDENT: 0}
        self.items = []
        self.new_items = []
        self._applied = self._issued

    def _next_request_id(self) -> int:
        self._issued += 1
        return self._issued

    async def _poll(self) -> None:
        while True:
            task = asyncio.get_running_loop().create_task(self.refresh(self._next_request_id()))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)
            await asyncio.sleep(self.interval)


__all__ = ["FEED_POLL_INTERVAL", "NOTICE_POLL_INTERVAL", "NotificationStore"]
