"""Domain entity for the per-user "notifications last cleared" mark."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NotificationWatermark:
    """Point in time before which time-filtered notifications are hidden."""

    user_id: int
    last_cleared_at: datetime

    def admits(self, moment: datetime | None) -> bool:
        """Return ``True`` when an event at ``moment`` is newer than the mark."""

        return moment is not None and moment > self.last_cleared_at


__all__ = ["NotificationWatermark"]
