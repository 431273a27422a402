"""Computed notification records shown in the notification panel.

Notifications are never stored. Every aggregator call maps rows from the event
sources into one of the variants below, each carrying the identifiers the
client needs to route a tap.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar


class NotificationType(str, Enum):
    """Closed set of notification kinds, in source enumeration order."""

    MESSAGE = "message"
    COMPLAINT = "complaint"
    SERVICE = "service"
    LAUNDRY = "laundry"
    LEAVE = "leave"
    BUS = "bus"
    EMERGENCY = "emergency"
    NOTICE = "notice"


@dataclass(frozen=True)
class NotificationEvent(ABC):
    """Base variant shared by every notification kind."""

    type: ClassVar[NotificationType]
    id_prefix: ClassVar[str]

    title: str
    subtitle: str
    time: datetime

    @property
    @abstractmethod
    def source_key(self) -> str:
        """Identifier of the source row, unique within the type."""

    @property
    def id(self) -> str:
        return f"{self.id_prefix}-{self.source_key}"

    @property
    def data(self) -> dict[str, Any]:
        return {}

    @property
    def read(self) -> bool:
        # Presence in the feed is the unread signal.
        return False


@dataclass(frozen=True)
class MessageNotification(NotificationEvent):
    type: ClassVar[NotificationType] = NotificationType.MESSAGE
    id_prefix: ClassVar[str] = "msg"

    student_id: int
    unread_count: int
    photo: str | None = None

    @property
    def source_key(self) -> str:
        return str(self.student_id)

    @property
    def data(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"student_id": self.student_id}
        if self.photo:
            payload["photo"] = self.photo
        return payload


@dataclass(frozen=True)
class _EntityNotification(NotificationEvent):
    """Variant routed by the primary key of its source row."""

    entity_id: int

    @property
    def source_key(self) -> str:
        return str(self.entity_id)

    @property
    def data(self) -> dict[str, Any]:
        return {"id": self.entity_id}


@dataclass(frozen=True)
class ComplaintNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.COMPLAINT
    id_prefix: ClassVar[str] = "complaint"


@dataclass(frozen=True)
class ServiceNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.SERVICE
    id_prefix: ClassVar[str] = "service"


@dataclass(frozen=True)
class LaundryNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.LAUNDRY
    id_prefix: ClassVar[str] = "laundry"


@dataclass(frozen=True)
class LeaveNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.LEAVE
    id_prefix: ClassVar[str] = "leave"


@dataclass(frozen=True)
class BusNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.BUS
    id_prefix: ClassVar[str] = "bus"


@dataclass(frozen=True)
class EmergencyNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.EMERGENCY
    id_prefix: ClassVar[str] = "emergency"


@dataclass(frozen=True)
class NoticeNotification(_EntityNotification):
    type: ClassVar[NotificationType] = NotificationType.NOTICE
    id_prefix: ClassVar[str] = "notice"

    priority: str = "general"

    @property
    def data(self) -> dict[str, Any]:
        return {"id": self.entity_id, "priority": self.priority}


def sort_notifications(events: Iterable[NotificationEvent]) -> list[NotificationEvent]:
    """Return ``events`` newest first.

    The sort is stable, so events sharing a timestamp keep the order in which
    their sources were queried.
    """

    return sorted(events, key=lambda event: event.time, reverse=True)


__all__ = [
    "NotificationType",
    "NotificationEvent",
    "MessageNotification",
    "ComplaintNotification",
    "ServiceNotification",
    "LaundryNotification",
    "LeaveNotification",
    "BusNotification",
    "EmergencyNotification",
    "NoticeNotification",
    "sort_notifications",
]
