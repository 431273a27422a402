"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from app.domain.entities import NotificationEvent


class NotificationRead(BaseModel):
    """Representation of a feed entry delivered to the client."""

    id: str
    type: str
    title: str
    subtitle: str
    time: datetime
    data: dict[str, Any] = Field(default_factory=dict)
    read: Literal[False] = False

    @classmethod
    def from_event(cls, event: NotificationEvent) -> "NotificationRead":
        return cls(
            id=event.id,
            type=event.type.value,
            title=event.title,
            subtitle=event.subtitle,
            time=event.time,
            data=event.data,
            read=event.read,
        )


class NotificationClearResponse(BaseModel):
    success: bool


__all__ = ["NotificationClearResponse", "NotificationRead"]
