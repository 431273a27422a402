"""Domain entities for hostel-wide information published by the office."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notice:
    id: int | None
    title: str
    content: str
    priority: str = "general"
    created_at: datetime | None = None


@dataclass
class BusTiming:
    id: int | None
    route_name: str
    departure_time: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def changed_at(self) -> datetime | None:
        """Latest known modification time."""

        return self.updated_at or self.created_at


@dataclass
class EmergencyContact:
    id: int | None
    name: str
    designation: str
    phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def changed_at(self) -> datetime | None:
        return self.updated_at or self.created_at


__all__ = ["BusTiming", "EmergencyContact", "Notice"]
