"""Domain entity representing a student complaint."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

COMPLAINT_STATUS_PENDING = "pending"
COMPLAINT_STATUS_IN_PROGRESS = "in-progress"
COMPLAINT_STATUS_RESOLVED = "resolved"


@dataclass
class Complaint:
    id: int | None
    student_id: int
    title: str
    status: str = COMPLAINT_STATUS_PENDING
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "COMPLAINT_STATUS_PENDING",
    "COMPLAINT_STATUS_IN_PROGRESS",
    "COMPLAINT_STATUS_RESOLVED",
    "Complaint",
]
