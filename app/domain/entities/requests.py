"""Domain entities for the request workflows handled by the hostel office."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

REQUEST_STATUS_PENDING = "pending"
REQUEST_STATUS_APPROVED = "approved"
REQUEST_STATUS_REJECTED = "rejected"
REQUEST_STATUS_COMPLETED = "completed"


@dataclass
class LeaveRequest:
    """Absence request raised by a student."""

    id: int | None
    student_id: int
    start_date: date
    end_date: date
    reason: str | None = None
    status: str = REQUEST_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class LaundryRequest:
    """Laundry pickup request raised by a student."""

    id: int | None
    student_id: int
    items_count: int
    status: str = REQUEST_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class ServiceRequest:
    """Room service request (cleaning, repairs, ...) raised by a student."""

    id: int | None
    student_id: int
    service_type: str
    status: str = REQUEST_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "REQUEST_STATUS_PENDING",
    "REQUEST_STATUS_APPROVED",
    "REQUEST_STATUS_REJECTED",
    "REQUEST_STATUS_COMPLETED",
    "LeaveRequest",
    "LaundryRequest",
    "ServiceRequest",
]
