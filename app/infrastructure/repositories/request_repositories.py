"""Persistence helpers for leave, laundry and service requests.

The three workflows share the same lifecycle columns (``status``,
``created_at``, ``updated_at``) so the queries used by the notification feed
live in one base class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import (
    REQUEST_STATUS_PENDING,
    LaundryRequest,
    LeaveRequest,
    ServiceRequest,
)
from app.infrastructure.models import (
    LaundryRequestModel,
    LeaveRequestModel,
    ServiceRequestModel,
    StudentModel,
    UserModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class _StudentRequestRepository(ABC):
    model: Any
    fields: tuple[str, ...] = ()

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entity):
        model = self.model(student_id=entity.student_id, status=entity.status)
        for name in self.fields:
            setattr(model, name, getattr(entity, name))
        if entity.created_at is not None:
            model.created_at = ensure_app_naive_datetime(entity.created_at)
        if entity.updated_at is not None:
            model.updated_at = ensure_app_naive_datetime(entity.updated_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_pending_created_after(self, after: datetime) -> Sequence[tuple[Any, str]]:
        """Return pending requests created after ``after`` with the student name."""

        model = self.model
        query = (
            self.session.query(model, UserModel.full_name)
            .join(StudentModel, model.student_id == StudentModel.id)
            .join(UserModel, StudentModel.user_id == UserModel.id)
            .filter(model.status == REQUEST_STATUS_PENDING)
            .filter(model.created_at > ensure_app_naive_datetime(after))
            .order_by(model.created_at.desc())
        )
        return [(self._to_entity(row), full_name) for row, full_name in query.all()]

    def list_for_student_updated_after(
        self, student_id: int, *, statuses: Iterable[str], after: datetime
    ) -> Sequence[Any]:
        model = self.model
        query = (
            self.session.query(model)
            .filter(model.student_id == student_id)
            .filter(model.status.in_(list(statuses)))
            .filter(model.updated_at > ensure_app_naive_datetime(after))
            .order_by(model.updated_at.desc())
        )
        return [self._to_entity(row) for row in query.all()]

    @abstractmethod
    def _to_entity(self, model):
        """Map a row of ``model`` to its domain entity."""


class LeaveRequestRepository(_StudentRequestRepository):
    model = LeaveRequestModel
    fields = ("start_date", "end_date", "reason")

    def _to_entity(self, model: LeaveRequestModel) -> LeaveRequest:
        return LeaveRequest(
            id=model.id,
            student_id=model.student_id,
            start_date=model.start_date,
            end_date=model.end_date,
            reason=model.reason,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


class LaundryRequestRepository(_StudentRequestRepository):
    model = LaundryRequestModel
    fields = ("items_count",)

    def _to_entity(self, model: LaundryRequestModel) -> LaundryRequest:
        return LaundryRequest(
            id=model.id,
            student_id=model.student_id,
            items_count=model.items_count,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


class ServiceRequestRepository(_StudentRequestRepository):
    model = ServiceRequestModel
    fields = ("service_type",)

    def _to_entity(self, model: ServiceRequestModel) -> ServiceRequest:
        return ServiceRequest(
            id=model.id,
            student_id=model.student_id,
            service_type=model.service_type,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = [
    "LeaveRequestRepository",
    "LaundryRequestRepository",
    "ServiceRequestRepository",
]
