"""Persistence helpers for complaints."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import COMPLAINT_STATUS_PENDING, Complaint
from app.infrastructure.models import ComplaintModel, StudentModel, UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class ComplaintRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, complaint: Complaint) -> Complaint:
        model = ComplaintModel(
            student_id=complaint.student_id,
            title=complaint.title,
            description=complaint.description,
            status=complaint.status,
        )
        if complaint.created_at is not None:
            model.created_at = ensure_app_naive_datetime(complaint.created_at)
        if complaint.updated_at is not None:
            model.updated_at = ensure_app_naive_datetime(complaint.updated_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_pending_created_after(
        self, after: datetime
    ) -> Sequence[tuple[Complaint, str]]:
        """Return pending complaints filed after ``after`` with the student name."""

        query = (
            self.session.query(ComplaintModel, UserModel.full_name)
            .join(StudentModel, ComplaintModel.student_id == StudentModel.id)
            .join(UserModel, StudentModel.user_id == UserModel.id)
            .filter(ComplaintModel.status == COMPLAINT_STATUS_PENDING)
            .filter(ComplaintModel.created_at > ensure_app_naive_datetime(after))
            .order_by(ComplaintModel.created_at.desc())
        )
        return [(self._to_entity(model), full_name) for model, full_name in query.all()]

    def list_for_student_updated_after(
        self, student_id: int, *, statuses: Iterable[str], after: datetime
    ) -> Sequence[Complaint]:
        query = (
            self.session.query(ComplaintModel)
            .filter(ComplaintModel.student_id == student_id)
            .filter(ComplaintModel.status.in_(list(statuses)))
            .filter(ComplaintModel.updated_at > ensure_app_naive_datetime(after))
            .order_by(ComplaintModel.updated_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: ComplaintModel) -> Complaint:
        return Complaint(
            id=model.id,
            student_id=model.student_id,
            title=model.title,
            status=model.status,
            description=model.description,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ComplaintRepository"]
