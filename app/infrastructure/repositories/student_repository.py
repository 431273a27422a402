"""Persistence helpers for student profiles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Student
from app.infrastructure.models import StudentModel


class StudentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, student_id: int) -> Student | None:
        model = self.session.get(StudentModel, student_id)
        return self._to_entity(model) if model else None

    def get_by_user_id(self, user_id: int) -> Student | None:
        model = (
            self.session.query(StudentModel)
            .filter(StudentModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, student: Student) -> Student:
        model = StudentModel(
            user_id=student.user_id,
            room_number=student.room_number,
            profile_photo=student.profile_photo,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: StudentModel) -> Student:
        return Student(
            id=model.id,
            user_id=model.user_id,
            room_number=model.room_number,
            profile_photo=model.profile_photo,
        )


__all__ = ["StudentRepository"]
