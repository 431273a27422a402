"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            full_name=user.full_name,
            email=user.email.strip().lower(),
            password=user.password,
            role=user.role.lower(),
            is_active=user.is_active,
            created_at=ensure_app_naive_datetime(
                user.created_at or now_in_app_timezone()
            ),
            last_notifications_cleared_at=ensure_app_naive_datetime(
                user.last_notifications_cleared_at
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_ids_by_role(self, role: str) -> list[int]:
        query = self.session.query(UserModel.id).filter(UserModel.role == role.lower())
        return [user_id for (user_id,) in query.all()]

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=model.role,
            full_name=model.full_name,
            email=model.email,
            password=model.password,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
            last_notifications_cleared_at=ensure_app_timezone(
                model.last_notifications_cleared_at
            ),
        )


__all__ = ["UserRepository"]
