"""Persistence helpers for chat conversations and unread counters."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_ADMIN, Conversation, Message
from app.infrastructure.models import (
    ConversationModel,
    MessageModel,
    StudentModel,
    UserModel,
)
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ConversationRepository:
    """Provide access to conversations and their per-side unread counters."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_student_id(self, student_id: int) -> Conversation | None:
        model = self._get_model(student_id)
        return self._to_entity(model) if model else None

    def get_or_create(self, student_id: int) -> Conversation:
        model = self._get_model(student_id)
        if model is None:
            model = ConversationModel(student_id=student_id, admin_unread=0, student_unread=0)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_unread_for_admin(
        self, *, after: datetime
    ) -> Sequence[tuple[Conversation, str, str | None]]:
        """Return conversations with admin-side unread messages newer than ``after``.

        Each entry carries the student's full name and profile photo.
        """

        query = (
            self.session.query(ConversationModel, UserModel.full_name, StudentModel.profile_photo)
            .join(StudentModel, ConversationModel.student_id == StudentModel.id)
            .join(UserModel, StudentModel.user_id == UserModel.id)
            .filter(ConversationModel.admin_unread > 0)
            .filter(ConversationModel.last_message_time > ensure_app_naive_datetime(after))
            .order_by(ConversationModel.last_message_time.desc())
        )
        return [
            (self._to_entity(model), full_name, photo)
            for model, full_name, photo in query.all()
        ]

    def get_unread_for_student(
        self, student_id: int, *, after: datetime
    ) -> Conversation | None:
        model = (
            self.session.query(ConversationModel)
            .filter(ConversationModel.student_id == student_id)
            .filter(ConversationModel.student_unread > 0)
            .filter(ConversationModel.last_message_time > ensure_app_naive_datetime(after))
            .first()
        )
        return self._to_entity(model) if model else None

    def add_message(
        self,
        conversation_id: int,
        *,
        sender_id: int,
        sender_role: str,
        content: str,
    ) -> Message:
        """Store a message and bump the unread counter of the other side."""

        model = self.session.get(ConversationModel, conversation_id)
        if model is None:
            msg = f"Conversation with id {conversation_id} not found"
            raise ValueError(msg)

        sent_at = ensure_app_naive_datetime(now_in_app_timezone())
        message = MessageModel(
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=content,
            created_at=sent_at,
        )
        model.last_message = content
        model.last_message_time = sent_at
        if sender_role == ROLE_ADMIN:
            model.student_unread = (model.student_unread or 0) + 1
        else:
            model.admin_unread = (model.admin_unread or 0) + 1
        self.session.add_all([model, message])
        self.session.commit()
        self.session.refresh(message)
        return Message(
            id=message.id,
            conversation_id=message.conversation_id,
            sender_id=message.sender_id,
            content=message.content,
            created_at=ensure_app_timezone(message.created_at),
        )

    def reset_unread(self, conversation_id: int, *, reader_role: str) -> Conversation:
        """Zero the counter belonging to ``reader_role``."""

        model = self.session.get(ConversationModel, conversation_id)
        if model is None:
            msg = f"Conversation with id {conversation_id} not found"
            raise ValueError(msg)
        if reader_role == ROLE_ADMIN:
            model.admin_unread = 0
        else:
            model.student_unread = 0
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, student_id: int) -> ConversationModel | None:
        return (
            self.session.query(ConversationModel)
            .filter(ConversationModel.student_id == student_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: ConversationModel) -> Conversation:
        return Conversation(
            id=model.id,
            student_id=model.student_id,
            last_message=model.last_message,
            last_message_time=ensure_app_timezone(model.last_message_time),
            admin_unread=model.admin_unread or 0,
            student_unread=model.student_unread or 0,
        )


__all__ = ["ConversationRepository"]
