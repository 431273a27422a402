"""Messaging use cases that own the per-conversation unread counters."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Conversation, Message, User
from app.infrastructure.repositories import ConversationRepository, StudentRepository

logger = logging.getLogger(__name__)


class ConversationAccessError(PermissionError):
    """Raised when a student addresses a conversation that is not theirs."""


def _resolve_conversation(session: Session, user: User, student_id: int) -> Conversation:
    student_repository = StudentRepository(session)
    if user.is_admin():
        if student_repository.get(student_id) is None:
            raise LookupError(f"Student {student_id} not found")
    else:
        own = student_repository.get_by_user_id(user.id)
        if own is None or own.id != student_id:
            raise ConversationAccessError("Students can only access their own conversation")
    return ConversationRepository(session).get_or_create(student_id)


def send_message(session: Session, *, sender: User, student_id: int, content: str) -> Message:
    """Store ``content`` and increment the other side's unread counter."""

    text = content.strip()
    if not text:
        raise ValueError("Message content is required")

    conversation = _resolve_conversation(session, sender, student_id)
    message = ConversationRepository(session).add_message(
        conversation.id,
        sender_id=sender.id,
        sender_role=sender.role,
        content=text,
    )
    logger.debug(
        "Message %s stored in conversation %s by user %s",
        message.id,
        conversation.id,
        sender.id,
    )
    return message


def mark_conversation_read(session: Session, *, reader: User, student_id: int) -> Conversation:
    """Zero the reader's unread counter for the conversation of ``student_id``."""

    conversation = _resolve_conversation(session, reader, student_id)
    return ConversationRepository(session).reset_unread(
        conversation.id, reader_role=reader.role
    )


__all__ = ["ConversationAccessError", "mark_conversation_read", "send_message"]
