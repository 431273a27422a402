"""Minimal chat endpoints driving the unread message counters."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.chat import (
    ConversationAccessError,
    mark_conversation_read,
    send_message,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user
from app.interfaces.api.schemas import ConversationRead, MessageCreate, MessageRead

router = APIRouter(prefix="/chat", tags=["chat"])


def _translate_errors(exc: Exception) -> HTTPException:
    if isinstance(exc, ConversationAccessError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, LookupError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post(
    "/{student_id}/messages",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
)
def post_message(
    student_id: int,
    payload: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageRead:
    try:
        message = send_message(
            db, sender=current_user, student_id=student_id, content=payload.content
        )
    except (ConversationAccessError, LookupError, ValueError) as exc:
        raise _translate_errors(exc) from exc
    return MessageRead(
        id=message.id,
        conversation_id=message.conversation_id,
        sender_id=message.sender_id,
        content=message.content,
        created_at=message.created_at,
    )


@router.post("/{student_id}/read", response_model=ConversationRead)
def read_conversation(
    student_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ConversationRead:
    """Mark the conversation as opened by the caller."""

    try:
        conversation = mark_conversation_read(
            db, reader=current_user, student_id=student_id
        )
    except (ConversationAccessError, LookupError, ValueError) as exc:
        raise _translate_errors(exc) from exc
    return ConversationRead(
        id=conversation.id,
        student_id=conversation.student_id,
        last_message=conversation.last_message,
        last_message_time=conversation.last_message_time,
        admin_unread=conversation.admin_unread,
        student_unread=conversation.student_unread,
    )
