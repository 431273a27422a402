"""SQLAlchemy models for chat conversations and their messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ConversationModel(Base):
    """One conversation per student with running unread counters per side."""

    __tablename__ = "conversations"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer,
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    last_message = Column(Text, nullable=True)
    last_message_time = Column(DateTime, nullable=True)
    admin_unread = Column(Integer, nullable=False, default=0)
    student_unread = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    student = relationship("StudentModel", lazy="joined")


class MessageModel(Base):
    """Single chat message."""

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    conversation_id = Column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ConversationModel", "MessageModel"]
