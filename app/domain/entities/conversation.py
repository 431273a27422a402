"""Domain entities for the student/admin chat."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import ROLE_ADMIN


@dataclass
class Conversation:
    """Single chat thread between a student and the hostel administration.

    ``admin_unread`` and ``student_unread`` count the messages each side has
    not opened yet. Only the messaging use cases change them.
    """

    id: int | None
    student_id: int
    last_message: str | None = None
    last_message_time: datetime | None = None
    admin_unread: int = 0
    student_unread: int = 0

    def unread_for(self, role: str) -> int:
        """Return the unread counter seen by ``role``."""

        return self.admin_unread if role == ROLE_ADMIN else self.student_unread


@dataclass
class Message:
    """Message sent inside a :class:`Conversation`."""

    id: int | None
    conversation_id: int
    sender_id: int
    content: str
    created_at: datetime | None = None


__all__ = ["Conversation", "Message"]
