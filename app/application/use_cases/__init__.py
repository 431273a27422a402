"""Aggregate application use cases."""

from .chat import mark_conversation_read, send_message
from .notifications import (
    clear_notifications,
    list_admin_notifications,
    list_student_notifications,
)
from .users import authenticate_user, create_student, create_user

__all__ = [
    "authenticate_user",
    "clear_notifications",
    "create_student",
    "create_user",
    "list_admin_notifications",
    "list_student_notifications",
    "mark_conversation_read",
    "send_message",
]
