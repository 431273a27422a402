"""Use cases for the aggregated notification feed."""

from .aggregate import (
    StudentProfileNotFoundError,
    aggregate_notifications,
    list_admin_notifications,
    list_student_notifications,
    load_watermark,
)
from .clear import NotificationClearError, clear_notifications
from .sources import ADMIN_SOURCES, STUDENT_SOURCES, FeedContext

__all__ = [
    "ADMIN_SOURCES",
    "STUDENT_SOURCES",
    "FeedContext",
    "NotificationClearError",
    "StudentProfileNotFoundError",
    "aggregate_notifications",
    "clear_notifications",
    "list_admin_notifications",
    "list_student_notifications",
    "load_watermark",
]
