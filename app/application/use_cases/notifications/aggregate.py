"""Build the merged, time-ordered notification feed for a caller."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import (
    NotificationEvent,
    NotificationWatermark,
    User,
    sort_notifications,
)
from app.infrastructure.repositories import StudentRepository, WatermarkRepository
from app.utils import epoch_in_app_timezone

from .sources import ADMIN_SOURCES, STUDENT_SOURCES, FeedContext, NotificationSource

logger = logging.getLogger(__name__)


class StudentProfileNotFoundError(LookupError):
    """Raised when a student account has no linked student profile."""


def load_watermark(session: Session, user_id: int) -> NotificationWatermark:
    """Return the caller's watermark, falling back to the epoch on read errors."""

    try:
        return WatermarkRepository(session).get(user_id)
    except Exception:
        logger.exception(
            "Could not read notification watermark for user %s; showing everything",
            user_id,
        )
        session.rollback()
        return NotificationWatermark(
            user_id=user_id, last_cleared_at=epoch_in_app_timezone()
        )


def aggregate_notifications(
    session: Session,
    context: FeedContext,
    sources: Sequence[tuple[str, NotificationSource]],
) -> list[NotificationEvent]:
    """Run every source and merge the results newest first.

    A source that raises is logged and contributes nothing; the remaining
    sources are still queried.
    """

    events: list[NotificationEvent] = []
    for name, source in sources:
        try:
            produced = source(session, context)
        except Exception:
            logger.exception(
                "Notification source '%s' failed for user %s", name, context.user.id
            )
            session.rollback()
            continue
        events.extend(event for event in produced if event.time is not None)
    return sort_notifications(events)


def list_admin_notifications(session: Session, user: User) -> list[NotificationEvent]:
    """Return unread notifications for an administrator."""

    context = FeedContext(user=user, watermark=load_watermark(session, user.id))
    return aggregate_notifications(session, context, ADMIN_SOURCES)


def list_student_notifications(session: Session, user: User) -> list[NotificationEvent]:
    """Return unread notifications for a student.

    Raises :class:`StudentProfileNotFoundError` when ``user`` has no student
    profile.
    """

    student = StudentRepository(session).get_by_user_id(user.id)
    if student is None:
        raise StudentProfileNotFoundError(f"User {user.id} has no student profile")

    context = FeedContext(
        user=user,
        watermark=load_watermark(session, user.id),
        student_id=student.id,
    )
    return aggregate_notifications(session, context, STUDENT_SOURCES)


__all__ = [
    "StudentProfileNotFoundError",
    "aggregate_notifications",
    "list_admin_notifications",
    "list_student_notifications",
    "load_watermark",
]
