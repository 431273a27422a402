"""Advance a user's notification watermark."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import NotificationWatermark
from app.infrastructure.repositories import WatermarkRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


class NotificationClearError(RuntimeError):
    """Raised when the watermark could not be persisted."""


def clear_notifications(session: Session, user_id: int) -> NotificationWatermark:
    """Hide every time-filtered notification that exists right now.

    The new watermark is the server clock at the time of the call and is
    committed before returning. Unread message counters are left untouched.
    """

    try:
        watermark = WatermarkRepository(session).advance(user_id, now_in_app_timezone())
    except SQLAlchemyError as exc:
        logger.exception("Could not clear notifications for user %s", user_id)
        raise NotificationClearError("Could not clear notifications") from exc
    logger.info(
        "Notifications cleared for user %s at %s",
        user_id,
        watermark.last_cleared_at.isoformat(),
    )
    return watermark


__all__ = ["NotificationClearError", "clear_notifications"]
