"""Storage for the per-user notification watermark.

The watermark lives in ``users.last_notifications_cleared_at``. A missing
value (or a missing user) reads as the epoch so that everything is shown.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import NotificationWatermark
from app.infrastructure.models import UserModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    epoch_in_app_timezone,
)


class WatermarkRepository:
    """Read and advance :class:`NotificationWatermark` values."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> NotificationWatermark:
        stored = (
            self.session.query(UserModel.last_notifications_cleared_at)
            .filter(UserModel.id == user_id)
            .scalar()
        )
        last_cleared_at = ensure_app_timezone(stored) or epoch_in_app_timezone()
        return NotificationWatermark(user_id=user_id, last_cleared_at=last_cleared_at)

    def advance(self, user_id: int, moment: datetime) -> NotificationWatermark:
        """Persist ``moment`` as the new watermark and commit immediately."""

        try:
            self.session.query(UserModel).filter(UserModel.id == user_id).update(
                {UserModel.last_notifications_cleared_at: ensure_app_naive_datetime(moment)},
                synchronize_session=False,
            )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return NotificationWatermark(
            user_id=user_id, last_cleared_at=ensure_app_timezone(moment)
        )


__all__ = ["WatermarkRepository"]
