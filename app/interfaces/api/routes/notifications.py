"""Endpoints serving the aggregated notification feed per role."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationClearError,
    StudentProfileNotFoundError,
    clear_notifications,
    list_admin_notifications,
    list_student_notifications,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin, require_student
from app.interfaces.api.schemas import NotificationClearResponse, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _clear(db: Session, user: User) -> NotificationClearResponse:
    try:
        clear_notifications(db, user.id)
    except NotificationClearError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return NotificationClearResponse(success=True)


@router.get("/admin", response_model=list[NotificationRead])
def get_admin_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> list[NotificationRead]:
    """Return pending requests and unread chats newer than the admin's last clear."""

    events = list_admin_notifications(db, current_user)
    return [NotificationRead.from_event(event) for event in events]


@router.post("/admin/clear", response_model=NotificationClearResponse)
def clear_admin_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> NotificationClearResponse:
    return _clear(db, current_user)


@router.get("/student", response_model=list[NotificationRead])
def get_student_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
) -> list[NotificationRead]:
    """Return updates addressed to the authenticated student."""

    try:
        events = list_student_notifications(db, current_user)
    except StudentProfileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student profile not found",
        ) from exc
    return [NotificationRead.from_event(event) for event in events]


@router.post("/student/clear", response_model=NotificationClearResponse)
def clear_student_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
) -> NotificationClearResponse:
    return _clear(db, current_user)
