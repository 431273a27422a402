"""Event sources feeding the notification panel, grouped per role.

Every source is a callable receiving the open session and the
:class:`FeedContext` of the caller. It returns notification variants that
already satisfy the source's filter policy (status and watermark). Sources
only read; unread counters and domain rows are never modified here.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    COMPLAINT_STATUS_IN_PROGRESS,
    COMPLAINT_STATUS_RESOLVED,
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_COMPLETED,
    REQUEST_STATUS_REJECTED,
    BusNotification,
    ComplaintNotification,
    EmergencyNotification,
    LaundryNotification,
    LeaveNotification,
    MessageNotification,
    NoticeNotification,
    NotificationEvent,
    NotificationWatermark,
    ServiceNotification,
    User,
)
from app.infrastructure.repositories import (
    BusTimingRepository,
    ComplaintRepository,
    ConversationRepository,
    EmergencyContactRepository,
    LaundryRequestRepository,
    LeaveRequestRepository,
    NoticeRepository,
    ServiceRequestRepository,
)

STUDENT_LEAVE_STATUSES = (REQUEST_STATUS_APPROVED, REQUEST_STATUS_REJECTED)
STUDENT_COMPLAINT_STATUSES = (COMPLAINT_STATUS_RESOLVED, COMPLAINT_STATUS_IN_PROGRESS)
STUDENT_SERVICE_STATUSES = (
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_COMPLETED,
    REQUEST_STATUS_REJECTED,
)


@dataclass(frozen=True)
class FeedContext:
    """Identity and watermark of the user whose feed is being built."""

    user: User
    watermark: NotificationWatermark
    student_id: int | None = None

    @property
    def after(self) -> datetime:
        return self.watermark.last_cleared_at


NotificationSource = Callable[[Session, FeedContext], Sequence[NotificationEvent]]


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def _format_day(value: date) -> str:
    return value.strftime("%d/%m/%Y")


# ---- Admin feed ----


def admin_messages(session: Session, context: FeedContext) -> list[NotificationEvent]:
    rows = ConversationRepository(session).list_unread_for_admin(after=context.after)
    return [
        MessageNotification(
            title=f"New messages from {full_name}",
            subtitle=_plural(conversation.admin_unread, "unread message"),
            time=conversation.last_message_time,
            student_id=conversation.student_id,
            unread_count=conversation.admin_unread,
            photo=photo,
        )
        for conversation, full_name, photo in rows
    ]


def admin_complaints(session: Session, context: FeedContext) -> list[NotificationEvent]:
    rows = ComplaintRepository(session).list_pending_created_after(context.after)
    return [
        ComplaintNotification(
            title="New Complaint",
            subtitle=f"{complaint.title} - {full_name}",
            time=complaint.created_at,
            entity_id=complaint.id,
        )
        for complaint, full_name in rows
    ]


def admin_services(session: Session, context: FeedContext) -> list[NotificationEvent]:
    rows = ServiceRequestRepository(session).list_pending_created_after(context.after)
    return [
        ServiceNotification(
            title="Service Request",
            subtitle=f"{request.service_type} - {full_name}",
            time=request.created_at,
            entity_id=request.id,
        )
        for request, full_name in rows
    ]


def admin_laundry(session: Session, context: FeedContext) -> list[NotificationEvent]:
    rows = LaundryRequestRepository(session).list_pending_created_after(context.after)
    return [
        LaundryNotification(
            title="Laundry Request",
            subtitle=f"{request.items_count} items - {full_name}",
            time=request.created_at,
            entity_id=request.id,
        )
        for request, full_name in rows
    ]


def admin_leaves(session: Session, context: FeedContext) -> list[NotificationEvent]:
    rows = LeaveRequestRepository(session).list_pending_created_after(context.after)
    return [
        LeaveNotification(
            title="Leave Request",
            subtitle=f"{full_name} ({_format_day(request.start_date)})",
            time=request.created_at,
            entity_id=request.id,
        )
        for request, full_name in rows
    ]


# ---- Student feed ----


def student_bus_timings(session: Session, context: FeedContext) -> list[NotificationEvent]:
    timings = BusTimingRepository(session).list_changed_after(context.after)
    return [
        BusNotification(
            title="Bus Timing Update",
            subtitle=f"Route {timing.route_name} has been updated.",
            time=timing.changed_at,
            entity_id=timing.id,
        )
        for timing in timings
    ]


def student_emergency_contacts(
    session: Session, context: FeedContext
) -> list[NotificationEvent]:
    contacts = EmergencyContactRepository(session).list_changed_after(context.after)
    return [
        EmergencyNotification(
            title="Emergency Contact Update",
            subtitle=f"{contact.name} ({contact.designation}) added/updated.",
            time=contact.changed_at,
            entity_id=contact.id,
        )
        for contact in contacts
    ]


def student_messages(session: Session, context: FeedContext) -> list[NotificationEvent]:
    conversation = ConversationRepository(session).get_unread_for_student(
        context.student_id, after=context.after
    )
    if conversation is None:
        return []
    return [
        MessageNotification(
            title="New Message from Admin",
            subtitle=_plural(conversation.student_unread, "new message"),
            time=conversation.last_message_time,
            student_id=conversation.student_id,
            unread_count=conversation.student_unread,
        )
    ]


def student_leaves(session: Session, context: FeedContext) -> list[NotificationEvent]:
    requests = LeaveRequestRepository(session).list_for_student_updated_after(
        context.student_id, statuses=STUDENT_LEAVE_STATUSES, after=context.after
    )
    return [
        LeaveNotification(
            title=f"Leave Request {request.status.capitalize()}",
            subtitle=(
                f"Your leave for {_format_day(request.start_date)} "
                f"has been {request.status}."
            ),
            time=request.updated_at,
            entity_id=request.id,
        )
        for request in requests
    ]


def student_complaints(session: Session, context: FeedContext) -> list[NotificationEvent]:
    complaints = ComplaintRepository(session).list_for_student_updated_after(
        context.student_id, statuses=STUDENT_COMPLAINT_STATUSES, after=context.after
    )
    return [
        ComplaintNotification(
            title="Complaint Update",
            subtitle=f'"{complaint.title}" is now {complaint.status}.',
            time=complaint.updated_at,
            entity_id=complaint.id,
        )
        for complaint in complaints
    ]


def student_services(session: Session, context: FeedContext) -> list[NotificationEvent]:
    requests = ServiceRequestRepository(session).list_for_student_updated_after(
        context.student_id, statuses=STUDENT_SERVICE_STATUSES, after=context.after
    )
    return [
        ServiceNotification(
            title="Service Request Update",
            subtitle=f"{request.service_type} request is {request.status}.",
            time=request.updated_at,
            entity_id=request.id,
        )
        for request in requests
    ]


def student_notices(session: Session, context: FeedContext) -> list[NotificationEvent]:
    notices = NoticeRepository(session).list_created_after(context.after)
    return [
        NoticeNotification(
            title=notice.title,
            subtitle=notice.content,
            time=notice.created_at,
            entity_id=notice.id,
            priority=notice.priority,
        )
        for notice in notices
    ]


ADMIN_SOURCES: tuple[tuple[str, NotificationSource], ...] = (
    ("message", admin_messages),
    ("complaint", admin_complaints),
    ("service", admin_services),
    ("laundry", admin_laundry),
    ("leave", admin_leaves),
)

STUDENT_SOURCES: tuple[tuple[str, NotificationSource], ...] = (
    ("bus", student_bus_timings),
    ("emergency", student_emergency_contacts),
    ("message", student_messages),
    ("leave", student_leaves),
    ("complaint", student_complaints),
    ("service", student_services),
    ("notice", student_notices),
)


__all__ = [
    "ADMIN_SOURCES",
    "STUDENT_SOURCES",
    "FeedContext",
    "NotificationSource",
]
