"""Domain entities exposed by the application."""

from .announcements import BusTiming, EmergencyContact, Notice
from .complaint import (
    COMPLAINT_STATUS_IN_PROGRESS,
    COMPLAINT_STATUS_PENDING,
    COMPLAINT_STATUS_RESOLVED,
    Complaint,
)
from .conversation import Conversation, Message
from .notification import (
    BusNotification,
    ComplaintNotification,
    EmergencyNotification,
    LaundryNotification,
    LeaveNotification,
    MessageNotification,
    NoticeNotification,
    NotificationEvent,
    NotificationType,
    ServiceNotification,
    sort_notifications,
)
from .requests import (
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_COMPLETED,
    REQUEST_STATUS_PENDING,
    REQUEST_STATUS_REJECTED,
    LaundryRequest,
    LeaveRequest,
    ServiceRequest,
)
from .student import Student
from .user import ROLE_ADMIN, ROLE_STUDENT, User
from .watermark import NotificationWatermark

__all__ = [
    "BusTiming",
    "EmergencyContact",
    "Notice",
    "COMPLAINT_STATUS_IN_PROGRESS",
    "COMPLAINT_STATUS_PENDING",
    "COMPLAINT_STATUS_RESOLVED",
    "Complaint",
    "Conversation",
    "Message",
    "BusNotification",
    "ComplaintNotification",
    "EmergencyNotification",
    "LaundryNotification",
    "LeaveNotification",
    "MessageNotification",
    "NoticeNotification",
    "NotificationEvent",
    "NotificationType",
    "ServiceNotification",
    "sort_notifications",
    "REQUEST_STATUS_APPROVED",
    "REQUEST_STATUS_COMPLETED",
    "REQUEST_STATUS_PENDING",
    "REQUEST_STATUS_REJECTED",
    "LaundryRequest",
    "LeaveRequest",
    "ServiceRequest",
    "Student",
    "ROLE_ADMIN",
    "ROLE_STUDENT",
    "User",
    "NotificationWatermark",
]
