"""Repository implementations for infrastructure layer."""

from .announcement_repositories import (
    BusTimingRepository,
    EmergencyContactRepository,
    NoticeRepository,
)
from .complaint_repository import ComplaintRepository
from .conversation_repository import ConversationRepository
from .request_repositories import (
    LaundryRequestRepository,
    LeaveRequestRepository,
    ServiceRequestRepository,
)
from .student_repository import StudentRepository
from .user_repository import UserRepository
from .watermark_repository import WatermarkRepository

__all__ = [
    "BusTimingRepository",
    "EmergencyContactRepository",
    "NoticeRepository",
    "ComplaintRepository",
    "ConversationRepository",
    "LaundryRequestRepository",
    "LeaveRequestRepository",
    "ServiceRequestRepository",
    "StudentRepository",
    "UserRepository",
    "WatermarkRepository",
]
