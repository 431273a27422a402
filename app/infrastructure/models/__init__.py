"""ORM models used by the application infrastructure."""

from .announcements import BusTimingModel, EmergencyContactModel, NoticeModel
from .complaint import ComplaintModel
from .conversation import ConversationModel, MessageModel
from .requests import LaundryRequestModel, LeaveRequestModel, ServiceRequestModel
from .student import StudentModel
from .user import UserModel

__all__ = [
    "BusTimingModel",
    "EmergencyContactModel",
    "NoticeModel",
    "ComplaintModel",
    "ConversationModel",
    "MessageModel",
    "LaundryRequestModel",
    "LeaveRequestModel",
    "ServiceRequestModel",
    "StudentModel",
    "UserModel",
]
