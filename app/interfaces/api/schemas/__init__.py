from .auth import Token
from .chat import ConversationRead, MessageCreate, MessageRead
from .notification import NotificationClearResponse, NotificationRead

__all__ = [
    "ConversationRead",
    "MessageCreate",
    "MessageRead",
    "NotificationClearResponse",
    "NotificationRead",
    "Token",
]
