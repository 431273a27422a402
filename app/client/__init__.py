"""Client-side notification helpers: API access, polling store and panel state."""

from .api import NotificationApiClient, NotificationApiError
from .overlay import NotificationOverlay, OverlayState
from .routing import Route, resolve_route
from .store import FEED_POLL_INTERVAL, NOTICE_POLL_INTERVAL, NotificationStore

__all__ = [
    "FEED_POLL_INTERVAL",
    "NOTICE_POLL_INTERVAL",
    "NotificationApiClient",
    "NotificationApiError",
    "NotificationOverlay",
    "NotificationStore",
    "OverlayState",
    "Route",
    "resolve_route",
]
