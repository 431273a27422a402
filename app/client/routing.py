"""Map a tapped notification to the client screen that handles it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from app.domain.entities import ROLE_ADMIN, NotificationType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    pathname: str
    params: dict[str, str] = field(default_factory=dict)


_ADMIN_SCREENS = {
    NotificationType.COMPLAINT.value: "/admin/complaints",
    NotificationType.LEAVE.value: "/admin/leaveRequests",
    NotificationType.LAUNDRY.value: "/admin/laundry",
    NotificationType.SERVICE.value: "/admin/services",
}

_STUDENT_SCREENS = {
    NotificationType.BUS.value: "/bustimings",
    NotificationType.EMERGENCY.value: "/(tabs)/emergency",
    NotificationType.MESSAGE.value: "/chat",
    NotificationType.LEAVE.value: "/leave-request",
    NotificationType.COMPLAINT.value: "/my-complaints",
    NotificationType.SERVICE.value: "/roomservice",
    NotificationType.NOTICE.value: "/alerts",
}


def resolve_route(role: str, item_type: str, data: dict[str, Any] | None = None) -> Route | None:
    """Return the :class:`Route` for a notification, or ``None`` if unknown."""

    data = data or {}
    if role == ROLE_ADMIN:
        if item_type == NotificationType.MESSAGE.value:
            student_id = data.get("student_id")
            if student_id is None:
                logger.warning("Message notification without student_id: %s", data)
                return None
            return Route("/chat/[id]", {"id": str(student_id)})
        pathname = _ADMIN_SCREENS.get(item_type)
        if pathname is None:
            logger.warning("Unknown notification type: %s", item_type)
            return None
        params = {"openId": str(data["id"])} if data.get("id") is not None else {}
        return Route(pathname, params)

    pathname = _STUDENT_SCREENS.get(item_type)
    if pathname is None:
        logger.warning("Unknown notification type: %s", item_type)
        return None
    return Route(pathname)


__all__ = ["Route", "resolve_route"]
