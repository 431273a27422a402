"""Domain entity representing a user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ROLE_ADMIN = "admin"
ROLE_STUDENT = "student"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: str
    full_name: str
    email: str
    password: str
    is_active: bool = True
    created_at: datetime | None = None
    last_notifications_cleared_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def is_student(self) -> bool:
        return self.has_role(ROLE_STUDENT)


__all__ = ["ROLE_ADMIN", "ROLE_STUDENT", "User"]
