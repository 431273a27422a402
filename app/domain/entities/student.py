"""Domain entity representing a hostel resident."""

from dataclasses import dataclass


@dataclass
class Student:
    """Student profile linked one-to-one with a :class:`User`."""

    id: int | None
    user_id: int
    room_number: str | None = None
    profile_photo: str | None = None


__all__ = ["Student"]
