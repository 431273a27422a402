"""SQLAlchemy model for student profiles."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class StudentModel(Base):
    """Hostel resident linked to a row in ``users``."""

    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    room_number = Column(String(20), nullable=True)
    profile_photo = Column(String(255), nullable=True)

    user = relationship("UserModel", lazy="joined")


__all__ = ["StudentModel"]
