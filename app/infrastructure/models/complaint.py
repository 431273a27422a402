"""SQLAlchemy model for complaints."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ComplaintModel(Base):
    __tablename__ = "complaints"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="pending", index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["ComplaintModel"]
