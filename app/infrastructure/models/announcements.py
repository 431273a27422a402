"""SQLAlchemy models for notices, bus timings and emergency contacts."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NoticeModel(Base):
    __tablename__ = "notices"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False, default="general")
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )


class BusTimingModel(Base):
    __tablename__ = "bus_timings"

    id = Column(Integer, primary_key=True, index=True)
    route_name = Column(String(100), nullable=False)
    departure_time = Column(String(20), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=True,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


class EmergencyContactModel(Base):
    __tablename__ = "emergency_contacts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    designation = Column(String(120), nullable=False)
    phone = Column(String(30), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=True,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["NoticeModel", "BusTimingModel", "EmergencyContactModel"]
