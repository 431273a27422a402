"""SQLAlchemy model for the users table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True)
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    # NULL means the user never cleared the panel.
    last_notifications_cleared_at = Column(DateTime, nullable=True)


__all__ = ["UserModel"]
