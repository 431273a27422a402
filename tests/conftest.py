"""Shared fixtures: a throwaway SQLite database and seeding helpers."""

from __future__ import annotations

import os
from datetime import date, datetime, timedelta, timezone
from functools import lru_cache
from pathlib import Path

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ["APP_TIMEZONE"] = "UTC"

import pytest

from app.domain.entities import ROLE_ADMIN, ROLE_STUDENT, Student, User
from app.infrastructure import database
from app.infrastructure.models import (
    BusTimingModel,
    ComplaintModel,
    ConversationModel,
    EmergencyContactModel,
    LaundryRequestModel,
    LeaveRequestModel,
    NoticeModel,
    ServiceRequestModel,
    UserModel,
)
from app.infrastructure.repositories import StudentRepository, UserRepository
from app.infrastructure.security import create_access_token, get_password_hash
from app.utils import ensure_app_naive_datetime

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
PASSWORD = "Secret123"


def at(seconds: int) -> datetime:
    """Return ``BASE_TIME`` shifted by ``seconds``."""

    return BASE_TIME + timedelta(seconds=seconds)


@lru_cache(maxsize=1)
def _password_hash() -> str:
    return get_password_hash(PASSWORD)


class Seeder:
    """Insert rows with explicit timestamps for feed tests."""

    def __init__(self, session) -> None:
        self.session = session
        self._counter = 0

    def _add(self, model):
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return model

    def user(self, role: str, name: str | None = None) -> User:
        self._counter += 1
        return UserRepository(self.session).create(
            User(
                id=None,
                role=role,
                full_name=name or f"{role.title()} {self._counter}",
                email=f"{role}{self._counter}@hostel.test",
                password=_password_hash(),
            )
        )

    def admin(self, name: str = "Warden") -> User:
        return self.user(ROLE_ADMIN, name)

    def student(self, name: str = "Asha Rao", photo: str | None = None) -> tuple[User, Student]:
        user = self.user(ROLE_STUDENT, name)
        student = StudentRepository(self.session).create(
            Student(id=None, user_id=user.id, room_number="101", profile_photo=photo)
        )
        return user, student

    def watermark(self, user: User, moment: datetime) -> None:
        model = self.session.get(UserModel, user.id)
        model.last_notifications_cleared_at = ensure_app_naive_datetime(moment)
        self._add(model)

    def conversation(
        self,
        student: Student,
        *,
        last_message_time: datetime,
        admin_unread: int = 0,
        student_unread: int = 0,
    ) -> ConversationModel:
        return self._add(
            ConversationModel(
                student_id=student.id,
                last_message="hello",
                last_message_time=ensure_app_naive_datetime(last_message_time),
                admin_unread=admin_unread,
                student_unread=student_unread,
            )
        )

    def complaint(
        self,
        student: Student,
        *,
        created_at: datetime,
        updated_at: datetime | None = None,
        status: str = "pending",
        title: str = "Leaking tap",
    ) -> ComplaintModel:
        return self._add(
            ComplaintModel(
                student_id=student.id,
                title=title,
                status=status,
                created_at=ensure_app_naive_datetime(created_at),
                updated_at=ensure_app_naive_datetime(updated_at or created_at),
            )
        )

    def leave(
        self,
        student: Student,
        *,
        created_at: datetime,
        updated_at: datetime | None = None,
        status: str = "pending",
    ) -> LeaveRequestModel:
        return self._add(
            LeaveRequestModel(
                student_id=student.id,
                start_date=date(2024, 2, 10),
                end_date=date(2024, 2, 12),
                status=status,
                created_at=ensure_app_naive_datetime(created_at),
                updated_at=ensure_app_naive_datetime(updated_at or created_at),
            )
        )

    def laundry(
        self, student: Student, *, created_at: datetime, status: str = "pending"
    ) -> LaundryRequestModel:
        return self._add(
            LaundryRequestModel(
                student_id=student.id,
                items_count=6,
                status=status,
                created_at=ensure_app_naive_datetime(created_at),
                updated_at=ensure_app_naive_datetime(created_at),
            )
        )

    def service(
        self,
        student: Student,
        *,
        created_at: datetime,
        updated_at: datetime | None = None,
        status: str = "pending",
    ) -> ServiceRequestModel:
        return self._add(
            ServiceRequestModel(
                student_id=student.id,
                service_type="Cleaning",
                status=status,
                created_at=ensure_app_naive_datetime(created_at),
                updated_at=ensure_app_naive_datetime(updated_at or created_at),
            )
        )

    def notice(self, *, created_at: datetime, priority: str = "general") -> NoticeModel:
        return self._add(
            NoticeModel(
                title="Water supply",
                content="No water between 2 and 4 pm.",
                priority=priority,
                created_at=ensure_app_naive_datetime(created_at),
            )
        )

    def bus(self, *, created_at: datetime, updated_at: datetime | None = None) -> BusTimingModel:
        return self._add(
            BusTimingModel(
                route_name="Campus Loop",
                departure_time="08:15",
                created_at=ensure_app_naive_datetime(created_at),
                updated_at=ensure_app_naive_datetime(updated_at or created_at),
            )
        )

    def emergency(
        self, *, created_at: datetime, updated_at: datetime | None = None
    ) -> EmergencyContactModel:
        return self._add(
            EmergencyContactModel(
                name="Dr. Mehta",
                designation="Medical Officer",
                phone="100",
                created_at=ensure_app_naive_datetime(created_at),
                updated_at=ensure_app_naive_datetime(updated_at or created_at),
            )
        )


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token({"sub": user.email, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table before each test."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    yield
    database.engine.dispose()


@pytest.fixture()
def db_session():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seed(db_session) -> Seeder:
    return Seeder(db_session)


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def anyio_backend():
    return "asyncio"


def pytest_sessionfinish(session, exitstatus):
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
