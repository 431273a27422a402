"""Tests for the account creation and authentication use cases."""

from __future__ import annotations

import pytest

from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_student,
    create_user,
)
from app.infrastructure.repositories import StudentRepository


def test_create_student_links_profile(db_session):
    user, student = create_student(
        db_session,
        full_name="  Asha Rao ",
        email="Asha@Hostel.Test",
        password="Secret123",
        room_number="204",
    )

    assert user.email == "asha@hostel.test"
    assert user.full_name == "Asha Rao"
    assert user.is_student()
    assert StudentRepository(db_session).get_by_user_id(user.id) == student
    assert user.last_notifications_cleared_at is None


def test_duplicate_email_is_rejected(db_session):
    create_user(db_session, full_name="Warden", email="warden@hostel.test", password="x1", role="admin")

    with pytest.raises(ValueError, match="already registered"):
        create_user(db_session, full_name="Other", email="WARDEN@hostel.test", password="x2", role="admin")


@pytest.mark.parametrize(
    ("email", "role"),
    [("not-an-email", "admin"), ("a@b", "admin"), ("ok@hostel.test", "guest")],
)
def test_invalid_input_is_rejected(db_session, email, role):
    with pytest.raises(ValueError):
        create_user(db_session, full_name="X", email=email, password="x1", role=role)


def test_authenticate_user_outcomes(db_session):
    user = create_user(db_session, full_name="Warden", email="warden@hostel.test", password="Secret123", role="admin")

    found, status = authenticate_user(db_session, "warden@hostel.test", "Secret123")
    assert status is AuthenticationStatus.SUCCESS
    assert found.id == user.id

    assert authenticate_user(db_session, "warden@hostel.test", "nope")[1] is AuthenticationStatus.INVALID_CREDENTIALS
    assert authenticate_user(db_session, "ghost@hostel.test", "Secret123")[1] is AuthenticationStatus.INVALID_CREDENTIALS
