"""Use cases for creating users and student profiles."""

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_STUDENT, Student, User
from app.infrastructure.repositories import StudentRepository, UserRepository
from app.infrastructure.security import get_password_hash

from .validators import ensure_valid_email, ensure_valid_role


def create_user(
    session: Session,
    *,
    full_name: str,
    email: str,
    password: str,
    role: str,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    normalized_email = ensure_valid_email(email)
    normalized_role = ensure_valid_role(role)

    if repository.get_by_email(normalized_email):
        raise ValueError("Email is already registered")

    if not password:
        raise ValueError("Password is required")

    user = User(
        id=None,
        role=normalized_role,
        full_name=full_name.strip(),
        email=normalized_email,
        password=get_password_hash(password),
    )
    return repository.create(user)


def create_student(
    session: Session,
    *,
    full_name: str,
    email: str,
    password: str,
    room_number: str | None = None,
    profile_photo: str | None = None,
) -> tuple[User, Student]:
    """Create a student account together with its student profile."""

    user = create_user(
        session,
        full_name=full_name,
        email=email,
        password=password,
        role=ROLE_STUDENT,
    )
    student = StudentRepository(session).create(
        Student(
            id=None,
            user_id=user.id,
            room_number=room_number,
            profile_photo=profile_photo,
        )
    )
    return user, student
