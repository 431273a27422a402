"""Utility script to create an initial administrator (or student) account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import create_student, create_user
from app.domain.entities import ROLE_ADMIN, ROLE_STUDENT
from app.infrastructure.database import SessionLocal, initialize_database
from app.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the hostel notifications API.",
    )
    parser.add_argument("--name", default="Hostel Admin", help="Full name of the user")
    parser.add_argument(
        "--email", default="admin@example.com", help="Login email (default: admin@example.com)"
    )
    parser.add_argument(
        "--role",
        choices=[ROLE_ADMIN, ROLE_STUDENT],
        default=ROLE_ADMIN,
        help="Role of the new account (default: admin)",
    )
    parser.add_argument(
        "--room",
        default=None,
        help="Room number, only used when --role student",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password; prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()
    configure_logging()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        if args.role == ROLE_STUDENT:
            user, _student = create_student(
                session,
                full_name=args.name,
                email=args.email,
                password=password,
                room_number=args.room,
            )
        else:
            user = create_user(
                session,
                full_name=args.name,
                email=args.email,
                password=password,
                role=args.role,
            )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.full_name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
