"""Common validation helpers for user use cases."""

from app.domain.entities import ROLE_ADMIN, ROLE_STUDENT

ALLOWED_ROLES = (ROLE_ADMIN, ROLE_STUDENT)


def ensure_valid_email(email: str) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    normalized = email.strip()
    if normalized.count("@") != 1:
        raise ValueError("Invalid email address")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("Invalid email address")

    return f"{local_part}@{domain}".lower()


def ensure_valid_role(role: str) -> str:
    normalized = role.strip().lower()
    if normalized not in ALLOWED_ROLES:
        raise ValueError(f"Role must be one of: {', '.join(ALLOWED_ROLES)}")
    return normalized
