"""Logging setup shared by the API process and the helper scripts."""

from __future__ import annotations

import logging

from app.config import get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once using ``LOG_LEVEL`` from the settings."""

    resolved = (level or get_settings().log_level or "INFO").upper()
    numeric_level = getattr(logging, resolved, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(numeric_level)


__all__ = ["configure_logging"]
