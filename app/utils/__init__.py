"""Utility helpers for reusable functionality."""

from .datetime import (
    EPOCH,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    epoch_in_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)

__all__ = [
    "EPOCH",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "epoch_in_app_timezone",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
