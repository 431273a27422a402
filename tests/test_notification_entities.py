"""Tests for the notification variants and their ordering helper."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.entities import (
    BusNotification,
    ComplaintNotification,
    MessageNotification,
    NoticeNotification,
    NotificationEvent,
    NotificationType,
    NotificationWatermark,
    sort_notifications,
)

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_identifiers_follow_type_and_source_key():
    message = MessageNotification(
        title="New messages from Asha",
        subtitle="2 unread messages",
        time=T0,
        student_id=7,
        unread_count=2,
        photo="asha.png",
    )
    complaint = ComplaintNotification(title="New Complaint", subtitle="x", time=T0, entity_id=42)

    assert message.id == "msg-7"
    assert message.type is NotificationType.MESSAGE
    assert message.data == {"student_id": 7, "photo": "asha.png"}
    assert complaint.id == "complaint-42"
    assert complaint.data == {"id": 42}
    assert complaint.read is False


def test_notice_payload_carries_priority():
    notice = NoticeNotification(
        title="Fire drill", subtitle="Assemble at 5pm", time=T0, entity_id=3, priority="critical"
    )

    assert notice.id == "notice-3"
    assert notice.data == {"id": 3, "priority": "critical"}


def test_sort_is_newest_first_and_stable_on_ties():
    older = BusNotification(title="bus", subtitle="", time=T0, entity_id=1)
    first_tie = ComplaintNotification(title="a", subtitle="", time=T0 + timedelta(minutes=5), entity_id=1)
    second_tie = ComplaintNotification(title="b", subtitle="", time=T0 + timedelta(minutes=5), entity_id=2)

    ordered = sort_notifications([older, first_tie, second_tie])

    assert ordered == [first_tie, second_tie, older]


def test_watermark_admits_only_strictly_newer_events():
    watermark = NotificationWatermark(user_id=1, last_cleared_at=T0)

    assert watermark.admits(T0 + timedelta(microseconds=1))
    assert not watermark.admits(T0)
    assert not watermark.admits(T0 - timedelta(seconds=1))
    assert not watermark.admits(None)


def test_base_variant_cannot_be_instantiated():
    with pytest.raises(TypeError):
        NotificationEvent(title="t", subtitle="s", time=T0)
