"""Tests for the async notification API client and tap routing."""

from __future__ import annotations

import httpx
import pytest

from app.client import NotificationApiClient, NotificationApiError, Route, resolve_route

pytestmark = pytest.mark.anyio

FEED = [
    {
        "id": "msg-7",
        "type": "message",
        "title": "New messages from Asha Rao",
        "subtitle": "2 unread messages",
        "time": "2024-01-01T00:05:00Z",
        "data": {"student_id": 7},
        "read": False,
    },
    {
        "id": "complaint-3",
        "type": "complaint",
        "title": "New Complaint",
        "subtitle": "Leaking tap - Asha Rao",
        "time": "2024-01-01T00:01:40Z",
        "data": {"id": 3},
        "read": False,
    },
]


def _api(handler, token: str | None = "token-123") -> NotificationApiClient:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://hostel.test"
    )
    return NotificationApiClient(token=token, client=client)


async def test_fetch_sends_bearer_token_and_parses_items():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=FEED)

    api = _api(handler)
    items = await api.fetch("admin")

    assert [item.id for item in items] == ["msg-7", "complaint-3"]
    assert items[0].data == {"student_id": 7}
    assert seen[0].url.path == "/notifications/admin"
    assert seen[0].headers["Authorization"] == "Bearer token-123"


async def test_clear_posts_to_role_endpoint():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True})

    api = _api(handler)

    assert await api.clear("student") is True
    assert (seen[0].method, seen[0].url.path) == ("POST", "/notifications/student/clear")


async def test_http_errors_are_wrapped():
    api = _api(lambda request: httpx.Response(500, json={"detail": "Could not clear notifications"}))

    with pytest.raises(NotificationApiError):
        await api.clear("admin")


async def test_transport_errors_are_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NotificationApiError):
        await _api(handler).fetch("admin")


async def test_malformed_payload_is_rejected():
    api = _api(lambda request: httpx.Response(200, json=[{"id": "x"}]))

    with pytest.raises(NotificationApiError):
        await api.fetch("admin")


async def test_unknown_role_is_refused():
    api = _api(lambda request: httpx.Response(200, json=[]))

    with pytest.raises(ValueError):
        await api.fetch("guest")


@pytest.mark.parametrize(
    ("role", "item_type", "data", "expected"),
    [
        ("admin", "message", {"student_id": 7}, Route("/chat/[id]", {"id": "7"})),
        ("admin", "complaint", {"id": 3}, Route("/admin/complaints", {"openId": "3"})),
        ("admin", "leave", {"id": 4}, Route("/admin/leaveRequests", {"openId": "4"})),
        ("admin", "laundry", {"id": 5}, Route("/admin/laundry", {"openId": "5"})),
        ("admin", "service", {"id": 6}, Route("/admin/services", {"openId": "6"})),
        ("student", "bus", {"id": 1}, Route("/bustimings")),
        ("student", "emergency", {"id": 1}, Route("/(tabs)/emergency")),
        ("student", "message", {"student_id": 7}, Route("/chat")),
        ("student", "leave", {"id": 1}, Route("/leave-request")),
        ("student", "complaint", {"id": 1}, Route("/my-complaints")),
        ("student", "service", {"id": 1}, Route("/roomservice")),
        ("student", "notice", {"id": 1, "priority": "general"}, Route("/alerts")),
    ],
)
def test_resolve_route(role, item_type, data, expected):
    assert resolve_route(role, item_type, data) == expected


def test_unknown_types_are_not_routed(caplog):
    assert resolve_route("admin", "bus", {"id": 1}) is None
    assert resolve_route("student", "laundry", {"id": 1}) is None
    assert "Unknown notification type" in caplog.text
