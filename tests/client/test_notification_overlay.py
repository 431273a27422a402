"""Tests for the notification panel state holder."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.client import NotificationApiClient, NotificationOverlay, OverlayState, Route

pytestmark = pytest.mark.anyio

MESSAGE = {
    "id": "msg-7",
    "type": "message",
    "title": "New messages from Asha Rao",
    "subtitle": "1 unread message",
    "time": "2024-01-01T00:05:00Z",
    "data": {"student_id": 7},
    "read": False,
}
LEAVE = {
    "id": "leave-4",
    "type": "leave",
    "title": "Leave Request",
    "subtitle": "Asha Rao (10/02/2024)",
    "time": "2024-01-01T00:02:00Z",
    "data": {"id": 4},
    "read": False,
}


class Backend:
    def __init__(self, feed=None) -> None:
        self.feed = feed if feed is not None else [MESSAGE, LEAVE]
        self.clear_status = 200
        self.clears = 0
        self.gate: asyncio.Event | None = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/clear"):
            self.clears += 1
            if self.clear_status != 200:
                return httpx.Response(self.clear_status, json={"detail": "Could not clear notifications"})
            return httpx.Response(200, json={"success": True})
        if self.gate is not None:
            await self.gate.wait()
        return httpx.Response(200, json=self.feed)


def _overlay(backend: Backend, role: str = "admin"):
    client = httpx.AsyncClient(transport=httpx.MockTransport(backend), base_url="http://hostel.test")
    routes: list[Route] = []
    states: list[OverlayState] = []
    overlay = NotificationOverlay(
        NotificationApiClient(token="t", client=client),
        role=role,
        navigate=routes.append,
        on_state_change=states.append,
    )
    return overlay, routes, states


async def test_open_loads_fresh_items():
    backend = Backend()
    overlay, _, states = _overlay(backend)

    items = await overlay.open()

    assert [item.id for item in items] == ["msg-7", "leave-4"]
    assert overlay.state is OverlayState.OPEN
    assert states == [OverlayState.OPENING, OverlayState.OPEN]

    backend.feed = [LEAVE]
    overlay.close()
    await overlay.open()
    assert overlay.count == 1


async def test_fetch_failure_shows_empty_list():
    def failing(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    client = httpx.AsyncClient(transport=httpx.MockTransport(failing), base_url="http://hostel.test")
    overlay = NotificationOverlay(NotificationApiClient(client=client), role="admin", navigate=lambda route: None)

    assert await overlay.open() == []
    assert overlay.state is OverlayState.OPEN


async def test_response_arriving_after_close_is_discarded():
    backend = Backend()
    backend.gate = asyncio.Event()
    overlay, _, states = _overlay(backend)

    pending = asyncio.ensure_future(overlay.open())
    await asyncio.sleep(0.01)
    overlay.close()
    backend.gate.set()
    await pending

    assert overlay.state is OverlayState.CLOSED
    assert overlay.items == []
    assert states == [OverlayState.OPENING, OverlayState.CLOSING, OverlayState.CLOSED]


async def test_clear_is_optimistic():
    backend = Backend()
    overlay, _, _ = _overlay(backend)
    await overlay.open()

    assert await overlay.clear() is True
    assert overlay.items == []
    assert backend.clears == 1


async def test_failed_clear_restores_previous_list():
    backend = Backend()
    backend.clear_status = 500
    overlay, _, _ = _overlay(backend)
    await overlay.open()

    assert await overlay.clear() is False
    assert [item.id for item in overlay.items] == ["msg-7", "leave-4"]


async def test_clear_on_empty_list_does_not_call_server():
    backend = Backend(feed=[])
    overlay, _, _ = _overlay(backend)
    await overlay.open()

    assert await overlay.clear() is False
    assert backend.clears == 0


async def test_press_closes_then_navigates():
    backend = Backend()
    overlay, routes, states = _overlay(backend)
    await overlay.open()

    route = overlay.press(overlay.items[0])

    assert route == Route("/chat/[id]", {"id": "7"})
    assert routes == [route]
    assert overlay.state is OverlayState.CLOSED
    assert states[-2:] == [OverlayState.CLOSING, OverlayState.CLOSED]

    await overlay.open()
    overlay.press(overlay.items[1])
    assert routes[-1] == Route("/admin/leaveRequests", {"openId": "4"})


async def test_student_press_uses_static_screens():
    overlay, routes, _ = _overlay(Backend(), role="student")
    await overlay.open()

    overlay.press(overlay.items[1])

    assert routes == [Route("/leave-request")]
