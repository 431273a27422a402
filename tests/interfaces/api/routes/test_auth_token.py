"""Tests for the authentication token endpoint."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.infrastructure.security import decode_access_token

from conftest import PASSWORD


def test_login_returns_role_scoped_token(client: TestClient, seed) -> None:
    user, _ = seed.student()

    response = client.post(
        "/auth/token", data={"username": user.email, "password": PASSWORD}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "student"
    claims = decode_access_token(body["access_token"])
    assert claims["sub"] == user.email
    assert claims["role"] == "student"

    feed = client.get(
        "/notifications/student",
        headers={"Authorization": f"Bearer {body['access_token']}"},
    )
    assert feed.status_code == 200


def test_login_rejects_wrong_password(client: TestClient, seed) -> None:
    admin = seed.admin()

    response = client.post(
        "/auth/token", data={"username": admin.email, "password": "wrong"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect email or password"
