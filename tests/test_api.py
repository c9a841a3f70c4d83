"""Tests for the HTTP endpoints."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from lms.adapters.outbound.persistence.repositories.token_repository import token_repository
from lms.domain.exceptions import DatabaseOperationException

SLOTS = [
    {"day": "monday", "from": "09:00", "to": "11:00", "semester": 1, "year": "2024-2025", "ref": "g-active"},
    {"day": "friday", "from": "08:00", "to": "10:00", "semester": 1, "year": "2024-2025", "ref": "g-friday"},
    {"day": "monday", "from": "14:00", "to": "16:00", "semester": 1, "year": "2024-2025", "ref": "g-today"},
    {"day": "monday", "from": "14:00", "to": "16:00", "semester": 2, "year": "2024-2025", "ref": "g-s2"},
]


class TestAcademicPeriodEndpoints:

    async def test_current(self, async_client):
        response = await async_client.get("/api/v1/academic-period/current")

        assert response.status_code == 200
        assert response.json() == {
            "year": "2024-2025",
            "semester": 1,
            "label": "2024-2025 S1",
            "description": "September - January",
        }

    async def test_next(self, async_client):
        response = await async_client.get("/api/v1/academic-period/next")

        assert response.status_code == 200
        assert response.json()["label"] == "2024-2025 S2"

    async def test_options(self, async_client):
        response = await async_client.get("/api/v1/academic-period/options")

        assert response.status_code == 200
        assert [option["value"] for option in response.json()] == ["1-2024-2025", "2-2024-2025"]

    @pytest.mark.parametrize("frozen_now", [datetime(2025, 8, 10, 9, 0)])
    async def test_outside_period(self, async_client, frozen_now):
        response = await async_client.get("/api/v1/academic-period/current")

        assert response.status_code == 404
        assert response.json()["code"] == "OUTSIDE_ACADEMIC_PERIOD"


class TestScheduleEndpoints:

    async def test_categorize(self, async_client):
        response = await async_client.post("/api/v1/schedule/categorize", json={"slots": SLOTS})

        assert response.status_code == 200
        body = response.json()
        assert body["period"]["label"] == "2024-2025 S1"
        assert [s["ref"] for s in body["current"]] == ["g-active"]
        assert [s["ref"] for s in body["upcoming"]] == ["g-today", "g-friday"]
        assert [s["ref"] for s in body["other"]] == ["g-s2"]

        first = body["upcoming"][0]
        assert first["from"] == "14:00"
        assert first["to"] == "16:00"
        assert first["next_occurrence"] == "2024-10-14T14:00:00"
        assert first["time_until"] == "In 4h 0m"
        assert first["description"] == "Monday 14:00-16:00"

    async def test_categorize_at_explicit_moment(self, async_client):
        payload = {"slots": SLOTS, "now": "2024-10-18T09:00:00"}
        response = await async_client.post("/api/v1/schedule/categorize", json=payload)

        body = response.json()
        assert [s["ref"] for s in body["current"]] == ["g-friday"]
        assert body["upcoming"] == []

    async def test_categorize_outside_period(self, async_client):
        payload = {"slots": SLOTS, "now": "2025-07-07T10:00:00"}
        response = await async_client.post("/api/v1/schedule/categorize", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["period"] is None
        assert len(body["other"]) == len(SLOTS)

    async def test_categorize_empty(self, async_client):
        response = await async_client.post("/api/v1/schedule/categorize", json={"slots": []})

        body = response.json()
        assert (body["current"], body["upcoming"], body["other"]) == ([], [], [])

    async def test_malformed_time(self, async_client):
        slot = dict(SLOTS[0], **{"from": "9:00"})
        response = await async_client.post("/api/v1/schedule/categorize", json={"slots": [slot]})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TIME_FORMAT"

    async def test_invalid_day(self, async_client):
        slot = dict(SLOTS[0], day="Monday")
        response = await async_client.post("/api/v1/schedule/categorize", json={"slots": [slot]})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"


class TestAuthEndpoints:

    async def test_me(self, async_client, auth_headers):
        response = await async_client.get("/api/v1/user/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["user_id"] == "64f1c2a9e4b0a1b2c3d4e5f6"
        assert response.json()["roles"] == ["student"]

    async def test_missing_token(self, async_client):
        response = await async_client.get("/api/v1/user/me")
        assert response.status_code == 401

    async def test_invalid_token(self, async_client):
        response = await async_client.get("/api/v1/user/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    async def test_logout_revokes_token(self, async_client, auth_headers, access_token, db_session):
        response = await async_client.post("/api/v1/user/logout", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"detail": "Successfully logged out."}
        assert await token_repository.is_blacklisted(db_session, access_token) is True

        response = await async_client.get("/api/v1/user/me", headers=auth_headers)
        assert response.status_code == 401
        assert response.json()["detail"] == "Token revoked."

        response = await async_client.post("/api/v1/user/logout", headers=auth_headers)
        assert response.status_code == 401

    async def test_store_failure_denies_access(self, async_client, auth_headers, monkeypatch):
        monkeypatch.setattr(
            token_repository,
            "is_blacklisted",
            AsyncMock(side_effect=DatabaseOperationException("Error checking token blacklist")),
        )

        response = await async_client.get("/api/v1/user/me", headers=auth_headers)

        assert response.status_code == 503
