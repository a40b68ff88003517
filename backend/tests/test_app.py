"""
Noteful Backend: Application Wiring Tests
==========================================

What:  Health route, request id propagation, and error-message shaping.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError

from noteful import __version__
from noteful.main import describe_request_error


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_database_answers(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, test_client, database):
        failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch.object(database, "ping", AsyncMock(side_effect=failure)):
            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"] == "disconnected"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/api/folders")

        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_client_value_is_echoed(self, test_client):
        response = await test_client.get(
            "/api/notes/123456789", headers={"X-Request-ID": "trace-42"}
        )

        assert response.status_code == 404
        assert response.headers["x-request-id"] == "trace-42"


class TestDescribeRequestError:

    def test_invalid_body_field(self):
        exc = RequestValidationError(
            [{"type": "int_parsing", "loc": ("body", "folder_id"), "msg": "x"}]
        )
        assert describe_request_error(exc) == "Invalid folder_id in request body"

    def test_invalid_json(self):
        exc = RequestValidationError(
            [{"type": "json_invalid", "loc": ("body", 7), "msg": "x"}]
        )
        assert describe_request_error(exc) == "Request body is not valid JSON"

    @pytest.mark.asyncio
    async def test_malformed_json_returns_400(self, test_client):
        response = await test_client.post(
            "/api/notes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Request body is not valid JSON"}}
