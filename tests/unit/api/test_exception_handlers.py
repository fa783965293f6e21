"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient, Response
from pydantic import BaseModel, ConfigDict

from api.exception_handlers import setup_exception_handlers
from core.exceptions import (
    AuthenticationError,
    ProfileNotFoundError,
    ProfileValidationError,
    StoreError,
)


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


def _raising(exc: Exception) -> FastAPI:
    app = _create_test_app()

    @app.get("/boom")
    async def _() -> None:
        raise exc

    return app


async def _get(app: FastAPI, path: str = "/boom") -> Response:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestAppExceptionHandler:
    @pytest.mark.asyncio
    async def test_profile_not_found(self) -> None:
        response = await _get(_raising(ProfileNotFoundError("some-id")))

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "PROFILE_NOT_FOUND"
        assert "some-id" in body["message"]
        assert body["details"] == {"profile": "some-id"}

    @pytest.mark.asyncio
    async def test_validation_error_details_map_fields_to_messages(self) -> None:
        errors = {"phone": "bad phone", "website": "bad url"}

        response = await _get(_raising(ProfileValidationError(errors)))

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"] == errors

    @pytest.mark.asyncio
    async def test_store_error_message_is_verbatim(self) -> None:
        response = await _get(_raising(StoreError("database unavailable")))

        assert response.status_code == 503
        body = response.json()
        assert body["error_code"] == "STORE_ERROR"
        assert body["message"] == "database unavailable"
        assert body["details"] is None

    @pytest.mark.asyncio
    async def test_authentication_error(self) -> None:
        response = await _get(_raising(AuthenticationError("Sign in to view your profile")))

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"


class TestFrameworkErrors:
    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        response = await _get(_create_test_app(), "/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["message"] == "Not Found"

    @pytest.mark.asyncio
    async def test_request_validation_lists_offending_fields(self) -> None:
        app = _create_test_app()

        class Body(BaseModel):
            model_config = ConfigDict(extra="forbid")

            name: str = ""

        @app.post("/profile")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/profile", json={"name": "Ion", "email": "x@example.com"})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.email"
        assert body["details"][0]["type"] == "extra_forbidden"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, RuntimeError("Something went wrong"))  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["request_id"] == "test-req-id"
