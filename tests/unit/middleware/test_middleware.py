"""Unit tests for middleware."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SECURITY_HEADERS, SecurityHeadersMiddleware


def _create_app_with_middleware() -> FastAPI:
    """Minimal app wired in the same order as the real one."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def _():
        return {"ok": True}

    @app.get("/framed")
    async def _framed():
        from fastapi.responses import JSONResponse

        return JSONResponse({"ok": True}, headers={"X-Frame-Options": "SAMEORIGIN"})

    return app


@pytest.fixture
async def client():
    transport = ASGITransport(app=_create_app_with_middleware())
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestSecurityHeadersMiddleware:
    @pytest.mark.parametrize(("header", "value"), list(SECURITY_HEADERS.items()))
    async def test_adds_header(self, client: AsyncClient, header: str, value: str):
        response = await client.get("/test")

        assert response.headers[header] == value

    async def test_keeps_header_set_by_route(self, client: AsyncClient):
        response = await client.get("/framed")

        assert response.headers["x-frame-options"] == "SAMEORIGIN"


class TestRequestIDMiddleware:
    async def test_generates_request_id_when_not_provided(self, client: AsyncClient):
        response = await client.get("/test")

        assert len(response.headers["x-request-id"]) > 0

    async def test_propagates_existing_request_id(self, client: AsyncClient):
        response = await client.get("/test", headers={"X-Request-ID": "custom-req-123"})

        assert response.headers["x-request-id"] == "custom-req-123"

    async def test_generated_ids_differ(self, client: AsyncClient):
        r1 = await client.get("/test")
        r2 = await client.get("/test")

        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]


class TestRequestLoggingMiddleware:
    async def test_passes_response_through(self, client: AsyncClient):
        response = await client.get("/test")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
