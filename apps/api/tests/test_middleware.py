"""
Tests for the HTTP boundary: preflight, CORS, request ids and error bodies.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from structlog.testing import capture_logs
from sqlalchemy.exc import OperationalError

from records_api.core.auth import (
    FAILURE_RESPONSES,
    CallerEmail,
    Failure,
    FailureKind,
    failure_response,
)
from records_api.api.dependencies.database import get_db


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/admin/courses", "/student/exams", "/login", "/anything"])
async def test_preflight_short_circuits(client: AsyncClient, path: str):
    response = await client.options(path)

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PATCH, DELETE, OPTIONS"
    assert response.headers["Access-Control-Allow-Headers"] == "Authorization, Content-Type"


@pytest.mark.asyncio
async def test_cors_origin_on_every_response(client: AsyncClient, student_headers):
    ok = await client.get("/student/exams", headers=student_headers)
    denied = await client.get("/student/exams")
    health = await client.get("/health")

    for response in (ok, denied, health):
        assert response.headers["Access-Control-Allow-Origin"] == "*"


@pytest.mark.asyncio
async def test_cors_origin_on_unhandled_error(app, teacher_headers):
    async def broken_db():
        raise RuntimeError("pool exhausted")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db

    # Unhandled errors are re-raised by the server after the 500 is sent
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        response = await client.get(
            "/teacher/courses",
            headers={**teacher_headers, "X-Request-ID": "req-500"},
        )

    app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {"message": "something went wrong"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["X-Request-ID"] == "req-500"


@pytest.mark.asyncio
async def test_forbidden_method_wins_over_missing_token(client: AsyncClient):
    response = await client.delete("/teacher/exams")

    assert response.status_code == 400
    assert response.json() == {"message": "Only GET and POST methods are allowed"}


@pytest.mark.asyncio
async def test_request_id_echoed(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_request_id_generated(client: AsyncClient):
    response = await client.get("/health")

    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_unknown_route_uses_message_body(client: AsyncClient):
    response = await client.get("/nowhere")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_health_detailed_checks_database(client: AsyncClient):
    response = await client.get("/health/detailed")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"


@pytest.mark.asyncio
async def test_database_error_is_generic_500(app, client: AsyncClient, teacher_headers):
    async def broken_db():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db

    response = await client.get("/teacher/courses", headers=teacher_headers)

    assert response.status_code == 500
    assert response.json() == {"message": "something went wrong"}


def test_every_failure_kind_has_a_response():
    assert set(FAILURE_RESPONSES) == set(FailureKind)


@pytest.mark.parametrize(
    "kind,status",
    [
        (FailureKind.MISSING_TOKEN, 403),
        (FailureKind.INVALID_TOKEN, 403),
        (FailureKind.MISSING_ROLE, 403),
        (FailureKind.INVALID_IDENTITY, 403),
        (FailureKind.CREDENTIAL_MISMATCH, 403),
        (FailureKind.COURSE_NOT_OWNED, 400),
    ],
)
def test_failure_status_codes(kind: FailureKind, status: int):
    response = failure_response(Failure(kind, detail="secret detail"))

    assert response.status_code == status
    assert b"secret detail" not in response.body


def test_forbidden_method_messages():
    single = failure_response(Failure.forbidden_method({"POST"}))
    several = failure_response(Failure.forbidden_method({"GET", "POST", "PATCH"}))

    assert single.status_code == 400
    assert single.body == b'{"message":"Only POST method is allowed"}'
    assert several.body == b'{"message":"Only GET, PATCH and POST methods are allowed"}'


@pytest.mark.asyncio
async def test_handler_outside_policy_table_is_logged(app, client: AsyncClient):
    @app.get("/reports/mine")
    async def my_report(email: CallerEmail):
        return {"email": email}

    with capture_logs() as logs:
        response = await client.get("/reports/mine")

    assert response.status_code == 403
    assert response.json() == {"message": "unauthorized"}
    assert any(
        log["event"] == "route_not_gated" and log["log_level"] == "error" and log["path"] == "/reports/mine"
        for log in logs
    )
