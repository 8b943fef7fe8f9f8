"""
Tests for the access gate and route policy table.
"""

from datetime import datetime, timedelta, timezone

import pytest
from starlette.requests import Request

from records_api.core.auth import (
    AccessGate,
    Failure,
    FailureKind,
    Role,
    TokenCodec,
    ROUTE_POLICIES,
    policy_for_path,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_request(method: str = "GET", path: str = "/student/exams", token: str | None = None) -> Request:
    headers = []
    if token is not None:
        headers.append((b"authorization", token.encode()))
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "headers": headers,
        "query_string": b"",
    })


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec("test-secret", ttl=timedelta(hours=1))


@pytest.fixture
def gate(codec: TokenCodec) -> AccessGate:
    return AccessGate(codec)


def test_authorize_success_returns_email(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("s@uni.edu", [Role.STUDENT], NOW)

    result = gate.authorize(make_request(token=token), {"GET"}, Role.STUDENT, now=NOW)

    assert result == "s@uni.edu"


def test_method_checked_before_token(gate: AccessGate):
    result = gate.authorize(make_request(method="PUT"), {"GET", "POST"}, Role.TEACHER, now=NOW)

    assert result == Failure(FailureKind.FORBIDDEN_METHOD, allowed_methods=("GET", "POST"))


def test_missing_header(gate: AccessGate):
    result = gate.authorize(make_request(), {"GET"}, Role.STUDENT, now=NOW)

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.MISSING_TOKEN


def test_empty_header_is_missing(gate: AccessGate):
    result = gate.authorize(make_request(token=""), {"GET"}, Role.STUDENT, now=NOW)

    assert result.kind is FailureKind.MISSING_TOKEN


def test_expired_token(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("s@uni.edu", [Role.STUDENT], NOW)

    result = gate.authorize(
        make_request(token=token), {"GET"}, Role.STUDENT, now=NOW + timedelta(hours=1)
    )

    assert result == Failure.invalid_token("expired")


def test_missing_role(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("s@uni.edu", [Role.STUDENT], NOW)

    result = gate.authorize(make_request(token=token), {"GET"}, Role.ADMIN, now=NOW)

    assert result.kind is FailureKind.MISSING_ROLE


def test_any_role_accepted_when_none_required(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("t@uni.edu", [Role.TEACHER], NOW)

    result = gate.authorize(make_request("POST", "/change-password", token), {"POST"}, None, now=NOW)

    assert result == "t@uni.edu"


def test_role_names_are_case_sensitive(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("a@uni.edu", ["admin"], NOW)

    result = gate.authorize(make_request(token=token), {"GET"}, Role.ADMIN, now=NOW)

    assert result.kind is FailureKind.MISSING_ROLE


@pytest.mark.parametrize("email", [None, "", "   "])
def test_blank_identity(gate: AccessGate, codec: TokenCodec, email):
    token = codec.issue(email, [Role.ADMIN], NOW)

    result = gate.authorize(make_request(token=token), {"GET"}, Role.ADMIN, now=NOW)

    assert result.kind is FailureKind.INVALID_IDENTITY


def test_role_checked_before_identity(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("", [Role.STUDENT], NOW)

    result = gate.authorize(make_request(token=token), {"GET"}, Role.ADMIN, now=NOW)

    assert result.kind is FailureKind.MISSING_ROLE


def test_authenticate_returns_claims(gate: AccessGate, codec: TokenCodec):
    token = codec.issue("a@uni.edu", [Role.ADMIN, Role.TEACHER], NOW)

    claims = gate.authenticate(make_request(token=token), now=NOW)

    assert claims.identity == "a@uni.edu"
    assert claims.roles == frozenset({"Admin", "Teacher"})


# ============ Route policies ============


@pytest.mark.parametrize(
    "path,methods,role",
    [
        ("/student/exams", {"GET"}, Role.STUDENT),
        ("/teacher/exams", {"GET", "POST"}, Role.TEACHER),
        ("/admin/courses", {"GET", "POST", "PATCH", "DELETE"}, Role.ADMIN),
        ("/change-password", {"POST"}, None),
    ],
)
def test_policy_for_gated_paths(path, methods, role):
    policy = policy_for_path(path)

    assert policy.allowed_methods == frozenset(methods)
    assert policy.required_role == role
    assert not policy.public


def test_login_is_public():
    policy = policy_for_path("/login")

    assert policy.public
    assert policy.allowed_methods == frozenset({"POST"})


@pytest.mark.parametrize("path", ["/health", "/", "/students", "/administrator", "/docs"])
def test_unlisted_paths_are_ungated(path):
    assert policy_for_path(path) is None


def test_every_family_has_methods():
    for prefix, policy in ROUTE_POLICIES.items():
        assert prefix.startswith("/")
        assert policy.allowed_methods
