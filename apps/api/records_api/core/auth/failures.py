"""
Failure taxonomy for authentication and authorization.

Every check in the auth core reports a ``Failure`` value instead of raising.
The HTTP boundary turns a failure into a response with ``failure_response``;
each kind maps to exactly one status code.
"""

from dataclasses import dataclass
from enum import Enum

from fastapi.responses import JSONResponse

UNAUTHORIZED_MESSAGE = "unauthorized"


class FailureKind(str, Enum):
    """Closed set of policy failures."""

    FORBIDDEN_METHOD = "ForbiddenMethod"
    MISSING_TOKEN = "MissingToken"
    INVALID_TOKEN = "InvalidToken"
    MISSING_ROLE = "MissingRole"
    INVALID_IDENTITY = "InvalidIdentity"
    COURSE_NOT_OWNED = "CourseNotOwned"
    CREDENTIAL_MISMATCH = "CredentialMismatch"


@dataclass(frozen=True)
class Failure:
    """
    Result of a failed check.

    Attributes:
        kind: Which check failed
        detail: Sub-reason for logs (e.g. "expired" for InvalidToken).
            Never sent to the caller.
        allowed_methods: Set for ForbiddenMethod so the response can name them
    """
    kind: FailureKind
    detail: str = ""
    allowed_methods: tuple[str, ...] = ()

    @classmethod
    def forbidden_method(cls, allowed: set[str] | frozenset[str]) -> "Failure":
        return cls(FailureKind.FORBIDDEN_METHOD, allowed_methods=tuple(sorted(allowed)))

    @classmethod
    def invalid_token(cls, detail: str) -> "Failure":
        return cls(FailureKind.INVALID_TOKEN, detail=detail)


class AccessDenied(Exception):
    """Raised by services and dependencies to surface a Failure to the boundary."""

    def __init__(self, failure: Failure):
        self.failure = failure
        super().__init__(f"{failure.kind.value}: {failure.detail}".rstrip(": "))


# Status code and caller-facing message for each kind
FAILURE_RESPONSES: dict[FailureKind, tuple[int, str]] = {
    FailureKind.FORBIDDEN_METHOD: (400, ""),
    FailureKind.MISSING_TOKEN: (403, UNAUTHORIZED_MESSAGE),
    FailureKind.INVALID_TOKEN: (403, UNAUTHORIZED_MESSAGE),
    FailureKind.MISSING_ROLE: (403, UNAUTHORIZED_MESSAGE),
    FailureKind.INVALID_IDENTITY: (403, UNAUTHORIZED_MESSAGE),
    FailureKind.COURSE_NOT_OWNED: (400, "course is not taught by this teacher"),
    FailureKind.CREDENTIAL_MISMATCH: (403, "Incorrect email or password"),
}


def method_message(allowed_methods: tuple[str, ...]) -> str:
    """Build the ForbiddenMethod message, e.g. 'Only GET and POST methods are allowed'."""
    if len(allowed_methods) == 1:
        return f"Only {allowed_methods[0]} method is allowed"
    listed = ", ".join(allowed_methods[:-1])
    return f"Only {listed} and {allowed_methods[-1]} methods are allowed"


def failure_response(failure: Failure) -> JSONResponse:
    """Render a failure as the uniform ``{"message": ...}`` body."""
    status_code, message = FAILURE_RESPONSES[failure.kind]
    if failure.kind is FailureKind.FORBIDDEN_METHOD:
        message = method_message(failure.allowed_methods)
    return JSONResponse(status_code=status_code, content={"message": message})
