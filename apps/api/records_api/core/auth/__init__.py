"""
Authentication and authorization core.

Pieces, leaf first:
- CredentialVerifier: password check against the stored bcrypt hash
- TokenCodec: issues and parses HMAC-signed bearer tokens
- AccessGate: method -> token -> role -> identity checks for a request
- CourseOwnershipGuard: a teacher may only grade courses they teach

Every check returns a Failure value on rejection; the HTTP boundary renders
it with failure_response().

Usage:
    from records_api.core.auth import CallerEmail

    @router.get("/exams")
    async def my_exams(email: CallerEmail):
        ...
"""

from .interfaces import (
    Role,
    TokenClaims,
    RoutePolicy,
    CredentialStore,
    CourseOwnershipSource,
)
from .failures import (
    AccessDenied,
    Failure,
    FailureKind,
    FAILURE_RESPONSES,
    failure_response,
)
from .credentials import CredentialVerifier, hash_password, pwd_context
from .tokens import TokenCodec, TokenPayload
from .gate import AccessGate
from .ownership import CourseOwnershipGuard
from .policy import ROUTE_POLICIES, policy_for_path
from .dependencies import (
    CallerEmail,
    get_caller_email,
    get_token_codec,
)

__all__ = [
    # Types
    "Role",
    "TokenClaims",
    "RoutePolicy",
    "CredentialStore",
    "CourseOwnershipSource",
    # Failures
    "AccessDenied",
    "Failure",
    "FailureKind",
    "FAILURE_RESPONSES",
    "failure_response",
    # Components
    "CredentialVerifier",
    "hash_password",
    "pwd_context",
    "TokenCodec",
    "TokenPayload",
    "AccessGate",
    "CourseOwnershipGuard",
    # Policy
    "ROUTE_POLICIES",
    "policy_for_path",
    # Dependencies
    "CallerEmail",
    "get_caller_email",
    "get_token_codec",
]
