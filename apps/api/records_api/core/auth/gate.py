"""
Access gate: the per-request authorization check.

Checks run in a fixed order and stop at the first failure:

    method -> token -> role -> identity

so a request with a disallowed method and no token always fails with
ForbiddenMethod. The gate does not log; callers log the failure they get.
"""

from datetime import datetime
from typing import Collection

from starlette.requests import Request

from records_api.utils.timezone import utc_now

from .failures import Failure, FailureKind
from .interfaces import Role, TokenClaims
from .tokens import TokenCodec

AUTHORIZATION_HEADER = "Authorization"


class AccessGate:
    """Authorizes requests against a route's method set and role."""

    def __init__(self, codec: TokenCodec):
        self.codec = codec

    def authenticate(
        self,
        request: Request,
        now: datetime | None = None,
    ) -> TokenClaims | Failure:
        """
        Read and verify the token from the Authorization header.

        The header carries the token verbatim; no "Bearer " prefix is stripped.
        """
        token = request.headers.get(AUTHORIZATION_HEADER)
        if not token:
            return Failure(FailureKind.MISSING_TOKEN)

        return self.codec.parse(token, now or utc_now())

    def authorize(
        self,
        request: Request,
        allowed_methods: Collection[str],
        required_role: Role | None,
        now: datetime | None = None,
    ) -> str | Failure:
        """
        Run all checks and return the caller's email on success.

        ``required_role=None`` accepts any caller holding a valid token.
        """
        if request.method not in allowed_methods:
            return Failure.forbidden_method(frozenset(allowed_methods))

        claims = self.authenticate(request, now)
        if isinstance(claims, Failure):
            return claims

        if required_role is not None and not claims.has_role(required_role):
            return Failure(FailureKind.MISSING_ROLE, detail=required_role.value)

        if not claims.identity or not claims.identity.strip():
            return Failure(FailureKind.INVALID_IDENTITY, detail="empty subject")

        return claims.identity
