"""
FastAPI dependencies for authorization.

The access gate runs in AccessGateMiddleware before routing; handlers read
the verified caller through these dependencies.

Usage:
    from records_api.core.auth import CallerEmail

    @router.get("/exams")
    async def handler(email: CallerEmail):
        ...
"""

from typing import Annotated

import structlog
from fastapi import Depends, Request

from .failures import AccessDenied, Failure, FailureKind
from .tokens import TokenCodec

logger = structlog.get_logger()


def get_token_codec(request: Request) -> TokenCodec:
    """Token codec built at startup (see create_app)."""
    return request.app.state.token_codec


async def get_caller_email(request: Request) -> str:
    """
    Email of the caller verified by the access gate.

    Raises:
        AccessDenied(MissingToken): route is not covered by a gated policy
    """
    email = getattr(request.state, "caller_email", None)
    if not email:
        # A handler needs a caller but its path has no entry in ROUTE_POLICIES
        logger.error("route_not_gated", method=request.method, path=request.url.path)
        raise AccessDenied(Failure(FailureKind.MISSING_TOKEN, detail="route not gated"))
    return email


# Verified caller email (required)
CallerEmail = Annotated[str, Depends(get_caller_email)]
