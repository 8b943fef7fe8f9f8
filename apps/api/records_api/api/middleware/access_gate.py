"""
Access gate middleware.

Runs the route policy checks before routing, so a disallowed method is
reported as ForbiddenMethod rather than the router's 405, and no handler
ever runs for an unauthorized caller.
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from records_api.core.auth import AccessGate, Failure, failure_response, policy_for_path
from records_api.utils.context import reset_caller, set_caller

logger = structlog.get_logger()

ALLOW_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"
ALLOW_HEADERS = "Authorization, Content-Type"


class AccessGateMiddleware(BaseHTTPMiddleware):
    """
    Enforce ROUTE_POLICIES and attach CORS headers.

    Preflight (OPTIONS) requests are answered here with an empty 200 and the
    fixed CORS headers; no policy check is made for them. On success the
    caller's email is stored on ``request.state.caller_email``.
    """

    def __init__(self, app, gate: AccessGate, cors_origin: str = "*"):
        super().__init__(app)
        self.gate = gate
        self.cors_origin = cors_origin

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return Response(
                status_code=200,
                headers={
                    "Access-Control-Allow-Origin": self.cors_origin,
                    "Access-Control-Allow-Methods": ALLOW_METHODS,
                    "Access-Control-Allow-Headers": ALLOW_HEADERS,
                },
            )

        response = await self._gated(request, call_next)
        response.headers["Access-Control-Allow-Origin"] = self.cors_origin
        return response

    async def _gated(self, request: Request, call_next) -> Response:
        policy = policy_for_path(request.url.path)
        if policy is None:
            return await call_next(request)

        if policy.public:
            if request.method not in policy.allowed_methods:
                return self._deny(request, Failure.forbidden_method(policy.allowed_methods))
            return await call_next(request)

        result = self.gate.authorize(request, policy.allowed_methods, policy.required_role)
        if isinstance(result, Failure):
            return self._deny(request, result)

        request.state.caller_email = result
        token = set_caller(result)
        try:
            return await call_next(request)
        finally:
            reset_caller(token)

    def _deny(self, request: Request, failure: Failure) -> Response:
        logger.warning(
            "access_denied",
            kind=failure.kind.value,
            detail=failure.detail,
            method=request.method,
            path=request.url.path,
        )
        return failure_response(failure)
