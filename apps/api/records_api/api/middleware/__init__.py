"""Middleware package."""

from records_api.api.middleware.access_gate import AccessGateMiddleware
from records_api.api.middleware.logging import LoggingMiddleware
from records_api.api.middleware.request_id import RequestIdMiddleware

__all__ = [
    "AccessGateMiddleware",
    "LoggingMiddleware",
    "RequestIdMiddleware",
]
