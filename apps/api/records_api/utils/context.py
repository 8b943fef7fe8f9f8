"""
Request Context Utilities.

Request-scoped values shared between middleware and log records:
- request_id: set by RequestIdMiddleware
- caller: email of the authenticated caller, set by AccessGateMiddleware

Usage:
    from records_api.utils.context import get_request_id

    logger.info("Processing", request_id=get_request_id())
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Optional

# Request-scoped context using contextvars (async-safe)
_request_id: ContextVar[str] = ContextVar("request_id", default="")
_caller: ContextVar[Optional[str]] = ContextVar("caller", default=None)


def get_request_id() -> str:
    """Get the current request ID ("" outside a request)."""
    return _request_id.get()


def set_request_id(request_id: str):
    """Set the request ID, returning the token needed to reset it."""
    return _request_id.set(request_id)


def reset_request_id(token) -> None:
    _request_id.reset(token)


def get_caller() -> Optional[str]:
    return _caller.get()


def set_caller(email: Optional[str]):
    """Record the authenticated caller, returning the reset token."""
    return _caller.set(email)


def reset_caller(token) -> None:
    _caller.reset(token)


# ============================================================
# STRUCTLOG PROCESSOR
# ============================================================

def add_request_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    Structlog processor that adds request context to all logs.

    Installed by records_api.core.logging.configure_logging.
    """
    request_id = get_request_id()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    caller = get_caller()
    if caller:
        event_dict.setdefault("caller", caller)

    return event_dict
