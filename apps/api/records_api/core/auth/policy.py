"""
Route policy table.

Maps each route family (first path segment) to the methods it accepts and
the role a caller must hold. AccessGateMiddleware consults this table for
every request; paths not listed here are not gated.
"""

from .interfaces import Role, RoutePolicy

ROUTE_POLICIES: dict[str, RoutePolicy] = {
    "/student": RoutePolicy(
        allowed_methods=frozenset({"GET"}),
        required_role=Role.STUDENT,
    ),
    "/teacher": RoutePolicy(
        allowed_methods=frozenset({"GET", "POST"}),
        required_role=Role.TEACHER,
    ),
    "/admin": RoutePolicy(
        allowed_methods=frozenset({"GET", "POST", "PATCH", "DELETE"}),
        required_role=Role.ADMIN,
    ),
    "/change-password": RoutePolicy(
        allowed_methods=frozenset({"POST"}),
    ),
    "/login": RoutePolicy(
        allowed_methods=frozenset({"POST"}),
        public=True,
    ),
}


def policy_for_path(path: str) -> RoutePolicy | None:
    """Return the policy whose prefix owns ``path`` (whole segments only)."""
    for prefix, policy in ROUTE_POLICIES.items():
        if path == prefix or path.startswith(prefix + "/"):
            return policy
    return None
