"""
Authorization interfaces - Core abstractions.

Value types shared by the token codec, access gate and domain guard, plus
the two lookups the auth core needs from persistence. Repositories implement
the lookup interfaces; the core never queries the database itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence


# ============================================================
# ROLES
# ============================================================

class Role(str, Enum):
    """Capability labels carried in a token. Values are the wire names."""

    ADMIN = "Admin"
    STUDENT = "Student"
    TEACHER = "Teacher"


# ============================================================
# TOKEN CLAIMS
# ============================================================

@dataclass(frozen=True)
class TokenClaims:
    """
    Verified contents of a bearer token.

    Attributes:
        identity: Subject email (may be None/empty; the gate rejects that)
        roles: Role names exactly as issued
        expires_at: Expiry as seconds since the epoch
    """
    identity: str | None
    roles: frozenset[str]
    expires_at: int

    def has_role(self, role: Role) -> bool:
        return role.value in self.roles


# ============================================================
# ROUTE POLICY
# ============================================================

@dataclass(frozen=True)
class RoutePolicy:
    """
    Declared access requirements for a route family.

    Attributes:
        allowed_methods: HTTP methods the family accepts
        required_role: Role the caller must hold; None accepts any
            authenticated caller
        public: Skip token checks entirely (only the method is checked)
    """
    allowed_methods: frozenset[str]
    required_role: Role | None = None
    public: bool = False


# ============================================================
# PERSISTENCE LOOKUPS
# ============================================================

class CredentialStore(ABC):
    """Source of stored password hashes."""

    @abstractmethod
    async def get_password_hash(self, email: str) -> str | None:
        """Return the stored hash for ``email``, or None if unknown."""
        pass


class CourseOwnershipSource(ABC):
    """Source of course ownership facts."""

    @abstractmethod
    async def get_owned_courses(self, teacher_email: str) -> Sequence[Any]:
        """
        Return the non-deleted courses taught by ``teacher_email``.

        Each item must expose a ``name`` attribute.
        """
        pass
