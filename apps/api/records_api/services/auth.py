"""
Authentication service.
"""

from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.core.auth import (
    AccessDenied,
    CredentialVerifier,
    Failure,
    FailureKind,
    TokenCodec,
    hash_password,
)
from records_api.core.exceptions import RecordNotFound
from records_api.repositories.people import PersonRepository
from records_api.utils.timezone import utc_now

logger = structlog.get_logger()


class AuthService:
    """Login and password management."""

    def __init__(self, db: AsyncSession, codec: TokenCodec):
        self.db = db
        self.codec = codec
        self.people = PersonRepository(db)
        self.verifier = CredentialVerifier(self.people)

    async def login(
        self,
        email: str,
        password: str,
        now: datetime | None = None,
    ) -> str | Failure:
        """
        Verify credentials and issue a token carrying the person's current roles.

        Returns CredentialMismatch for empty, unknown or wrong credentials alike.
        """
        if not email or not password:
            return Failure(FailureKind.CREDENTIAL_MISMATCH, detail="empty credentials")

        if not await self.verifier.verify(email, password):
            return Failure(FailureKind.CREDENTIAL_MISMATCH)

        roles = await self.people.get_roles(email)
        token = self.codec.issue(email, roles, now or utc_now())

        logger.info("login_succeeded", email=email, roles=[r.value for r in roles])
        return token

    async def change_password(self, email: str, old_password: str, new_password: str) -> None:
        """
        Replace the caller's password after re-checking the old one.

        Raises:
            AccessDenied(CredentialMismatch): old password is wrong
            RecordNotFound: person no longer exists
        """
        if not await self.verifier.verify(email, old_password):
            raise AccessDenied(Failure(FailureKind.CREDENTIAL_MISMATCH, detail="old password"))

        person = await self.people.get_by_email(email)
        if person is None:
            raise RecordNotFound(f"No person with email {email}")

        await self.people.update(person, password_hash=hash_password(new_password))
        logger.info("password_changed", email=email)
