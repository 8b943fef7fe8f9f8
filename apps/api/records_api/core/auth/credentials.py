"""
Password hashing and credential verification.
"""

import structlog
from passlib.context import CryptContext

from .interfaces import CredentialStore

logger = structlog.get_logger()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class CredentialVerifier:
    """
    Checks a password against the stored hash for an email.

    Unknown emails and wrong passwords produce the same result, and an
    unknown email still pays for one bcrypt verification so the two cases
    take about as long.
    """

    def __init__(self, store: CredentialStore):
        self.store = store

    async def verify(self, email: str, password: str) -> bool:
        stored_hash = await self.store.get_password_hash(email)
        if stored_hash is None:
            pwd_context.dummy_verify()
            logger.info("credential_check_failed", email=email, reason="unknown_email")
            return False

        try:
            matched = pwd_context.verify(password, stored_hash)
        except ValueError:
            # Stored value is not a recognizable hash
            logger.warning("credential_check_failed", email=email, reason="unusable_hash")
            return False

        if not matched:
            logger.info("credential_check_failed", email=email, reason="password_mismatch")
        return matched
