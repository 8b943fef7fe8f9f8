"""
Bearer token codec.

Tokens are compact HMAC-signed JWTs whose payload is exactly::

    {"roles": ["Student", ...], "email": "someone@example.com", "exp": 1767225600}

Verification depends only on the token text, the secret key and the ``now``
passed in, so the codec can be shared freely between requests.
"""

from datetime import datetime, timedelta
from typing import Iterable

from jose import jws, jwt
from jose.exceptions import JWSError
from pydantic import BaseModel, ConfigDict, ValidationError

from records_api.core.config import AuthSettings

from .failures import Failure
from .interfaces import Role, TokenClaims


class TokenPayload(BaseModel):
    """JWT payload as issued by TokenCodec. Decoding is strict: no coercion."""

    model_config = ConfigDict(strict=True, extra="ignore")

    roles: list[str]
    email: str | None = None
    exp: int


class TokenCodec:
    """
    Issues and parses signed bearer tokens.

    Example:
        codec = TokenCodec("secret", ttl=timedelta(hours=12))
        token = codec.issue("a@b.com", [Role.STUDENT], utc_now())
        claims = codec.parse(token, utc_now())
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
    ):
        if not algorithm.startswith("HS"):
            raise ValueError(f"Token algorithm must be an HMAC scheme, got {algorithm}")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl_seconds = int(ttl.total_seconds())

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> "TokenCodec":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            ttl=timedelta(minutes=settings.token_ttl_minutes),
        )

    def issue(self, identity: str, roles: Iterable[Role | str], now: datetime) -> str:
        """Create a token for ``identity`` valid until ``now`` + the configured TTL."""
        role_names = sorted({r.value if isinstance(r, Role) else r for r in roles})
        payload = {
            "roles": role_names,
            "email": identity,
            "exp": int(now.timestamp()) + self.ttl_seconds,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def parse(self, token: str, now: datetime) -> TokenClaims | Failure:
        """
        Verify a token and return its claims.

        Returns an InvalidToken failure whose detail is one of
        ``malformed``, ``wrong_algorithm``, ``bad_signature``,
        ``invalid_claims`` or ``expired``. A token is expired from the
        instant ``now`` reaches ``exp``.
        """
        try:
            header = jws.get_unverified_header(token)
        except JWSError:
            return Failure.invalid_token("malformed")

        # Reject "none", asymmetric algorithms and other HMAC sizes up front
        if header.get("alg") != self.algorithm:
            return Failure.invalid_token("wrong_algorithm")

        try:
            raw_payload = jws.verify(token, self._secret_key, algorithms=[self.algorithm])
        except JWSError:
            return Failure.invalid_token("bad_signature")

        try:
            payload = TokenPayload.model_validate_json(raw_payload)
        except ValidationError:
            return Failure.invalid_token("invalid_claims")

        if now.timestamp() >= payload.exp:
            return Failure.invalid_token("expired")

        return TokenClaims(
            identity=payload.email,
            roles=frozenset(payload.roles),
            expires_at=payload.exp,
        )
