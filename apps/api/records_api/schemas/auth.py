"""
Authentication schemas.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login request. Empty values are rejected as a credential mismatch."""
    email: str
    password: str


class TokenResponse(BaseModel):
    """Issued bearer token. Send it verbatim in the Authorization header."""
    token: str


class ChangePasswordRequest(BaseModel):
    """Password change for the authenticated caller."""
    old_password: str
    new_password: str = Field(min_length=8, max_length=72)
