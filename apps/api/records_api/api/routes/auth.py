"""
Authentication routes.
"""

from fastapi import APIRouter, Depends

from records_api.core.auth import AccessDenied, CallerEmail, Failure
from records_api.schemas.auth import ChangePasswordRequest, LoginRequest, TokenResponse
from records_api.schemas.common import SUCCESS, MessageResponse
from records_api.services.auth import AuthService
from records_api.api.dependencies.services import get_auth_service

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Login with email and password."""
    token = await auth_service.login(email=data.email, password=data.password)
    if isinstance(token, Failure):
        raise AccessDenied(token)
    return TokenResponse(token=token)


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    data: ChangePasswordRequest,
    email: CallerEmail,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Change the caller's password (any role)."""
    await auth_service.change_password(email, data.old_password, data.new_password)
    return SUCCESS
