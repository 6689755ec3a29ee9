"""
Auth API routes — register, login, current user.

Route prefix: /api/v1/auth
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from auth.dependencies import get_credential_service, get_current_user
from auth.service import CredentialService
from utils.schemas import ErrorResponse, LoginRequest, RegisterRequest, UserResponse

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def register(
    req: RegisterRequest,
    service: CredentialService = Depends(get_credential_service),
) -> UserResponse:
    """Register a new user."""
    return await service.register(req)


@router.post(
    "/login",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    req: LoginRequest,
    service: CredentialService = Depends(get_credential_service),
) -> UserResponse:
    """Login with username + password; rotates the session token."""
    return await service.login(req)


@router.get(
    "/me",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses={401: {"model": ErrorResponse}},
)
async def me(user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Return the user owning the presented session token."""
    return user
