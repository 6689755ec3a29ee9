"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_credential_service`` and ``get_current_user``
dependencies used by the auth routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from auth.service import CredentialService
from auth.tokens import parse_authorization
from database.repository import UserRepository
from database.session import get_db_session
from utils.schemas import UserResponse


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_credential_service(
    session: AsyncSession = Depends(db_session),
) -> CredentialService:
    return CredentialService(UserRepository(session))


async def get_current_user(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    service: CredentialService = Depends(get_credential_service),
) -> UserResponse:
    """
    Resolve the session token in the ``Authorization`` header to its user.

    Raises ``UnauthorizedError`` (401) when the header is missing or the
    token matches nobody.
    """
    return await service.current(parse_authorization(authorization))
