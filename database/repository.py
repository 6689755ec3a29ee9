"""
User record store over an async SQLAlchemy session.

Transactions are owned by ``get_db_session``; the repository only flushes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.exceptions import DuplicateUsernameError
from database.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count(self, username: str) -> int:
        result = await self.session.scalar(
            select(func.count()).select_from(User).where(User.username == username)
        )
        return result or 0

    async def find_unique(self, username: str) -> Optional[User]:
        return await self.session.get(User, username)

    async def find_by_token(self, token: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.token == token))
        return result.scalar_one_or_none()

    async def create(self, fields: Dict[str, Any]) -> User:
        """
        Insert a new user; a primary-key clash raises ``DuplicateUsernameError``.

        The session is left needing a rollback, which the session owner does.
        """
        user = User(**fields)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            logger.warning("Insert rejected for username %s: %s", fields.get("username"), exc.orig)
            raise DuplicateUsernameError(fields.get("username", "")) from exc
        return user

    async def update(self, username: str, fields: Dict[str, Any]) -> User:
        user = await self.find_unique(username)
        if user is None:
            raise LookupError(f"User '{username}' does not exist")
        for key, value in fields.items():
            setattr(user, key, value)
        await self.session.flush()
        return user
