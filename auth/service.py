"""
Credential service — registration, login and token lookup.

The service owns the workflow; validation lives in ``utils.validators`` and
persistence in ``database.repository``. Bcrypt work is pushed to a worker
thread via ``asyncio.to_thread()`` so hashing never blocks the event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Union

from auth.exceptions import DuplicateUsernameError, InvalidCredentialsError, UnauthorizedError
from auth.password import hash_password, verify_password
from auth.tokens import new_token
from config.settings import config
from database.repository import UserRepository
from utils.schemas import LoginRequest, RegisterRequest, UserResponse
from utils.validators import validate

_REDACTED = "***"
_SENSITIVE_FIELDS = frozenset({"password", "token"})


def redact(payload: Union[Mapping[str, Any], Any]) -> Dict[str, Any]:
    """Copy of a request payload safe to write to logs."""
    if hasattr(payload, "model_dump"):
        data = payload.model_dump()
    elif isinstance(payload, Mapping):
        data = dict(payload)
    else:
        return {"payload": type(payload).__name__}
    return {
        key: (_REDACTED if key in _SENSITIVE_FIELDS else value)
        for key, value in data.items()
    }


class CredentialService:
    def __init__(
        self,
        repository: UserRepository,
        bcrypt_rounds: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.repository = repository
        self.bcrypt_rounds = bcrypt_rounds or config.bcrypt_rounds
        self.logger = logger or logging.getLogger(__name__)

    async def register(self, request: Union[RegisterRequest, Mapping[str, Any]]) -> UserResponse:
        self.logger.info("CredentialService.register(%s)", redact(request))
        req = validate(RegisterRequest, request)

        if await self.repository.count(req.username) > 0:
            raise DuplicateUsernameError(req.username)

        hashed = await asyncio.to_thread(hash_password, req.password, self.bcrypt_rounds)
        user = await self.repository.create(
            {"username": req.username, "name": req.name, "password": hashed}
        )
        return UserResponse(username=user.username, name=user.name)

    async def login(self, request: Union[LoginRequest, Mapping[str, Any]]) -> UserResponse:
        self.logger.info("CredentialService.login(%s)", redact(request))
        req = validate(LoginRequest, request)

        user = await self.repository.find_unique(req.username)
        if user is None:
            raise InvalidCredentialsError()

        if not await asyncio.to_thread(verify_password, req.password, user.password):
            raise InvalidCredentialsError()

        user = await self.repository.update(user.username, {"token": new_token()})
        return UserResponse(username=user.username, name=user.name, token=user.token)

    async def current(self, token: Optional[str]) -> UserResponse:
        """Resolve the user holding ``token``; raises ``UnauthorizedError``."""
        if not token:
            raise UnauthorizedError()
        user = await self.repository.find_by_token(token)
        if user is None:
            raise UnauthorizedError()
        return UserResponse(username=user.username, name=user.name)
