"""
Error kinds raised by the credential workflow.

Each error carries the HTTP status it maps to; ``api.middleware`` renders
them as ``{"code", "detail", "errors"}`` JSON bodies.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class AuthError(Exception):
    """Base class for client-facing auth errors."""

    code = "AuthError"
    status_code = 400

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class InvalidInputError(AuthError):
    code = "InvalidInput"
    status_code = 400

    def __init__(self, errors: List[Dict[str, Any]]) -> None:
        super().__init__("Request validation failed", errors)


class DuplicateUsernameError(AuthError):
    code = "DuplicateUsername"
    status_code = 400

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username already exists")


class InvalidCredentialsError(AuthError):
    """Raised for both unknown usernames and wrong passwords."""

    code = "InvalidCredentials"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Username or password is incorrect")


class UnauthorizedError(AuthError):
    code = "Unauthorized"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Unauthorized")
