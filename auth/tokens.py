"""
Opaque session tokens.

A token is a random UUID4 string stored on the user row. It carries no
payload and never expires; each login replaces the previous one.
"""

from __future__ import annotations

import uuid

_BEARER_SCHEME = "bearer"


def new_token() -> str:
    """Return a fresh 122-bit random identifier in canonical UUID form."""
    return str(uuid.uuid4())


def parse_authorization(header: str | None) -> str | None:
    """Extract the token from an ``Authorization`` header value.

    Only the ``Bearer`` scheme is accepted; scheme names are case-insensitive.
    """
    parts = (header or "").split()
    if len(parts) != 2 or parts[0].lower() != _BEARER_SCHEME:
        return None
    return parts[1]
