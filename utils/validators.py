"""
Request validation against pydantic schemas.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from auth.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def error_details(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe ``{field, message, type}`` entries.

    Submitted values are dropped so passwords never end up in responses.
    """
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append(
            {
                "field": ".".join(loc),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return details


def validate(schema: Type[SchemaT], payload: Union[SchemaT, Dict[str, Any]]) -> SchemaT:
    """
    Validate ``payload`` against ``schema`` and return a normalized copy.

    Accepts either a raw mapping or an already-built model instance (which is
    re-checked through its dumped fields). Raises ``InvalidInputError``.
    """
    data = payload.model_dump() if isinstance(payload, BaseModel) else payload
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        details = error_details(exc.errors())
        logger.debug("%s rejected: %s", schema.__name__, details)
        raise InvalidInputError(details) from exc
