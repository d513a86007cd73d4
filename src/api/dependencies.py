"""FastAPI dependencies for request parsing and database access."""

import json
import logging
from typing import Any

from fastapi import Request

from src.database import get_db

logger = logging.getLogger(__name__)

__all__ = ["get_db", "get_submission_fields"]


async def get_submission_fields(request: Request) -> dict[str, Any]:
    """Read submitted fields from a JSON or form-encoded body.

    A malformed or non-object JSON body yields no fields, which then fails
    validation like an empty form.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Ignoring malformed JSON submission body")
            return {}
        return payload if isinstance(payload, dict) else {}

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
