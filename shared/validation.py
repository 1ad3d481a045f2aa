"""Input validation helpers."""

from __future__ import annotations

import logging
from typing import Any

from flask import request

from .exceptions import InvalidDeckId, ValidationError

logger = logging.getLogger(__name__)

# Largest value a SQLite/Postgres BIGINT column can hold.
MAX_DB_INT = 2**63 - 1


def log_validation_error(err: ValidationError, *, context: str | None = None) -> None:
    suffix = f" ({context})" if context else ""
    logger.warning("Validation error%s: %s", suffix, err.message)


def parse_positive_int(value: Any, *, field: str = "id", min_value: int = 1) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing {field}.")
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}.")
    try:
        out = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}.")
    if out < min_value or out > MAX_DB_INT:
        raise ValidationError(f"Invalid {field}.")
    return out


def parse_deck_id(value: Any) -> int:
    """Parse a deck id path segment; anything but a positive integer is a 400."""
    try:
        return parse_positive_int(value, field="deck ID")
    except ValidationError:
        raise InvalidDeckId()


def json_body() -> dict[str, Any]:
    """Return the request's JSON object body, or an empty dict when none was sent."""
    if not request.get_data(cache=True):
        return {}
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def clean_text(value: Any) -> str:
    """Strip a string field; non-strings count as missing."""
    if not isinstance(value, str):
        return ""
    return value.strip()
