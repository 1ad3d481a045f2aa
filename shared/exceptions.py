"""Application error taxonomy.

Every error carries the HTTP status it maps to and a message that is safe to
show to API clients; ``shared.error_handlers`` renders them as ``{"error": ...}``.
"""

from __future__ import annotations


class AppError(Exception):
    """Base exception for application-level errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Raised when request or payload validation fails."""

    status_code = 400
    default_message = "Invalid request"


class InvalidName(ValidationError):
    default_message = "Deck name is required"


class InvalidCardCount(ValidationError):
    default_message = "Exactly 10 cards are required"


class DuplicateCard(ValidationError):
    default_message = "Duplicate card IDs are not allowed"


class UnknownCard(ValidationError):
    default_message = "Some card IDs are invalid"


class InvalidDeckId(ValidationError):
    default_message = "Invalid deck ID"


class Conflict(AppError):
    """Raised when a unique key is already taken."""

    status_code = 409
    default_message = "Conflict"


class Unauthorized(AppError):
    """Credentials were supplied but did not check out."""

    status_code = 401
    default_message = "Invalid email or password"


class Unauthenticated(AppError):
    """No session token accompanied a protected request."""

    status_code = 401
    default_message = "Missing token"


class InvalidToken(AppError):
    """The session token is malformed, forged, or expired."""

    status_code = 401
    default_message = "Invalid or expired token"


class NotFound(AppError):
    """Raised when a requested resource cannot be located (or is not the caller's)."""

    status_code = 404
    default_message = "Not found"


class Internal(AppError):
    status_code = 500


__all__ = [
    "AppError",
    "ValidationError",
    "InvalidName",
    "InvalidCardCount",
    "DuplicateCard",
    "UnknownCard",
    "InvalidDeckId",
    "Conflict",
    "Unauthorized",
    "Unauthenticated",
    "InvalidToken",
    "NotFound",
    "Internal",
]
