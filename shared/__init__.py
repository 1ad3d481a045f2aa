"""Cross-cutting helpers: error taxonomy, JSON error handlers, logging, validation."""

from .exceptions import AppError, NotFound, ValidationError

__all__ = ["AppError", "NotFound", "ValidationError"]
