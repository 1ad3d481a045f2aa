"""Centralized JSON error handlers."""

from __future__ import annotations

import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

from extensions import db

from .exceptions import AppError, Internal

logger = logging.getLogger(__name__)


def _json_error(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app) -> None:
    """Register error handlers on the Flask app."""

    @app.errorhandler(AppError)
    def app_error(err: AppError):  # type: ignore[no-redef]
        if err.status_code >= 500:
            logger.error("Application error: %s", err.message)
        return _json_error(err.message, err.status_code)

    @app.errorhandler(HTTPException)
    def http_error(err: HTTPException):  # type: ignore[no-redef]
        if err.code == 404:
            return _json_error("Resource not found", 404)
        if err.code == 405:
            return _json_error("Method not allowed", 405)
        if err.code == 400:
            return _json_error("Malformed request body", 400)
        return _json_error(err.name, err.code or 500)

    @app.errorhandler(Exception)
    def unexpected(err: Exception):  # type: ignore[no-redef]
        """Roll back broken transactions and hide internals behind a generic 500."""
        db.session.rollback()
        logger.exception("Unhandled error: %s", err.__class__.__name__)
        return _json_error(Internal.default_message, 500)
