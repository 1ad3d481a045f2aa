"""Structured logging with request IDs."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask, g, has_request_context, request


class RequestIdFilter(logging.Filter):
    """Inject request-scoped metadata into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_request_context():
            record.request_id = getattr(g, "request_id", "n/a")
            record.path = request.path
            record.method = request.method
        else:
            record.request_id = getattr(record, "request_id", "startup")
            record.path = getattr(record, "path", "")
            record.method = getattr(record, "method", "")
        return True


class JsonRequestFormatter(logging.Formatter):
    """Simple JSON formatter for logfmt-friendly ingestion."""

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "n/a"),
            "path": getattr(record, "path", ""),
            "method": getattr(record, "method", ""),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonRequestFormatter())
    handler.setLevel(level)
    return handler


def configure_logging(app: Flask) -> None:
    """Attach JSON handlers to the app logger, the package loggers and werkzeug."""
    level = logging.getLevelName(app.config.get("LOG_LEVEL", "INFO"))
    if not isinstance(level, int):
        level = logging.INFO

    handlers = [_build_handler(logging.StreamHandler(), level)]

    if app.config.get("LOG_TO_FILE"):
        try:
            logs_dir = Path(app.instance_path) / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                logs_dir / "app.log",
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            handlers.append(_build_handler(file_handler, level))
        except OSError as exc:
            app.logger.warning("Falling back to stream-only logging (file handler unavailable): %s", exc)

    app.logger.handlers = handlers
    app.logger.setLevel(level)
    for name in ("werkzeug", "routes", "services", "shared", "seeds"):
        named = logging.getLogger(name)
        named.handlers = handlers
        named.setLevel(level)
        named.propagate = False
