from __future__ import annotations

from flask import Blueprint, jsonify

health_bp = Blueprint("health", __name__, url_prefix="/api")


@health_bp.get("/health")
def health():
    return jsonify({"status": "ok", "message": "TCG Backend Server is running"})


__all__ = ["health_bp"]
