"""Account routes: sign-up and sign-in."""

from __future__ import annotations

from flask import Blueprint, jsonify

from services import auth_service
from services.tokens import settings_from_app
from shared.validation import json_body

from .serializers import serialize_user

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@auth_bp.post("/sign-up")
def sign_up():
    payload = json_body()
    result = auth_service.sign_up(
        payload.get("email"),
        payload.get("username"),
        payload.get("password"),
        settings_from_app(),
    )
    return jsonify({"token": result.token, "user": serialize_user(result.user)}), 201


@auth_bp.post("/sign-in")
def sign_in():
    payload = json_body()
    result = auth_service.sign_in(
        payload.get("email"),
        payload.get("password"),
        settings_from_app(),
    )
    return jsonify({"token": result.token, "user": serialize_user(result.user)}), 200


__all__ = ["auth_bp"]
