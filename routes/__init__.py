"""HTTP blueprints for the JSON API."""

from __future__ import annotations

from flask import Flask

from .auth import auth_bp
from .cards import cards_bp
from .decks import decks_bp
from .health import health_bp


def register_blueprints(app: Flask) -> None:
    for blueprint in (health_bp, auth_bp, cards_bp, decks_bp):
        app.register_blueprint(blueprint)


__all__ = ["register_blueprints", "auth_bp", "cards_bp", "decks_bp", "health_bp"]
