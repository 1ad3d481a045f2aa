"""Deck routes. Every endpoint requires a bearer token."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from services import deck_service
from services.deck_service import MISSING
from shared.validation import json_body, parse_deck_id

from .serializers import serialize_deck

decks_bp = Blueprint("decks", __name__, url_prefix="/api/decks")


@decks_bp.before_request
@login_required
def _require_token():
    """Gate the whole blueprint behind the bearer-token check."""
    return None


@decks_bp.post("")
def create_deck():
    payload = json_body()
    deck = deck_service.create_deck(current_user.id, payload.get("name"), payload.get("cards"))
    return jsonify(serialize_deck(deck)), 201


@decks_bp.get("/mine")
def my_decks():
    decks = deck_service.list_decks(current_user.id)
    return jsonify([serialize_deck(deck) for deck in decks])


@decks_bp.get("/<deck_id>")
def get_deck(deck_id: str):
    deck = deck_service.get_deck(parse_deck_id(deck_id), current_user.id)
    return jsonify(serialize_deck(deck))


@decks_bp.patch("/<deck_id>")
def update_deck(deck_id: str):
    parsed_id = parse_deck_id(deck_id)
    payload = json_body()
    deck = deck_service.update_deck(
        parsed_id,
        current_user.id,
        name=payload.get("name", MISSING),
        card_ids=payload.get("cards", MISSING),
    )
    return jsonify(serialize_deck(deck))


@decks_bp.delete("/<deck_id>")
def delete_deck(deck_id: str):
    deck_service.delete_deck(parse_deck_id(deck_id), current_user.id)
    return jsonify({"message": "Deck deleted successfully"})


__all__ = ["decks_bp"]
