"""Read-only card catalog."""

from __future__ import annotations

from flask import Blueprint, jsonify

from services.card_catalog import list_cards

from .serializers import serialize_card

cards_bp = Blueprint("cards", __name__, url_prefix="/api/cards")


@cards_bp.get("")
def api_cards():
    """Every card, ascending by pokedex number."""
    return jsonify([serialize_card(card) for card in list_cards()])


__all__ = ["cards_bp"]
