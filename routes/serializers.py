"""JSON shapes for API responses (camelCase keys, as the web client expects)."""

from __future__ import annotations

from typing import Any, Dict

from models import Card, Deck, DeckCard, User
from utils.time import isoformat_utc


def serialize_user(user: User) -> Dict[str, Any]:
    """Public projection of an account; the password hash never leaves the server."""
    return {
        "id": user.id,
        "email": user.email,
        "username": user.username,
        "createdAt": isoformat_utc(user.created_at),
    }


def serialize_card(card: Card) -> Dict[str, Any]:
    return {
        "id": card.id,
        "name": card.name,
        "hp": card.hp,
        "attack": card.attack,
        "type": card.type.value if card.type is not None else None,
        "pokedexNumber": card.pokedex_number,
        "imgUrl": card.img_url,
    }


def serialize_deck_card(link: DeckCard) -> Dict[str, Any]:
    return {
        "deckId": link.deck_id,
        "cardId": link.card_id,
        "card": serialize_card(link.card),
    }


def serialize_deck(deck: Deck) -> Dict[str, Any]:
    return {
        "id": deck.id,
        "name": deck.name,
        "userId": deck.user_id,
        "createdAt": isoformat_utc(deck.created_at),
        "updatedAt": isoformat_utc(deck.updated_at),
        "deckCards": [serialize_deck_card(link) for link in deck.deck_cards],
    }
