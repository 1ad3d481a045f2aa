"""Deck business rules.

A deck is exactly ``DECK_SIZE`` distinct, existing cards with a non-blank
name. Everything here runs before :mod:`services.deck_repository` is asked to
write, so a rejected request never touches the deck tables.
"""

from __future__ import annotations

import logging
from typing import Any

from models import DECK_SIZE, Deck
from shared.exceptions import (
    DuplicateCard,
    InvalidCardCount,
    InvalidName,
    NotFound,
    UnknownCard,
)
from shared.validation import MAX_DB_INT

from . import deck_repository

logger = logging.getLogger(__name__)

DECK_NOT_FOUND = "Deck not found"


class _Missing:
    def __repr__(self):
        return "MISSING"


# Marks a field the client did not send at all (as opposed to sending null).
MISSING: Any = _Missing()


def validate_name(name: Any, *, message: str = InvalidName.default_message) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidName(message)
    return name.strip()


def _is_storable_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_DB_INT


def validate_card_ids(card_ids: Any) -> list[int]:
    """Check count, type, uniqueness and existence of a proposed card list."""
    if not isinstance(card_ids, list) or len(card_ids) != DECK_SIZE:
        raise InvalidCardCount()
    if not all(_is_storable_id(card_id) for card_id in card_ids):
        raise UnknownCard()
    if len(set(card_ids)) != DECK_SIZE:
        raise DuplicateCard()
    existing = deck_repository.cards_existing(card_ids)
    if len(existing) != DECK_SIZE:
        missing = sorted(set(card_ids) - set(existing))
        logger.info("Rejected deck with unknown card ids %s", missing)
        raise UnknownCard()
    return list(card_ids)


def create_deck(user_id: int, name: Any, card_ids: Any) -> Deck:
    clean_name = validate_name(name)
    cards = validate_card_ids(card_ids)
    return deck_repository.create(user_id, clean_name, cards)


def list_decks(user_id: int) -> list[Deck]:
    return deck_repository.list_by_user(user_id)


def get_deck(deck_id: int, user_id: int) -> Deck:
    deck = deck_repository.get_by_id_for_user(deck_id, user_id)
    if deck is None:
        raise NotFound(DECK_NOT_FOUND)
    return deck


def update_deck(deck_id: int, user_id: int, name: Any = MISSING, card_ids: Any = MISSING) -> Deck:
    """Partial update: omitted fields keep their current value."""
    existing = get_deck(deck_id, user_id)

    if name is MISSING:
        final_name = existing.name
    else:
        final_name = validate_name(name, message="Deck name cannot be empty")

    if card_ids is MISSING:
        final_cards = existing.card_ids
    else:
        final_cards = validate_card_ids(card_ids)

    deck = deck_repository.replace(deck_id, user_id, final_name, final_cards)
    if deck is None:
        # Deleted between the ownership check and the write.
        raise NotFound(DECK_NOT_FOUND)
    return deck


def delete_deck(deck_id: int, user_id: int) -> None:
    get_deck(deck_id, user_id)
    if not deck_repository.delete(deck_id, user_id):
        raise NotFound(DECK_NOT_FOUND)
