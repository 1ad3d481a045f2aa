"""Deck persistence.

Every lookup is scoped by owner: a deck that exists but belongs to someone
else is indistinguishable from one that does not exist. Each mutating call is
one unit of work on the request session; on any store failure the session is
rolled back and the error re-raised, so a deck is never left with a partial
card set.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from extensions import db
from models import Card, Deck, DeckCard
from utils.time import utcnow

logger = logging.getLogger(__name__)


def _links(card_ids: Sequence[int]) -> list[DeckCard]:
    return [DeckCard(card_id=card_id, position=index) for index, card_id in enumerate(card_ids)]


def _owned(deck_id: int, user_id: int):
    return Deck.query.filter(Deck.id == deck_id, Deck.user_id == user_id)


def _commit(action: str, deck_id: int | None = None) -> None:
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Deck %s failed (deck=%s); rolled back", action, deck_id)
        raise


def create(user_id: int, name: str, card_ids: Sequence[int]) -> Deck:
    """Insert the deck and all of its card links in one transaction."""
    deck = Deck(name=name, user_id=user_id)
    deck.deck_cards = _links(card_ids)
    db.session.add(deck)
    _commit("create")
    logger.info("Created deck %s for user %s", deck.id, user_id)
    return deck


def list_by_user(user_id: int) -> list[Deck]:
    return (
        Deck.query.filter(Deck.user_id == user_id)
        .options(selectinload(Deck.deck_cards))
        .order_by(Deck.id)
        .all()
    )


def get_by_id_for_user(deck_id: int, user_id: int) -> Deck | None:
    return _owned(deck_id, user_id).options(selectinload(Deck.deck_cards)).first()


def replace(deck_id: int, user_id: int, name: str, card_ids: Sequence[int]) -> Deck | None:
    """Swap the deck's whole card set and rename it; ``None`` if the deck is gone."""
    try:
        deck = _owned(deck_id, user_id).populate_existing().with_for_update().first()
        if deck is None:
            db.session.rollback()
            return None
        deck.deck_cards.clear()
        # Old links must be deleted before re-inserting pairs that share a key.
        db.session.flush()
        deck.deck_cards.extend(_links(card_ids))
        deck.name = name
        deck.updated_at = utcnow()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Deck replace failed (deck=%s); rolled back", deck_id)
        raise
    _commit("replace", deck_id)
    logger.info("Replaced deck %s for user %s", deck_id, user_id)
    return deck


def delete(deck_id: int, user_id: int) -> bool:
    """Remove the deck's card links, then the deck itself. ``False`` if not found."""
    try:
        deck = _owned(deck_id, user_id).with_for_update().first()
        if deck is None:
            db.session.rollback()
            return False
        deck.deck_cards.clear()
        db.session.flush()
        db.session.delete(deck)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Deck delete failed (deck=%s); rolled back", deck_id)
        raise
    _commit("delete", deck_id)
    logger.info("Deleted deck %s for user %s", deck_id, user_id)
    return True


def cards_existing(card_ids: Iterable[int]) -> list[int]:
    """Subset of ``card_ids`` that exist in the card table."""
    wanted = list(dict.fromkeys(card_ids))
    if not wanted:
        return []
    rows = db.session.query(Card.id).filter(Card.id.in_(wanted)).all()
    return [card_id for (card_id,) in rows]
