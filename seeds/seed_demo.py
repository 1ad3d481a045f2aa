from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from extensions import db
from models import DECK_SIZE, Card, Deck, DeckCard, User
from services import deck_repository
from services.card_catalog import import_cards, load_card_file

logger = logging.getLogger(__name__)

DEFAULT_CARD_FILE = Path(__file__).resolve().parent / "data" / "pokemon.json"

DEMO_USERS = [
    ("red", "red@example.com"),
    ("blue", "blue@example.com"),
]
DEMO_PASSWORD = "password123"
STARTER_DECK_NAME = "Starter Deck"


def reset_data() -> None:
    """Delete every deck, card and user (association rows first)."""
    db.session.query(DeckCard).delete()
    db.session.query(Deck).delete()
    db.session.query(Card).delete()
    db.session.query(User).delete()
    db.session.commit()


def seed_demo_users() -> list[User]:
    users = []
    for username, email in DEMO_USERS:
        user = User.query.filter_by(email=email).first()
        if user is None:
            user = User(email=email, username=username)
            user.set_password(DEMO_PASSWORD)
            db.session.add(user)
        users.append(user)
    db.session.commit()
    return users


def seed_starter_decks(users: list[User], rng: Optional[random.Random] = None) -> list[Deck]:
    """Give each user without one a starter deck of random distinct cards."""
    rng = rng or random.Random()
    card_ids = [card_id for (card_id,) in db.session.query(Card.id).order_by(Card.id).all()]
    if len(card_ids) < DECK_SIZE:
        raise ValueError(f"Need at least {DECK_SIZE} cards to build starter decks, found {len(card_ids)}")
    decks = []
    for user in users:
        if Deck.query.filter_by(user_id=user.id, name=STARTER_DECK_NAME).first() is not None:
            continue
        picks = rng.sample(card_ids, DECK_SIZE)
        decks.append(deck_repository.create(user.id, STARTER_DECK_NAME, picks))
    return decks


def seed_all(
    card_file: Path | str = DEFAULT_CARD_FILE,
    *,
    reset: bool = True,
    rng: Optional[random.Random] = None,
) -> dict[str, int]:
    if reset:
        reset_data()
    added = import_cards(load_card_file(card_file))
    users = seed_demo_users()
    decks = seed_starter_decks(users, rng=rng)
    logger.info("Seeded %d card(s), %d user(s), %d deck(s)", added, len(users), len(decks))
    return {"cards": added, "users": len(users), "decks": len(decks)}
