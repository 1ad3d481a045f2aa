"""Factory helpers for quickly seeding the test database."""
from __future__ import annotations

import itertools
from typing import Optional, Sequence

from extensions import db
from models import Card, Deck, DeckCard, PokemonType, User

_pokedex_counter = itertools.count(1)

_TYPES = list(PokemonType)


def create_card(
    *,
    name: Optional[str] = None,
    hp: int = 50,
    attack: int = 40,
    type: PokemonType | None = None,
    pokedex_number: Optional[int] = None,
) -> Card:
    number = pokedex_number or _next_value(_pokedex_counter)
    card = Card(
        name=name or f"Pokemon {number}",
        hp=hp,
        attack=attack,
        type=type or _TYPES[number % len(_TYPES)],
        pokedex_number=number,
    )
    db.session.add(card)
    db.session.flush()
    return card


def create_cards(count: int) -> list[Card]:
    return [create_card() for _ in range(count)]


def create_deck(user: User, card_ids: Sequence[int], *, name: str = "Test Deck") -> Deck:
    """Insert a deck directly, bypassing validation."""
    deck = Deck(name=name, user_id=user.id)
    deck.deck_cards = [DeckCard(card_id=card_id, position=i) for i, card_id in enumerate(card_ids)]
    db.session.add(deck)
    db.session.commit()
    return deck


def _next_value(counter: itertools.count) -> int:
    return next(counter)


__all__ = ["create_card", "create_cards", "create_deck"]
