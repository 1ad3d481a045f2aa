"""SQLAlchemy models package for the TCG backend.
Re-exports the shared `db` instance to avoid import loops and provides
convenient names for the model classes.

Usage:
    from models import db, Card, Deck, DeckCard, User
"""
from __future__ import annotations

from extensions import db  # shared SQLAlchemy() instance

# Import models only after db exists to avoid circular imports
from .card import Card, PokemonType, artwork_url  # type: ignore F401
from .deck import DECK_SIZE, Deck, DeckCard  # type: ignore F401
from .user import User  # type: ignore F401

__all__ = [
    "db",
    "Card",
    "PokemonType",
    "artwork_url",
    "DECK_SIZE",
    "Deck",
    "DeckCard",
    "User",
]
