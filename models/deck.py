from __future__ import annotations

from extensions import db
from utils.time import utcnow

DECK_SIZE = 10


class Deck(db.Model):
    __tablename__ = "decks"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = db.relationship("User", back_populates="decks")
    # Association rows are only ever written in batches by services.deck_repository.
    deck_cards = db.relationship(
        "DeckCard",
        back_populates="deck",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="DeckCard.position",
    )

    @property
    def card_ids(self) -> list[int]:
        return [link.card_id for link in self.deck_cards]

    def __repr__(self):
        return f"<Deck {self.id} {self.name!r} user={self.user_id} cards={len(self.deck_cards)}>"


class DeckCard(db.Model):
    __tablename__ = "deck_cards"

    deck_id = db.Column(
        db.Integer,
        db.ForeignKey("decks.id", ondelete="CASCADE"),
        primary_key=True,
    )
    card_id = db.Column(
        db.Integer,
        db.ForeignKey("cards.id"),
        primary_key=True,
        index=True,
    )
    # Insertion order of the submitted card list; purely presentational.
    position = db.Column(db.Integer, nullable=False, default=0)

    deck = db.relationship("Deck", back_populates="deck_cards")
    card = db.relationship("Card", back_populates="deck_cards", lazy="joined")

    def __repr__(self):
        return f"<DeckCard deck={self.deck_id} card={self.card_id}>"
