from __future__ import annotations

import enum

from extensions import db

ARTWORK_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/"
    "other/official-artwork/{pokedex_number}.png"
)


class PokemonType(str, enum.Enum):
    NORMAL = "NORMAL"
    FIRE = "FIRE"
    WATER = "WATER"
    ELECTRIC = "ELECTRIC"
    GRASS = "GRASS"
    ICE = "ICE"
    FIGHTING = "FIGHTING"
    POISON = "POISON"
    GROUND = "GROUND"
    FLYING = "FLYING"
    PSYCHIC = "PSYCHIC"
    BUG = "BUG"
    ROCK = "ROCK"
    GHOST = "GHOST"
    DRAGON = "DRAGON"
    DARK = "DARK"
    STEEL = "STEEL"
    FAIRY = "FAIRY"

    @classmethod
    def parse(cls, value: str) -> "PokemonType":
        """Case-insensitive lookup, so seed files may say ``Fire`` or ``FIRE``."""
        return cls((value or "").strip().upper())


def artwork_url(pokedex_number: int) -> str:
    return ARTWORK_URL_TEMPLATE.format(pokedex_number=int(pokedex_number))


class Card(db.Model):
    __tablename__ = "cards"
    __table_args__ = (
        db.CheckConstraint("hp > 0", name="hp_positive"),
        db.CheckConstraint("attack >= 0", name="attack_nonneg"),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, index=True)
    hp = db.Column(db.Integer, nullable=False)
    attack = db.Column(db.Integer, nullable=False)
    type = db.Column(
        db.Enum(PokemonType, name="pokemon_type"),
        nullable=False,
    )
    pokedex_number = db.Column(db.Integer, nullable=False, unique=True, index=True)
    img_url = db.Column(db.String(255), nullable=True)

    deck_cards = db.relationship("DeckCard", back_populates="card")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.pokedex_number is not None and not self.img_url:
            self.img_url = artwork_url(self.pokedex_number)

    def __repr__(self):
        return f"<Card #{self.pokedex_number} {self.name} [{self.type}]>"
