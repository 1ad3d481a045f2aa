"""Read-only card catalog plus the seed loader that fills it."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from extensions import db
from models import Card, PokemonType

logger = logging.getLogger(__name__)


def list_cards() -> list[Card]:
    """All cards, ascending by pokedex number."""
    return Card.query.order_by(Card.pokedex_number.asc()).all()


def load_card_file(path: Path | str) -> list[dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of cards")
    return data


def card_from_record(record: dict[str, Any]) -> Card:
    """Build a Card from a seed record (``name, hp, attack, type, pokedexNumber``)."""
    try:
        return Card(
            name=str(record["name"]).strip(),
            hp=int(record["hp"]),
            attack=int(record["attack"]),
            type=PokemonType.parse(record["type"]),
            pokedex_number=int(record["pokedexNumber"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid card record {record!r}: {exc}") from exc


def import_cards(records: Iterable[dict[str, Any]]) -> int:
    """Insert cards whose pokedex number is not already present; returns the count added."""
    existing = {number for (number,) in db.session.query(Card.pokedex_number).all()}
    added = 0
    for record in records:
        card = card_from_record(record)
        if card.pokedex_number in existing:
            continue
        db.session.add(card)
        existing.add(card.pokedex_number)
        added += 1
    db.session.commit()
    logger.info("Imported %d card(s)", added)
    return added
