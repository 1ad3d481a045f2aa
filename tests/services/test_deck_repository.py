import pytest
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import DeckCard
from services import deck_repository


@pytest.fixture
def owner(create_user):
    user, _ = create_user(email="owner@example.com", username="owner")
    return user


def test_cards_existing_returns_only_known_ids(card_ids):
    found = deck_repository.cards_existing([card_ids[0], card_ids[1], 5000, 5001])
    assert sorted(found) == [card_ids[0], card_ids[1]]
    assert deck_repository.cards_existing([]) == []


def test_replace_swaps_whole_card_set(owner, card_ids):
    deck = deck_repository.create(owner.id, "Deck", card_ids[:10])
    overlap = card_ids[5:12] + card_ids[:3]

    replaced = deck_repository.replace(deck.id, owner.id, "Deck v2", overlap)

    assert replaced.name == "Deck v2"
    assert sorted(replaced.card_ids) == sorted(overlap)
    assert DeckCard.query.filter_by(deck_id=deck.id).count() == 10


def test_replace_preserves_submitted_order(owner, card_ids):
    deck = deck_repository.create(owner.id, "Deck", card_ids[:10])
    reordered = list(reversed(card_ids[:10]))
    replaced = deck_repository.replace(deck.id, owner.id, "Deck", reordered)
    assert replaced.card_ids == reordered


def test_replace_for_wrong_owner_returns_none(owner, create_user, card_ids):
    other, _ = create_user(email="other@example.com", username="other")
    deck = deck_repository.create(owner.id, "Deck", card_ids[:10])
    assert deck_repository.replace(deck.id, other.id, "Stolen", card_ids[2:12]) is None
    assert deck_repository.get_by_id_for_user(deck.id, owner.id).name == "Deck"


def test_replace_rolls_back_when_commit_fails(owner, card_ids, monkeypatch):
    deck = deck_repository.create(owner.id, "Deck", card_ids[:10])
    deck_id = deck.id

    def _boom():
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(db.session, "commit", _boom)
    with pytest.raises(SQLAlchemyError):
        deck_repository.replace(deck_id, owner.id, "Broken", card_ids[2:12])
    monkeypatch.undo()

    reloaded = deck_repository.get_by_id_for_user(deck_id, owner.id)
    assert reloaded.name == "Deck"
    assert sorted(reloaded.card_ids) == card_ids[:10]


def test_delete_scoped_to_owner(owner, create_user, card_ids):
    other, _ = create_user(email="other@example.com", username="other")
    deck = deck_repository.create(owner.id, "Deck", card_ids[:10])

    assert deck_repository.delete(deck.id, other.id) is False
    assert deck_repository.delete(deck.id, owner.id) is True
    assert deck_repository.get_by_id_for_user(deck.id, owner.id) is None
    assert DeckCard.query.count() == 0
