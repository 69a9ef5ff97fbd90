"""
Tests for reading and writing deck files.
"""

import json

import pytest

from llm_leitner.deck import DeckError, dump_deck, load_deck, parse_deck
from llm_leitner.flashcards import AnswerDifficulty
from llm_leitner.scheduler import update


def test_load_deck(deck_file) -> None:
    deck = load_deck(deck_file)
    cat, house, apple, dog = deck.cards

    assert deck.buckets == {0: {cat, dog}, 1: {house}, 3: {apple}}
    assert house.tags == ("fr",)
    assert apple.hint == "fruit"
    assert [e.card for e in deck.history] == [cat, house, cat, apple]
    assert deck.history[2].difficulty is AnswerDifficulty.WRONG


def test_bucket_of(deck_file) -> None:
    deck = load_deck(deck_file)
    assert [deck.bucket_of(c) for c in deck.cards] == [0, 1, 3, 0]


def test_dump_reflects_update(deck_file) -> None:
    deck = load_deck(deck_file)
    deck.buckets = update(deck.buckets, deck.cards[2], AnswerDifficulty.EASY)

    data = json.loads(dump_deck(deck))
    assert [c["bucket"] for c in data["cards"]] == [0, 1, 4, 0]
    assert data["cards"][0]["front"] == "猫"
    assert data["history"][0] == {"card": 0, "difficulty": "wrong"}


def test_dump_then_parse_keeps_placement(deck_file) -> None:
    deck = load_deck(deck_file)
    again = parse_deck(json.loads(dump_deck(deck)))
    assert [again.bucket_of(c) for c in again.cards] == [0, 1, 3, 0]
    assert len(again.history) == len(deck.history)


def test_missing_file(tmp_path) -> None:
    with pytest.raises(DeckError, match="not found"):
        load_deck(tmp_path / "nope.json")


def test_invalid_json(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DeckError):
        load_deck(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"cards": [{"front": "a"}]},
        {"cards": [{"front": "a", "back": "b", "bucket": -1}]},
        {"cards": [{"front": "a", "back": "b"}], "history": [{"card": 1, "difficulty": "easy"}]},
        {"cards": [{"front": "a", "back": "b"}], "history": [{"card": 0, "difficulty": "meh"}]},
        {"cards": 5},
        {"cards": {"front": "a", "back": "b"}},
        {"cards": [], "history": "easy"},
        {"cards": [{"front": "a", "back": "b", "tags": "fr"}]},
        {"cards": [{"front": "a", "back": "b", "tags": ["fr", 3]}]},
        {"cards": [{"front": "a", "back": "b"}, {"front": "c", "back": "d"}],
         "history": [{"card": True, "difficulty": "easy"}]},
    ],
)
def test_malformed_decks(data) -> None:
    with pytest.raises(DeckError):
        parse_deck(data)


def test_string_tags_are_not_split() -> None:
    with pytest.raises(DeckError, match="tags"):
        parse_deck({"cards": [{"front": "a", "back": "b", "tags": "fr"}]})
    deck = parse_deck({"cards": [{"front": "a", "back": "b", "tags": ["fr"]}]})
    assert deck.cards[0].tags == ("fr",)


def test_non_list_cards_reported_as_deck_error(tmp_path) -> None:
    path = tmp_path / "odd.json"
    path.write_text('{"cards": 5}', encoding="utf-8")
    with pytest.raises(DeckError, match="'cards' must be a list"):
        load_deck(path)


def test_deck_error_is_value_error() -> None:
    assert issubclass(DeckError, ValueError)
