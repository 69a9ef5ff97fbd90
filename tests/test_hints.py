import pytest

from llm_leitner.flashcards import Flashcard
from llm_leitner.hints import get_hint


def test_empty_front() -> None:
    assert get_hint(Flashcard("", "answer")) == ""


def test_single_character_is_revealed() -> None:
    assert get_hint(Flashcard("A", "B")) == "A"


def test_even_length() -> None:
    assert get_hint(Flashcard("ABCD", "EFGH")) == "AB__"


def test_odd_length_rounds_up() -> None:
    assert get_hint(Flashcard("ABC", "DEF")) == "AB_"


def test_length_is_preserved() -> None:
    for front in ["x", "hello", "猫が好きです", "spaced repetition"]:
        assert len(get_hint(Flashcard(front, ""))) == len(front)


def test_custom_mask() -> None:
    assert get_hint(Flashcard("house", "maison"), mask="*") == "hou**"


def test_mask_must_be_one_character() -> None:
    with pytest.raises(ValueError):
        get_hint(Flashcard("house", "maison"), mask="**")
