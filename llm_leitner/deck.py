from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .flashcards import AnswerDifficulty, BucketMap, Flashcard, HistoryEntry

DECK_PATH: str = os.environ.get("LEITNER_DECK", "deck.json")


class DeckError(ValueError):
    """Raised when a deck file cannot be turned into cards and buckets."""


@dataclass
class Deck:
    cards: List[Flashcard]
    buckets: BucketMap
    history: List[HistoryEntry] = field(default_factory=list)

    def bucket_of(self, card: Flashcard) -> int | None:
        for bucket, cards in self.buckets.items():
            if card in cards:
                return bucket
        return None


def _parse_difficulty(value: Any) -> AnswerDifficulty:
    try:
        return AnswerDifficulty(str(value).lower())
    except ValueError:
        raise DeckError(f"Unknown difficulty {value!r} (expected wrong, hard or easy)") from None


def parse_deck(data: Dict[str, Any]) -> Deck:
    """
    Build a Deck from decoded JSON.

    Expected shape:
        {"cards": [{"front", "back", "hint"?, "tags"?, "bucket"?}, ...],
         "history": [{"card": <index into cards>, "difficulty": "wrong|hard|easy"}, ...]}
    """
    if not isinstance(data, dict):
        raise DeckError("Deck must be a JSON object")
    for key in ("cards", "history"):
        if not isinstance(data.get(key, []), list):
            raise DeckError(f"Deck '{key}' must be a list")

    cards: List[Flashcard] = []
    buckets: BucketMap = {}
    for i, item in enumerate(data.get("cards", [])):
        if not isinstance(item, dict) or "front" not in item or "back" not in item:
            raise DeckError(f"Card {i} needs both 'front' and 'back'")
        bucket = item.get("bucket", 0)
        if isinstance(bucket, bool) or not isinstance(bucket, int) or bucket < 0:
            raise DeckError(f"Card {i} has invalid bucket {bucket!r}")
        tags = item.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise DeckError(f"Card {i} tags must be a list of strings, got {tags!r}")
        card = Flashcard(
            front=str(item["front"]),
            back=str(item["back"]),
            hint=str(item.get("hint", "")),
            tags=tuple(tags),
        )
        cards.append(card)
        buckets.setdefault(bucket, set()).add(card)

    history: List[HistoryEntry] = []
    for entry in data.get("history", []):
        if not isinstance(entry, dict):
            raise DeckError(f"History entry must be an object, got {entry!r}")
        index = entry.get("card")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(cards):
            raise DeckError(f"History entry refers to unknown card {index!r}")
        history.append(HistoryEntry(card=cards[index], difficulty=_parse_difficulty(entry.get("difficulty"))))

    return Deck(cards=cards, buckets=buckets, history=history)


def load_deck(path: str | Path) -> Deck:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DeckError(f"Deck file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise DeckError(f"Deck file {path} is not valid JSON: {e}") from None
    return parse_deck(data)


def dump_deck(deck: Deck) -> str:
    """Render a deck back into its JSON form. Cards keep their original order."""
    index = {id(card): i for i, card in enumerate(deck.cards)}
    cards = []
    for card in deck.cards:
        cards.append({
            "front": card.front,
            "back": card.back,
            "hint": card.hint,
            "tags": list(card.tags),
            "bucket": deck.bucket_of(card) or 0,
        })
    history = [
        {"card": index[id(entry.card)], "difficulty": entry.difficulty.value}
        for entry in deck.history
    ]
    return json.dumps({"cards": cards, "history": history}, ensure_ascii=False, indent=2)
