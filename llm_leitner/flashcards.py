from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set, Tuple


class AnswerDifficulty(Enum):
    """How well a card was recalled during a single review."""

    WRONG = "wrong"
    HARD = "hard"
    EASY = "easy"


@dataclass(frozen=True, eq=False)
class Flashcard:
    """
    A single flashcard.

    Cards compare and hash by identity: two cards with the same text are
    still different cards unless they are the same object.
    """

    front: str
    back: str
    hint: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HistoryEntry:
    card: Flashcard
    difficulty: AnswerDifficulty


# bucket number -> cards in that bucket
BucketMap = Dict[int, Set[Flashcard]]
BucketSets = List[Set[Flashcard]]
