import math
import os

from .flashcards import Flashcard

HINT_MASK: str = os.environ.get("LEITNER_HINT_MASK", "_")


def get_hint(card: Flashcard, mask: str = HINT_MASK) -> str:
    """Reveal the first half of the front (rounded up) and mask the rest."""
    if len(mask) != 1:
        raise ValueError(f"Hint mask must be a single character, got {mask!r}")

    front = card.front
    shown = math.ceil(len(front) / 2)
    return front[:shown] + mask * (len(front) - shown)
