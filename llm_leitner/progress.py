from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .flashcards import AnswerDifficulty, BucketMap, Flashcard, HistoryEntry


@dataclass
class ProgressReport:
    total_cards: int
    cards_by_bucket: Dict[int, int]
    success_rate: float
    hardest_cards: List[Flashcard] = field(default_factory=list)


def compute_progress(
    buckets: BucketMap,
    history: Sequence[HistoryEntry],
    limit: int = 3,
) -> ProgressReport:
    """
    Summarize learning progress.

    Returns a ProgressReport with:
        total_cards     – number of cards across all buckets
        cards_by_bucket – {bucket: card count}, ascending by bucket
        success_rate    – share of history entries answered EASY or HARD (0.0 with no history)
        hardest_cards   – cards most often answered WRONG, at most `limit`;
                          ties keep the order in which cards were first seen
    """
    cards_by_bucket = {bucket: len(buckets[bucket]) for bucket in sorted(buckets)}
    total_cards = sum(cards_by_bucket.values())

    successes = sum(1 for entry in history if entry.difficulty is not AnswerDifficulty.WRONG)
    success_rate = successes / len(history) if history else 0.0

    # dicts keep insertion order, so first-seen order survives the stable sort
    wrong_counts: Dict[Flashcard, int] = {}
    for entry in history:
        if entry.difficulty is AnswerDifficulty.WRONG:
            wrong_counts[entry.card] = wrong_counts.get(entry.card, 0) + 1

    ranked = sorted(wrong_counts.items(), key=lambda item: item[1], reverse=True)
    hardest_cards = [card for card, _count in ranked[:limit]]

    return ProgressReport(
        total_cards=total_cards,
        cards_by_bucket=cards_by_bucket,
        success_rate=success_rate,
        hardest_cards=hardest_cards,
    )
