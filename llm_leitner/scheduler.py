import os
from dataclasses import dataclass
from typing import Optional, Set

from .flashcards import AnswerDifficulty, BucketMap, BucketSets, Flashcard

DEBUG_MODE = os.getenv("DEBUG", "0") == "1"


@dataclass(frozen=True)
class BucketRange:
    min_bucket: int
    max_bucket: int


def validate_buckets(buckets: BucketMap) -> None:
    """
    Check that a bucket map is well formed.

    Raises ValueError if a bucket number is not a non-negative int, or if the
    same card sits in more than one bucket.
    """
    seen: Set[int] = set()
    for bucket, cards in buckets.items():
        if isinstance(bucket, bool) or not isinstance(bucket, int) or bucket < 0:
            raise ValueError(f"Bucket numbers must be non-negative integers, got {bucket!r}")
        for card in cards:
            if id(card) in seen:
                raise ValueError(f"Card {card.front!r} appears in more than one bucket")
            seen.add(id(card))


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Convert a sparse bucket map into a dense list of sets.

    Index i of the result holds the cards of bucket i, or an empty set when
    bucket i is unused. The list stops at the highest used bucket, so an
    empty map gives an empty list.

    Every set in the result is a copy: changing the list never changes the
    map it came from.
    """
    validate_buckets(buckets)
    if not buckets:
        return []

    last_bucket = max(buckets)
    return [set(buckets.get(i, ())) for i in range(last_bucket + 1)]


def get_bucket_range(bucket_sets: BucketSets) -> Optional[BucketRange]:
    """
    Lowest and highest bucket that hold at least one card.

    Returns None when there are no cards at all.
    """
    occupied = [i for i, cards in enumerate(bucket_sets) if cards]
    if not occupied:
        return None
    return BucketRange(min_bucket=occupied[0], max_bucket=occupied[-1])


def practice(bucket_sets: BucketSets, day: int) -> Set[Flashcard]:
    """
    Cards due for review on a given day.

    `day` is 0-based. With n = day + 1, bucket i is due when n is a multiple
    of 2**i: bucket 0 every day, bucket 1 every second day, bucket 2 every
    fourth day, and so on.
    """
    if day < 0:
        raise ValueError(f"Day must be >= 0, got {day}")

    day_number = day + 1
    due: Set[Flashcard] = set()
    for bucket, cards in enumerate(bucket_sets):
        if day_number % (2 ** bucket) == 0:
            if DEBUG_MODE and cards:
                print(f"[DEBUG] Day {day}: bucket {bucket} due ({len(cards)} cards)")
            due.update(cards)
    return due


def next_bucket(current: int, difficulty: AnswerDifficulty) -> int:
    """Bucket a card moves to after being answered from `current`."""
    if difficulty is AnswerDifficulty.EASY:
        return current + 1
    elif difficulty is AnswerDifficulty.HARD:
        return max(0, current - 1)
    elif difficulty is AnswerDifficulty.WRONG:
        return 0
    raise ValueError(f"Unknown answer difficulty: {difficulty!r}")


def update(buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty) -> BucketMap:
    """
    Move a card after a practice trial and return the new bucket map.

    EASY promotes the card one bucket, HARD demotes it one bucket (never
    below 0) and WRONG sends it back to bucket 0. A card that is not in any
    bucket leaves the map unchanged. The map is assumed well formed; use
    validate_buckets (or to_bucket_sets, which calls it) to check it first.

    The input map and its sets are never modified. Only the source and
    destination sets are copied; every other set is shared with the input.
    """
    new_buckets: BucketMap = dict(buckets)

    current: Optional[int] = None
    for bucket, cards in buckets.items():
        if card in cards:
            current = bucket
            break

    if current is None:
        return new_buckets

    target = next_bucket(current, difficulty)

    remaining = set(buckets[current])
    remaining.discard(card)
    if remaining:
        new_buckets[current] = remaining
    else:
        del new_buckets[current]

    destination = set(new_buckets.get(target, ()))
    destination.add(card)
    new_buckets[target] = destination

    if DEBUG_MODE:
        print(f"[DEBUG] {card.front!r}: bucket {current} -> {target} ({difficulty.value})")

    return new_buckets
