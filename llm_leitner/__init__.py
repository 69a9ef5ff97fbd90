"""
LLM Leitner Plugin

Modified-Leitner flashcard scheduling, usable as a library or as an llm plugin.
"""

from .flashcards import AnswerDifficulty, BucketMap, BucketSets, Flashcard, HistoryEntry
from .hints import get_hint
from .progress import ProgressReport, compute_progress
from .scheduler import (
    BucketRange,
    get_bucket_range,
    practice,
    to_bucket_sets,
    update,
    validate_buckets,
)

__version__ = "0.1.0"
__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "BucketSets",
    "Flashcard",
    "HistoryEntry",
    "BucketRange",
    "ProgressReport",
    "to_bucket_sets",
    "get_bucket_range",
    "practice",
    "update",
    "validate_buckets",
    "get_hint",
    "compute_progress",
]
