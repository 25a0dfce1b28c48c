"""Public DTO models for vocab_srs.

This module exports all public data transfer objects.
"""

from vocab_srs.models.ingest import IngestWord, VocabularySetIngest
from vocab_srs.models.progress import MemoryState, ReviewStatus, WordProgressDTO
from vocab_srs.models.rating import Rating, RatingColor
from vocab_srs.models.stats import LastStudiedSet, SetProgress, UserStats
from vocab_srs.models.vocabulary import SetLevel, VocabularySetDTO, WordDTO

__all__ = [
    "IngestWord",
    "LastStudiedSet",
    "MemoryState",
    "Rating",
    "RatingColor",
    "ReviewStatus",
    "SetLevel",
    "SetProgress",
    "UserStats",
    "VocabularySetDTO",
    "VocabularySetIngest",
    "WordDTO",
    "WordProgressDTO",
]
