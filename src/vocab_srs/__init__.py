"""vocab_srs - Spaced repetition scheduling for vocabulary learning.

This package provides tools for:
- Scheduling word reviews with a single SM-2 policy
- Tracking per-learner progress with atomic updates per word
- Querying due words, learner statistics and per-set progress
- Importing vocabulary sets from JSON exports

Example usage:
    from datetime import UTC, datetime

    from vocab_srs import MemoryState, Rating, compute_next_review

    state = compute_next_review(MemoryState(), Rating.GOOD, datetime.now(UTC))

    # With persistence - config loaded from .env automatically
    from vocab_srs import MongoStorageRepository, VocabSRS, VocabularyJSONAdapter

    async with VocabSRS(storage_class=MongoStorageRepository) as srs:
        await srs.insert_sets("travel.json", VocabularyJSONAdapter)
        progress = await srs.record_review(user_id, word_id, Rating.GOOD)
"""

__version__ = "0.1.0"

# Import adapters
from vocab_srs.importers.base import VocabularyImportAdapter
from vocab_srs.importers.vocabulary_json import VocabularyJSONAdapter

# Implementations
from vocab_srs.infra.mongo.repositories import MongoStorageRepository

# Interfaces
from vocab_srs.interfaces.scheduler import SchedulerInterface
from vocab_srs.interfaces.storage import StorageInterface
from vocab_srs.models.progress import MemoryState, ReviewStatus, WordProgressDTO
from vocab_srs.models.rating import Rating, color_of, label_of
from vocab_srs.orchestrator import ImportResult, VocabSRS
from vocab_srs.scheduler.sm2 import SM2Scheduler, compute_next_review

__all__ = [  # noqa: RUF022
    # Core scheduling
    "compute_next_review",
    "SM2Scheduler",
    "MemoryState",
    "Rating",
    "ReviewStatus",
    "WordProgressDTO",
    "color_of",
    "label_of",
    # Orchestrator
    "VocabSRS",
    "ImportResult",
    # Implementations
    "MongoStorageRepository",
    # Import adapters
    "VocabularyImportAdapter",
    "VocabularyJSONAdapter",
    # Interfaces
    "SchedulerInterface",
    "StorageInterface",
]
