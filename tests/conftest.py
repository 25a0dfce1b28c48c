"""Shared test fixtures for vocab_srs.

This module provides pytest fixtures used across all tests.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from tests.mocks.mock_mongo import MockMongoClient
from vocab_srs.infra.mongo.repositories import MongoStorageRepository
from vocab_srs.models.ingest import IngestWord, VocabularySetIngest
from vocab_srs.models.progress import MemoryState, WordProgressDTO
from vocab_srs.models.vocabulary import SetLevel, VocabularySetDTO, WordDTO


@pytest.fixture
def now() -> datetime:
    """Fixed review instant."""
    return datetime(2024, 3, 1, 9, 30, tzinfo=UTC)


# Mock fixtures
@pytest.fixture
def mock_storage() -> AsyncMock:
    """Create mock storage interface."""
    storage = AsyncMock()
    storage.get_vocabulary_set.return_value = None
    storage.get_word.return_value = None
    storage.get_words_for_set.return_value = []
    storage.get_progress.return_value = None
    storage.save_progress.return_value = True
    storage.get_due_progress.return_value = []
    storage.get_all_progress.return_value = []
    storage.get_last_reviewed_progress.return_value = None
    storage.delete_progress.return_value = 0
    return storage


@pytest.fixture
def mongo_client() -> MockMongoClient:
    return MockMongoClient()


@pytest.fixture
def repository(mongo_client: MockMongoClient) -> MongoStorageRepository:
    """MongoStorageRepository backed by the in-memory mock client."""
    return MongoStorageRepository(mongo_client)  # type: ignore[arg-type]


# Sample data fixtures
@pytest.fixture
def sample_set() -> VocabularySetDTO:
    """Create sample VocabularySetDTO."""
    return VocabularySetDTO(
        set_id="set-travel",
        title="Travel Essentials",
        description="Words for your next trip",
        category="Travel",
        level=SetLevel.BEGINNER,
        icon="flight",
        source="vocabulary_json",
        word_count=3,
    )


@pytest.fixture
def sample_words() -> list[WordDTO]:
    """Create sample words belonging to sample_set."""
    return [
        WordDTO(
            word_id="w-itinerary",
            set_id="set-travel",
            term="itinerary",
            meaning="a planned route or journey",
            part_of_speech="noun",
        ),
        WordDTO(
            word_id="w-layover",
            set_id="set-travel",
            term="layover",
            meaning="a short stay between parts of a journey",
            part_of_speech="noun",
        ),
        WordDTO(
            word_id="w-embark",
            set_id="set-travel",
            term="embark",
            meaning="to go on board a ship or aircraft",
            part_of_speech="verb",
        ),
    ]


@pytest.fixture
def sample_word(sample_words: list[WordDTO]) -> WordDTO:
    return sample_words[0]


@pytest.fixture
def sample_state(now: datetime) -> MemoryState:
    """Create a state after two successful reviews."""
    return MemoryState(
        ease_factor=2.5,
        interval_days=6,
        repetitions=2,
        review_count=2,
        last_reviewed_at=now,
        next_review_at=now,
    )


@pytest.fixture
def sample_progress(sample_state: MemoryState, now: datetime) -> WordProgressDTO:
    """Create sample WordProgressDTO."""
    return WordProgressDTO(
        progress_id="progress123",
        user_id="user-1",
        word_id="w-itinerary",
        set_id="set-travel",
        state=sample_state,
        created_at=now,
    )


@pytest.fixture
def sample_set_ingest() -> VocabularySetIngest:
    """Create sample VocabularySetIngest."""
    return VocabularySetIngest(
        source="vocabulary_json",
        title="Travel Essentials",
        description="Words for your next trip",
        category="Travel",
        level=SetLevel.BEGINNER,
        icon="flight",
        words=[
            IngestWord(term="itinerary", meaning="a planned route or journey"),
            IngestWord(term="layover", meaning="a short stay between parts of a journey"),
        ],
    )
