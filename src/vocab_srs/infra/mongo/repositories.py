"""MongoDB repositories for vocab_srs.

This module provides repository implementations for MongoDB storage.
"""

from datetime import datetime
from typing import Any, Self

from vocab_srs.config import MongoSettings
from vocab_srs.infra.mongo.client import MongoClient
from vocab_srs.interfaces.storage import StorageInterface
from vocab_srs.logging import get_logger
from vocab_srs.models.progress import MemoryState, WordProgressDTO
from vocab_srs.models.vocabulary import SetLevel, VocabularySetDTO, WordDTO

__all__ = [
    "MongoStorageRepository",
]

logger = get_logger(__name__)


class MongoStorageRepository(StorageInterface):
    """MongoDB implementation of StorageInterface.

    Provides CRUD operations for vocabulary sets and words, and
    compare-and-swap writes for progress records.
    """

    config_class = MongoSettings

    def __init__(self, client: MongoClient) -> None:
        """Initialize repository with MongoDB client.

        Args:
            client: Connected MongoClient instance
        """
        self._client = client
        self._owns_client = False

    @classmethod
    async def from_config(cls, config: MongoSettings) -> Self:
        """Factory method for VocabSRS instantiation.

        Creates a MongoClient, connects, creates indexes, and returns repository.

        Args:
            config: MongoDB settings

        Returns:
            Connected MongoStorageRepository instance
        """
        client = MongoClient(config)
        await client.connect()
        await client.create_indexes()

        instance = cls(client)
        instance._owns_client = True
        return instance

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        """Factory method for custom config dict.

        Args:
            config: Dictionary with MongoDB settings

        Returns:
            Connected MongoStorageRepository instance
        """
        settings = MongoSettings(**config)
        return await cls.from_config(settings)

    async def close(self) -> None:
        """Close owned resources."""
        if self._owns_client and self._client:
            await self._client.disconnect()

    # Vocabulary set operations
    async def save_vocabulary_set(self, vocabulary_set: VocabularySetDTO) -> str:
        """Save or update a vocabulary set."""
        doc = self._set_to_doc(vocabulary_set)
        await self._client.vocabulary_sets.replace_one(
            {"set_id": vocabulary_set.set_id},
            doc,
            upsert=True,
        )
        return vocabulary_set.set_id

    async def get_vocabulary_set(self, set_id: str) -> VocabularySetDTO | None:
        """Get a vocabulary set by ID."""
        doc = await self._client.vocabulary_sets.find_one({"set_id": set_id})
        return self._doc_to_set(doc) if doc else None

    # Word operations
    async def save_word(self, word: WordDTO) -> str:
        """Save or update a word."""
        doc = self._word_to_doc(word)
        await self._client.words.replace_one(
            {"word_id": word.word_id},
            doc,
            upsert=True,
        )
        return word.word_id

    async def get_word(self, word_id: str) -> WordDTO | None:
        """Get a word by ID."""
        doc = await self._client.words.find_one({"word_id": word_id})
        return self._doc_to_word(doc) if doc else None

    async def get_words_for_set(self, set_id: str) -> list[WordDTO]:
        """Get all words in a set."""
        cursor = self._client.words.find({"set_id": set_id})
        return [self._doc_to_word(doc) async for doc in cursor]

    # Progress operations
    async def get_progress(self, user_id: str, word_id: str) -> WordProgressDTO | None:
        """Get progress for a (learner, word) pair."""
        doc = await self._client.progress.find_one({"user_id": user_id, "word_id": word_id})
        return self._doc_to_progress(doc) if doc else None

    async def save_progress(
        self,
        progress: WordProgressDTO,
        expected_review_count: int | None,
    ) -> bool:
        """Compare-and-swap a progress record on its review count."""
        doc = self._progress_to_doc(progress)
        key = {"user_id": progress.user_id, "word_id": progress.word_id}

        if expected_review_count is None:
            result = await self._client.progress.update_one(
                key,
                {"$setOnInsert": doc},
                upsert=True,
            )
            written = result.upserted_id is not None
        else:
            expected: Any = expected_review_count
            if expected_review_count == 0:
                # Records initialised without a review_count field read back as 0
                expected = {"$in": [0, None]}
            result = await self._client.progress.replace_one(
                {**key, "review_count": expected},
                doc,
            )
            written = result.matched_count == 1

        if not written:
            logger.debug(
                "progress_cas_rejected",
                user_id=progress.user_id,
                word_id=progress.word_id,
                expected_review_count=expected_review_count,
            )
        return written

    async def get_due_progress(
        self,
        user_id: str,
        now: datetime,
        set_id: str | None = None,
        limit: int = 20,
    ) -> list[WordProgressDTO]:
        """Get due progress records, most overdue first."""
        query: dict[str, Any] = {"user_id": user_id, "next_review_at": {"$lte": now}}
        if set_id is not None:
            query["set_id"] = set_id
        cursor = self._client.progress.find(query).sort("next_review_at", 1).limit(limit)
        return [self._doc_to_progress(doc) async for doc in cursor]

    async def get_all_progress(
        self,
        user_id: str,
        set_id: str | None = None,
    ) -> list[WordProgressDTO]:
        """Get all progress records of a learner."""
        query: dict[str, Any] = {"user_id": user_id}
        if set_id is not None:
            query["set_id"] = set_id
        cursor = self._client.progress.find(query).sort("created_at", -1)
        return [self._doc_to_progress(doc) async for doc in cursor]

    async def get_last_reviewed_progress(self, user_id: str) -> WordProgressDTO | None:
        """Get the most recently reviewed progress record."""
        cursor = (
            self._client.progress.find({"user_id": user_id, "last_reviewed_at": {"$ne": None}})
            .sort("last_reviewed_at", -1)
            .limit(1)
        )
        async for doc in cursor:
            return self._doc_to_progress(doc)
        return None

    async def delete_progress(self, user_id: str, set_id: str | None = None) -> int:
        """Delete progress records of a learner."""
        query: dict[str, Any] = {"user_id": user_id}
        if set_id is not None:
            query["set_id"] = set_id
        result = await self._client.progress.delete_many(query)
        return int(result.deleted_count)

    # Document conversion helpers
    @staticmethod
    def _set_to_doc(vocabulary_set: VocabularySetDTO) -> dict[str, Any]:
        return {
            "set_id": vocabulary_set.set_id,
            "title": vocabulary_set.title,
            "description": vocabulary_set.description,
            "category": vocabulary_set.category,
            "level": vocabulary_set.level.value,
            "icon": vocabulary_set.icon,
            "source": vocabulary_set.source,
            "word_count": vocabulary_set.word_count,
            "schema_version": vocabulary_set.schema_version,
        }

    @staticmethod
    def _doc_to_set(doc: dict[str, Any]) -> VocabularySetDTO:
        return VocabularySetDTO(
            set_id=doc["set_id"],
            title=doc["title"],
            description=doc.get("description", ""),
            category=doc.get("category", "General"),
            level=SetLevel(doc.get("level", SetLevel.BEGINNER.value)),
            icon=doc.get("icon"),
            source=doc.get("source", "manual"),
            word_count=doc.get("word_count", 0),
            schema_version=doc.get("schema_version", 1),
        )

    @staticmethod
    def _word_to_doc(word: WordDTO) -> dict[str, Any]:
        return {
            "word_id": word.word_id,
            "set_id": word.set_id,
            "term": word.term,
            "meaning": word.meaning,
            "phonetic": word.phonetic,
            "part_of_speech": word.part_of_speech,
            "example": word.example,
            "schema_version": word.schema_version,
        }

    @staticmethod
    def _doc_to_word(doc: dict[str, Any]) -> WordDTO:
        return WordDTO(
            word_id=doc["word_id"],
            set_id=doc["set_id"],
            term=doc["term"],
            meaning=doc["meaning"],
            phonetic=doc.get("phonetic", ""),
            part_of_speech=doc.get("part_of_speech", ""),
            example=doc.get("example", ""),
            schema_version=doc.get("schema_version", 1),
        )

    @staticmethod
    def _progress_to_doc(progress: WordProgressDTO) -> dict[str, Any]:
        state = progress.state
        return {
            "progress_id": progress.progress_id,
            "user_id": progress.user_id,
            "word_id": progress.word_id,
            "set_id": progress.set_id,
            "ease_factor": state.ease_factor,
            "interval_days": state.interval_days,
            "repetitions": state.repetitions,
            "review_count": state.review_count,
            "last_reviewed_at": state.last_reviewed_at,
            "next_review_at": state.next_review_at,
            # Written for reporting queries only; never read back
            "status": state.status.value,
            "created_at": progress.created_at,
            "schema_version": progress.schema_version,
        }

    @staticmethod
    def _doc_to_progress(doc: dict[str, Any]) -> WordProgressDTO:
        # Missing or null scheduling fields fall back to MemoryState defaults
        state_fields = {
            name: doc[name]
            for name in (
                "ease_factor",
                "interval_days",
                "repetitions",
                "review_count",
                "last_reviewed_at",
                "next_review_at",
            )
            if doc.get(name) is not None
        }
        return WordProgressDTO(
            progress_id=doc["progress_id"],
            user_id=doc["user_id"],
            word_id=doc["word_id"],
            set_id=doc.get("set_id"),
            state=MemoryState(**state_fields),
            created_at=doc["created_at"],
            schema_version=doc.get("schema_version", 1),
        )
