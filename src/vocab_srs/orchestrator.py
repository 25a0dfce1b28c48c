"""VocabSRS orchestrator for high-level learning operations.

This module provides the main entry point for the vocab_srs package,
wiring configuration, storage and services together.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from vocab_srs.config import VocabSRSConfig
from vocab_srs.importers.base import VocabularyImportAdapter
from vocab_srs.importers.registry import ImportAdapterRegistry
from vocab_srs.interfaces.storage import StorageInterface
from vocab_srs.logging import configure_logging, get_logger
from vocab_srs.models.ingest import VocabularySetIngest
from vocab_srs.models.progress import WordProgressDTO
from vocab_srs.models.rating import Rating, parse_rating
from vocab_srs.models.stats import LastStudiedSet, SetProgress, UserStats
from vocab_srs.models.vocabulary import VocabularySetDTO, WordDTO
from vocab_srs.scheduler.sm2 import SM2Scheduler
from vocab_srs.services.progress_service import ProgressService
from vocab_srs.services.review_session import ReviewSession
from vocab_srs.utils.hashing import generate_set_id, generate_word_id

__all__ = ["ImportResult", "VocabSRS"]

logger = get_logger(__name__)


@dataclass
class ImportResult:
    """Statistics from vocabulary import."""

    sets_processed: int = 0
    sets_new: int = 0
    sets_updated: int = 0
    words_saved: int = 0
    errors: list[str] = field(default_factory=list)


class VocabSRS:
    """Main orchestrator for vocab_srs.

    Accepts a storage implementation class. Config is loaded from .env
    automatically. For custom implementations, set config_class = None and
    pass storage_custom_config.

    Example:
        async with VocabSRS(storage_class=MongoStorageRepository) as srs:
            await srs.insert_sets("travel.json", VocabularyJSONAdapter)
            progress = await srs.record_review(user_id, word_id, Rating.GOOD)
    """

    def __init__(
        self,
        storage_class: type[StorageInterface],
        *,
        storage_custom_config: dict[str, Any] | None = None,
        config: VocabSRSConfig | None = None,
    ) -> None:
        """Initialize VocabSRS with an implementation class.

        Args:
            storage_class: Storage implementation class
            storage_custom_config: Custom config dict if storage_class.config_class is None
            config: Explicit configuration (default: loaded from environment)
        """
        self._config = config or VocabSRSConfig()
        configure_logging(self._config.logging)

        self._storage_class = storage_class
        self._storage_custom_config = storage_custom_config

        self._storage: StorageInterface | None = None
        self._scheduler = SM2Scheduler(self._config.scheduler.to_parameters())
        self._progress_service: ProgressService | None = None

        self._connected = False

    async def _instantiate_class(
        self,
        cls: type,
        custom_config: dict[str, Any] | None,
    ) -> Any:
        """Instantiate an implementation class.

        If cls.config_class is set, instantiate config (loads from .env).
        If cls.config_class is None, use custom_config dict.
        """
        config_class = getattr(cls, "config_class", None)

        if config_class is None:
            if custom_config is None:
                raise ValueError(
                    f"{cls.__name__} has config_class=None but no custom_config provided"
                )
            return await cls.from_dict(custom_config)

        if custom_config is not None:
            return await cls.from_dict(custom_config)
        return await cls.from_config(config_class())

    async def _connect(self) -> None:
        """Initialize connections and services."""
        if self._connected:
            return

        self._storage = await self._instantiate_class(
            self._storage_class, self._storage_custom_config
        )
        self._progress_service = ProgressService(
            self._storage,
            self._scheduler,
            due_limit=self._config.due_words_limit,
            max_retries=self._config.update_max_retries,
        )

        self._connected = True
        logger.info("vocab_srs_connected")

    async def _disconnect(self) -> None:
        """Close all connections."""
        if self._storage and hasattr(self._storage, "close"):
            await self._storage.close()

        self._connected = False
        logger.info("vocab_srs_disconnected")

    async def __aenter__(self) -> "VocabSRS":
        """Async context manager entry - connects automatically."""
        await self._connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit - disconnects automatically."""
        await self._disconnect()

    def _ensure_connected(self) -> ProgressService:
        if not self._connected or self._progress_service is None:
            raise RuntimeError("VocabSRS not connected. Use 'async with VocabSRS(...) as srs:'")
        return self._progress_service

    @property
    def scheduler(self) -> SM2Scheduler:
        return self._scheduler

    # === IMPORT ===

    async def insert_sets(
        self,
        sets: Any,
        adapter: type[VocabularyImportAdapter] | str = "vocabulary_json",
    ) -> ImportResult:
        """Import vocabulary sets and their words.

        Args:
            sets: Raw export data, JSON string, or path to JSON file
            adapter: Import adapter class, or the source name it is registered under

        Returns:
            ImportResult with statistics
        """
        self._ensure_connected()
        assert self._storage is not None

        if isinstance(adapter, str):
            parser = ImportAdapterRegistry.create(adapter)
        else:
            parser = adapter()
        set_ingests: list[VocabularySetIngest]

        if isinstance(sets, Path):
            set_ingests = parser.parse_file(sets)
        elif isinstance(sets, str):
            path = Path(sets)
            if path.suffix == ".json" and path.exists():
                set_ingests = parser.parse_file(path)
            else:
                set_ingests = parser.parse_string(sets)
        else:
            set_ingests = parser.parse(sets)

        result = ImportResult()

        for set_ingest in set_ingests:
            try:
                await self._save_set(set_ingest, result)
            except Exception as e:
                logger.error("set_import_failed", title=set_ingest.title, error=str(e))
                result.errors.append(f"Set '{set_ingest.title}': {e}")

        logger.info(
            "insert_sets_completed",
            sets_processed=result.sets_processed,
            sets_new=result.sets_new,
            sets_updated=result.sets_updated,
            words_saved=result.words_saved,
        )
        return result

    async def _save_set(self, set_ingest: VocabularySetIngest, result: ImportResult) -> None:
        """Persist one set and its words."""
        assert self._storage is not None
        result.sets_processed += 1

        set_id = generate_set_id(set_ingest.title, set_ingest.source)
        existing = await self._storage.get_vocabulary_set(set_id)

        for w in set_ingest.words:
            word = WordDTO(
                word_id=generate_word_id(set_id, w.term),
                set_id=set_id,
                term=w.term,
                meaning=w.meaning,
                phonetic=w.phonetic,
                part_of_speech=w.part_of_speech,
                example=w.example,
            )
            await self._storage.save_word(word)
            result.words_saved += 1

        stored_word_count = len(await self._storage.get_words_for_set(set_id))
        await self._storage.save_vocabulary_set(
            VocabularySetDTO(
                set_id=set_id,
                title=set_ingest.title,
                description=set_ingest.description,
                category=set_ingest.category,
                level=set_ingest.level,
                icon=set_ingest.icon,
                source=set_ingest.source,
                word_count=stored_word_count,
            )
        )

        if existing is None:
            result.sets_new += 1
        else:
            result.sets_updated += 1

    # === REVIEWS ===

    async def record_review(
        self,
        user_id: str,
        word_id: str,
        rating: Rating | int | str,
        now: datetime | None = None,
    ) -> WordProgressDTO:
        """Rate a review. ``rating`` may be a Rating, 0-3 or a label."""
        service = self._ensure_connected()
        return await service.record_review(user_id, word_id, parse_rating(rating), now)

    async def start_learning(
        self,
        user_id: str,
        word_id: str,
        now: datetime | None = None,
    ) -> WordProgressDTO:
        """Add a word to the learner's queue, due immediately."""
        service = self._ensure_connected()
        return await service.start_learning(user_id, word_id, now)

    async def get_due_words(
        self,
        user_id: str,
        set_id: str | None = None,
        now: datetime | None = None,
        limit: int | None = None,
    ) -> list[WordProgressDTO]:
        """Get words due for review, most overdue first."""
        service = self._ensure_connected()
        return await service.get_due_words(user_id, set_id=set_id, now=now, limit=limit)

    async def reset_progress(self, user_id: str, set_id: str | None = None) -> int:
        """Start learning all words (of one set) again."""
        service = self._ensure_connected()
        return await service.reset_progress(user_id, set_id=set_id)

    def start_session(self, user_id: str) -> ReviewSession:
        """Open a review session for a learner."""
        service = self._ensure_connected()
        return ReviewSession(service, user_id)

    # === STATS ===

    async def get_stats(self, user_id: str, now: datetime | None = None) -> UserStats:
        service = self._ensure_connected()
        return await service.get_stats(user_id, now)

    async def get_set_progress(
        self,
        user_id: str,
        set_id: str,
        now: datetime | None = None,
    ) -> SetProgress:
        service = self._ensure_connected()
        return await service.get_set_progress(user_id, set_id, now)

    async def get_last_studied_set(
        self,
        user_id: str,
        now: datetime | None = None,
    ) -> LastStudiedSet | None:
        service = self._ensure_connected()
        return await service.get_last_studied_set(user_id, now)
