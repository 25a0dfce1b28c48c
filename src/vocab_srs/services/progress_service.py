"""Progress service for vocab_srs.

This module provides the fetch-schedule-persist cycle for reviews,
the due-words queue, and progress statistics.
"""

import asyncio
import weakref
from datetime import UTC, datetime

from vocab_srs.interfaces.scheduler import SchedulerInterface
from vocab_srs.interfaces.storage import StorageInterface
from vocab_srs.logging import get_logger, review_context
from vocab_srs.models.progress import MemoryState, ReviewStatus, WordProgressDTO
from vocab_srs.models.rating import Rating, label_of
from vocab_srs.models.stats import LastStudiedSet, SetProgress, UserStats
from vocab_srs.scheduler.sm2 import SM2Scheduler
from vocab_srs.utils.hashing import generate_progress_id
from vocab_srs.utils.rounding import round_to_int

__all__ = [
    "ConcurrentUpdateError",
    "ProgressService",
]

logger = get_logger(__name__)


class ConcurrentUpdateError(RuntimeError):
    """Raised when a progress record keeps changing under a review."""

    def __init__(self, user_id: str, word_id: str, attempts: int) -> None:
        super().__init__(
            f"Progress for word {word_id!r} of user {user_id!r} changed concurrently "
            f"{attempts} times; giving up"
        )
        self.user_id = user_id
        self.word_id = word_id
        self.attempts = attempts


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ProgressService:
    """Records reviews and answers progress queries.

    Reviews of the same (learner, word) are serialised: in-process by a
    per-key asyncio lock, across processes by the store's compare-and-swap
    on ``review_count``. A lost swap re-reads the record and re-runs the
    scheduler, up to ``max_retries`` extra attempts.

    Example:
        service = ProgressService(storage)

        progress = await service.record_review(user_id, word_id, Rating.GOOD)
        due = await service.get_due_words(user_id)
    """

    def __init__(
        self,
        storage: StorageInterface,
        scheduler: SchedulerInterface | None = None,
        due_limit: int = 20,
        max_retries: int = 3,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            storage: Progress store
            scheduler: Review scheduler (default: SM-2 with default parameters)
            due_limit: Default size of the due-words queue
            max_retries: Extra attempts after a lost compare-and-swap
        """
        self._storage = storage
        self._scheduler = scheduler or SM2Scheduler()
        self._due_limit = due_limit
        self._max_retries = max_retries
        self._locks: weakref.WeakValueDictionary[tuple[str, str], asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, user_id: str, word_id: str) -> asyncio.Lock:
        key = (user_id, word_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    async def record_review(
        self,
        user_id: str,
        word_id: str,
        rating: Rating,
        now: datetime | None = None,
    ) -> WordProgressDTO:
        """Rate a review and persist the rescheduled state.

        Args:
            user_id: Learner ID
            word_id: Word ID
            rating: Rating for the review
            now: Review instant (default: current UTC time)

        Returns:
            The persisted progress record

        Raises:
            ConcurrentUpdateError: If every compare-and-swap attempt lost
        """
        now = now or _utcnow()
        attempts = self._max_retries + 1

        with review_context(user_id, word_id):
            async with self._lock_for(user_id, word_id):
                for attempt in range(1, attempts + 1):
                    current = await self._storage.get_progress(user_id, word_id)
                    if current is None:
                        record = await self._new_record(user_id, word_id, now)
                        expected = None
                    else:
                        record = current
                        expected = current.state.review_count

                    state = self._scheduler.next_state(record.state, rating, now)
                    updated = record.with_state(state)

                    if await self._storage.save_progress(updated, expected):
                        logger.info(
                            "review_recorded",
                            rating=label_of(rating),
                            interval_days=state.interval_days,
                            repetitions=state.repetitions,
                            ease_factor=state.ease_factor,
                            status=state.status.value,
                        )
                        return updated

                    logger.warning("progress_update_conflict", attempt=attempt)

            raise ConcurrentUpdateError(user_id, word_id, attempts)

    async def start_learning(
        self,
        user_id: str,
        word_id: str,
        now: datetime | None = None,
    ) -> WordProgressDTO:
        """Add a word to the learner's queue, due immediately.

        Existing progress is left untouched and returned as is.

        Args:
            user_id: Learner ID
            word_id: Word ID
            now: Current instant (default: current UTC time)

        Returns:
            The learner's progress record for the word
        """
        now = now or _utcnow()

        async with self._lock_for(user_id, word_id):
            existing = await self._storage.get_progress(user_id, word_id)
            if existing is not None:
                return existing

            record = await self._new_record(user_id, word_id, now)
            record = record.with_state(MemoryState(next_review_at=now))
            if await self._storage.save_progress(record, None):
                logger.info("learning_started", user_id=user_id, word_id=word_id)
                return record

            # Another process created it first
            existing = await self._storage.get_progress(user_id, word_id)
            if existing is None:
                raise ConcurrentUpdateError(user_id, word_id, 1)
            return existing

    async def get_due_words(
        self,
        user_id: str,
        set_id: str | None = None,
        now: datetime | None = None,
        limit: int | None = None,
    ) -> list[WordProgressDTO]:
        """Get words due for review, most overdue first.

        Args:
            user_id: Learner ID
            set_id: Restrict to one vocabulary set
            now: Current instant (default: current UTC time)
            limit: Maximum number of words (default: configured due limit)

        Returns:
            Due progress records
        """
        now = now or _utcnow()
        return await self._storage.get_due_progress(
            user_id,
            now,
            set_id=set_id,
            limit=limit or self._due_limit,
        )

    async def reset_progress(self, user_id: str, set_id: str | None = None) -> int:
        """Forget progress so words start again from the default state.

        Args:
            user_id: Learner ID
            set_id: Restrict to one vocabulary set

        Returns:
            Number of records removed
        """
        deleted = await self._storage.delete_progress(user_id, set_id=set_id)
        logger.info("progress_reset", user_id=user_id, set_id=set_id, deleted=deleted)
        return deleted

    async def get_stats(self, user_id: str, now: datetime | None = None) -> UserStats:
        """Summarise every word the learner has started.

        Args:
            user_id: Learner ID
            now: Current instant (default: current UTC time)

        Returns:
            UserStats
        """
        now = now or _utcnow()
        records = await self._storage.get_all_progress(user_id)

        learned = sum(1 for r in records if r.status == ReviewStatus.LEARNED)
        return UserStats(
            total_words=len(records),
            words_learned=learned,
            words_learning=len(records) - learned,
            words_due=sum(1 for r in records if r.is_due(now)),
            total_reviews=sum(max(r.state.review_count, 0) for r in records),
        )

    async def get_set_progress(
        self,
        user_id: str,
        set_id: str,
        now: datetime | None = None,
    ) -> SetProgress:
        """Summarise a learner's progress through one vocabulary set.

        Args:
            user_id: Learner ID
            set_id: Vocabulary set ID
            now: Current instant (default: current UTC time)

        Returns:
            SetProgress; all zeros for an empty set
        """
        now = now or _utcnow()
        words = await self._storage.get_words_for_set(set_id)
        total = len(words)
        if total == 0:
            return SetProgress()

        word_ids = {w.word_id for w in words}
        records = [
            r for r in await self._storage.get_all_progress(user_id, set_id=set_id)
            if r.word_id in word_ids
        ]
        learned = sum(1 for r in records if r.status == ReviewStatus.LEARNED)
        learning = len(records) - learned

        return SetProgress(
            total_words=total,
            words_learned=learned,
            words_learning=learning,
            words_due=sum(1 for r in records if r.is_due(now)),
            progress_percentage=min(100, round_to_int((learned + learning) / total * 100)),
        )

    async def get_last_studied_set(
        self,
        user_id: str,
        now: datetime | None = None,
    ) -> LastStudiedSet | None:
        """Get the set containing the word the learner reviewed last.

        Args:
            user_id: Learner ID
            now: Current instant (default: current UTC time)

        Returns:
            LastStudiedSet, or None if nothing was reviewed or the set is gone
        """
        last = await self._storage.get_last_reviewed_progress(user_id)
        if last is None or last.set_id is None or last.state.last_reviewed_at is None:
            return None

        vocabulary_set = await self._storage.get_vocabulary_set(last.set_id)
        if vocabulary_set is None:
            return None

        progress = await self.get_set_progress(user_id, vocabulary_set.set_id, now)
        return LastStudiedSet(
            set_id=vocabulary_set.set_id,
            title=vocabulary_set.title,
            description=vocabulary_set.description,
            icon=vocabulary_set.icon,
            progress=progress,
            last_reviewed_at=last.state.last_reviewed_at,
        )

    async def _new_record(self, user_id: str, word_id: str, now: datetime) -> WordProgressDTO:
        """Build a default progress record, tagged with the word's set."""
        word = await self._storage.get_word(word_id)
        return WordProgressDTO(
            progress_id=generate_progress_id(user_id, word_id),
            user_id=user_id,
            word_id=word_id,
            set_id=word.set_id if word else None,
            created_at=now,
        )
