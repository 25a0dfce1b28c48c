"""Review session driver for vocab_srs.

A session feeds learner ratings to the progress service and keeps the
session-level bookkeeping: how many words were rated each way and how
long the session took.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from vocab_srs.logging import get_logger
from vocab_srs.models.progress import WordProgressDTO
from vocab_srs.models.rating import Rating, rating_from_key
from vocab_srs.services.progress_service import ProgressService
from vocab_srs.utils.rounding import round_to_int

__all__ = [
    "ReviewSession",
    "SessionSummary",
    "format_elapsed",
]

logger = get_logger(__name__)


def format_elapsed(seconds: int) -> str:
    """Format a duration as ``"2m 5s"``, or ``"45s"`` under a minute."""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}m {secs}s" if minutes > 0 else f"{secs}s"


@dataclass
class SessionSummary:
    """Statistics for a finished (or ongoing) review session."""

    counts: dict[Rating, int] = field(default_factory=lambda: dict.fromkeys(Rating, 0))
    elapsed_seconds: int = 0

    @property
    def total_reviewed(self) -> int:
        return sum(self.counts.values())

    @property
    def accuracy(self) -> int:
        """Percentage of Good and Easy ratings, 0 for an empty session."""
        total = self.total_reviewed
        if total == 0:
            return 0
        correct = self.counts[Rating.GOOD] + self.counts[Rating.EASY]
        return round_to_int(correct / total * 100)

    def format_elapsed(self) -> str:
        return format_elapsed(self.elapsed_seconds)


class ReviewSession:
    """Drives one learner through a batch of reviews.

    Example:
        session = ReviewSession(progress_service, user_id)
        for progress in await progress_service.get_due_words(user_id):
            await session.rate(progress.word_id, Rating.GOOD)
        summary = session.summary()
    """

    def __init__(
        self,
        progress_service: ProgressService,
        user_id: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Start a session.

        Args:
            progress_service: Service that persists each review
            user_id: Learner ID
            clock: Monotonic seconds source for elapsed time
        """
        self._progress = progress_service
        self._user_id = user_id
        self._clock = clock
        self._started = clock()
        self._counts: dict[Rating, int] = dict.fromkeys(Rating, 0)

    @property
    def user_id(self) -> str:
        return self._user_id

    async def rate(self, word_id: str, rating: Rating) -> WordProgressDTO:
        """Record a rating for a word and count it in the session.

        The rating is only counted once the review has been persisted.
        """
        progress = await self._progress.record_review(self._user_id, word_id, rating)
        self._counts[Rating(rating)] += 1
        return progress

    async def rate_key(self, word_id: str, key: str) -> WordProgressDTO | None:
        """Record a rating given as a keyboard shortcut ("1".."4").

        Returns:
            The persisted record, or None if the key is not a rating shortcut
        """
        rating = rating_from_key(key)
        if rating is None:
            return None
        return await self.rate(word_id, rating)

    def summary(self) -> SessionSummary:
        """Snapshot of the session so far."""
        elapsed = int(self._clock() - self._started)
        summary = SessionSummary(counts=dict(self._counts), elapsed_seconds=elapsed)
        logger.debug(
            "review_session_summary",
            user_id=self._user_id,
            total_reviewed=summary.total_reviewed,
            accuracy=summary.accuracy,
            elapsed_seconds=elapsed,
        )
        return summary
