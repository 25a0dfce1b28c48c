"""Progress models for vocab_srs.

These models represent the spaced repetition state of a word for one
learner, and the persisted record that wraps it.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

__all__ = [
    "DEFAULT_EASE_FACTOR",
    "LEARNED_THRESHOLD",
    "MemoryState",
    "ReviewStatus",
    "WordProgressDTO",
]

DEFAULT_EASE_FACTOR = 2.5
LEARNED_THRESHOLD = 3


class ReviewStatus(StrEnum):
    """Learning status, derived from the repetition count."""

    LEARNING = "learning"
    LEARNED = "learned"


class MemoryState(BaseModel, frozen=True):
    """Scheduling state for one (learner, word) pair.

    Every field has a default, so ``MemoryState()`` is the state of a word
    that has never been reviewed. No range validation is applied here:
    persisted data may be corrupted, and the scheduler clamps it instead
    of rejecting it.

    Attributes:
        ease_factor: Difficulty multiplier (>= 1.3 once scheduled)
        interval_days: Days until next review (0 until first review, max 365)
        repetitions: Consecutive successful recalls since the last failure
        review_count: Number of ratings ever recorded (never reset)
        last_reviewed_at: When the word was last rated
        next_review_at: When the word becomes due
    """

    ease_factor: float = Field(default=DEFAULT_EASE_FACTOR)
    interval_days: int = Field(default=0)
    repetitions: int = Field(default=0)
    review_count: int = Field(default=0)
    last_reviewed_at: datetime | None = Field(default=None)
    next_review_at: datetime | None = Field(default=None)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> ReviewStatus:
        """Learned after three consecutive successful recalls."""
        if self.repetitions >= LEARNED_THRESHOLD:
            return ReviewStatus.LEARNED
        return ReviewStatus.LEARNING

    def is_due(self, now: datetime) -> bool:
        """Check whether the word should be reviewed at ``now``.

        A state without ``next_review_at`` has never been scheduled and is
        due immediately.
        """
        return self.next_review_at is None or self.next_review_at <= now


class WordProgressDTO(BaseModel, frozen=True):
    """Persisted progress record for a word.

    Attributes:
        progress_id: Deterministic ID (hash of user_id + word_id)
        user_id: Learner ID
        word_id: Word ID
        set_id: Vocabulary set the word belongs to, when known
        state: Current scheduling state
        created_at: When the learner started learning this word
        schema_version: Schema version for forward compatibility
    """

    progress_id: str = Field(description="Hash-based progress ID")
    user_id: str
    word_id: str
    set_id: str | None = Field(default=None)
    state: MemoryState = Field(default_factory=MemoryState)
    created_at: datetime
    schema_version: int = Field(default=1)

    @property
    def status(self) -> ReviewStatus:
        """Shortcut for ``state.status``."""
        return self.state.status

    def is_due(self, now: datetime) -> bool:
        """Check whether the word should be reviewed at ``now``."""
        return self.state.is_due(now)

    def with_state(self, state: MemoryState) -> "WordProgressDTO":
        """Create a copy of this record carrying a new state."""
        return self.model_copy(update={"state": state})
