"""Statistics models for vocab_srs."""

from datetime import datetime

from pydantic import BaseModel, Field

__all__ = [
    "LastStudiedSet",
    "SetProgress",
    "UserStats",
]


class UserStats(BaseModel, frozen=True):
    """Progress summary across every word a learner has started.

    Attributes:
        total_words: Words with a progress record
        words_learned: Words with status ``learned``
        words_learning: Words with status ``learning``
        words_due: Words whose next review is at or before now
        total_reviews: Sum of review counts
    """

    total_words: int = Field(default=0, ge=0)
    words_learned: int = Field(default=0, ge=0)
    words_learning: int = Field(default=0, ge=0)
    words_due: int = Field(default=0, ge=0)
    total_reviews: int = Field(default=0, ge=0)


class SetProgress(BaseModel, frozen=True):
    """Progress of one learner through one vocabulary set.

    ``progress_percentage`` counts both learned and learning words as
    started, relative to every word in the set.
    """

    total_words: int = Field(default=0, ge=0)
    words_learned: int = Field(default=0, ge=0)
    words_learning: int = Field(default=0, ge=0)
    words_due: int = Field(default=0, ge=0)
    progress_percentage: int = Field(default=0, ge=0, le=100)


class LastStudiedSet(BaseModel, frozen=True):
    """The set a learner reviewed most recently."""

    set_id: str
    title: str
    description: str = Field(default="")
    icon: str | None = Field(default=None)
    progress: SetProgress
    last_reviewed_at: datetime
