"""Scheduler interface for vocab_srs.

This module defines the Protocol for spaced repetition schedulers.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from vocab_srs.models.progress import MemoryState
from vocab_srs.models.rating import Rating

__all__ = [
    "SchedulerInterface",
]


@runtime_checkable
class SchedulerInterface(Protocol):
    """Contract for review schedulers.

    Implementations must be pure: no I/O, no clock reads, no mutation of
    the input state. They must accept any MemoryState and any Rating.
    """

    def next_state(self, state: MemoryState | None, rating: Rating, now: datetime) -> MemoryState:
        """Compute the state after a review.

        Args:
            state: Current state, or None for a word never reviewed
            rating: Rating for the review just completed
            now: Current instant

        Returns:
            New MemoryState
        """
        ...
