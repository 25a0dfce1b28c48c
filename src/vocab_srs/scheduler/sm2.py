"""SM-2 spaced repetition scheduler for vocab_srs.

This module is the single scheduling implementation in the package.
``compute_next_review`` is a pure function: the current instant is passed
in, nothing is read from a clock, and the input state is never mutated.

Policy:
    Again: repetitions = 0, interval = 1, ease = max(1.3, ease - 0.2)
    Hard/Good/Easy: repetitions += 1
        interval = 1 (first), 6 (second), round(previous * ease) afterwards
        Hard: interval = max(1, round(interval * 0.7))
        Easy: interval = round(interval * 1.3)
        ease = max(1.3, ease + 0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    interval = min(interval, 365)

Rounding is half-up throughout (``round(32.5) == 33``). The stored ease
factor is rounded to two decimals; intermediate values are not.
"""

import math
import sys
from datetime import datetime, timedelta

from vocab_srs.models.progress import MemoryState
from vocab_srs.models.rating import Rating, quality_of
from vocab_srs.scheduler.parameters import DEFAULT_PARAMETERS, SM2Parameters
from vocab_srs.utils.rounding import round_half_up, round_to_int

__all__ = [
    "SM2Scheduler",
    "compute_next_review",
    "ease_delta",
]


def ease_delta(quality: int) -> float:
    """SuperMemo ease factor delta for a quality score (0-5).

    q=5 -> +0.10, q=4 -> 0.00, q=3 -> -0.14, q=0 -> -0.80
    """
    miss = 5 - quality
    return 0.1 - miss * (0.08 + miss * 0.02)


def _scale(days: float, factor: float) -> int:
    """Round ``days * factor`` half-up, saturating instead of overflowing."""
    product = days * factor
    if not math.isfinite(product):
        product = sys.float_info.max
    return round_to_int(product)


def compute_next_review(
    state: MemoryState | None,
    rating: Rating,
    now: datetime,
    params: SM2Parameters = DEFAULT_PARAMETERS,
) -> MemoryState:
    """Compute the scheduling state after a review.

    Out-of-invariant input is clamped rather than rejected: an ease factor
    below the floor is treated as the floor, a non-finite one as the
    initial value, negative counters as zero, and an interval above the cap
    as the cap. A mature word (third success onward) never gets an
    interval below one day.

    Args:
        state: Current state, or None for a word never reviewed
        rating: Rating for the review just completed
        now: Current instant; ``next_review_at`` is offset from it
        params: Scheduling constants

    Returns:
        New MemoryState with interval, repetitions, ease factor, review
        count and both timestamps updated
    """
    current = state if state is not None else MemoryState()
    rating = Rating(rating)

    ease = current.ease_factor
    if not math.isfinite(ease):
        ease = params.initial_ease_factor
    ease = max(params.min_ease_factor, ease)
    previous_interval = min(max(current.interval_days, 0), params.max_interval_days)
    repetitions = max(current.repetitions, 0)
    review_count = max(current.review_count, 0)

    if rating == Rating.AGAIN:
        repetitions = 0
        interval = params.first_interval_days
        ease = max(params.min_ease_factor, ease - params.failure_ease_penalty)
    else:
        repetitions += 1
        if repetitions == 1:
            interval = params.first_interval_days
        elif repetitions == 2:
            interval = params.second_interval_days
        else:
            # Floor of 1 covers records with repetitions but no interval
            interval = max(1, _scale(previous_interval, ease))

        if rating == Rating.HARD:
            interval = max(1, _scale(interval, params.hard_interval_multiplier))
        elif rating == Rating.EASY:
            interval = _scale(interval, params.easy_interval_multiplier)

        ease = max(params.min_ease_factor, ease + ease_delta(quality_of(rating)))

    interval = min(interval, params.max_interval_days)

    return MemoryState(
        ease_factor=max(params.min_ease_factor, round_half_up(ease, 2)),
        interval_days=interval,
        repetitions=repetitions,
        review_count=review_count + 1,
        last_reviewed_at=now,
        next_review_at=now + timedelta(days=interval),
    )


class SM2Scheduler:
    """SM-2 scheduler bound to a set of parameters.

    Implements ``SchedulerInterface`` so services can be handed a scheduler
    instead of importing the algorithm directly.

    Example:
        scheduler = SM2Scheduler()
        state = scheduler.next_state(MemoryState(), Rating.GOOD, now)
    """

    def __init__(self, params: SM2Parameters = DEFAULT_PARAMETERS) -> None:
        self._params = params

    @property
    def params(self) -> SM2Parameters:
        return self._params

    def next_state(self, state: MemoryState | None, rating: Rating, now: datetime) -> MemoryState:
        """Compute the state after a review. See ``compute_next_review``."""
        return compute_next_review(state, rating, now, self._params)
