"""Spaced repetition scheduling for vocab_srs."""

from vocab_srs.scheduler.parameters import DEFAULT_PARAMETERS, SM2Parameters
from vocab_srs.scheduler.sm2 import SM2Scheduler, compute_next_review, ease_delta

__all__ = [
    "DEFAULT_PARAMETERS",
    "SM2Parameters",
    "SM2Scheduler",
    "compute_next_review",
    "ease_delta",
]
