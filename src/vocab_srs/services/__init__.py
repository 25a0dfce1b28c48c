"""Service layer for vocab_srs.

This module exports the main service entry points.
"""

from vocab_srs.services.progress_service import ConcurrentUpdateError, ProgressService
from vocab_srs.services.review_session import ReviewSession, SessionSummary, format_elapsed

__all__ = [
    "ConcurrentUpdateError",
    "ProgressService",
    "ReviewSession",
    "SessionSummary",
    "format_elapsed",
]
