"""Interface contracts for vocab_srs.

This module exports all Protocol-based interfaces for dependency injection.
"""

from vocab_srs.interfaces.scheduler import SchedulerInterface
from vocab_srs.interfaces.storage import StorageInterface

__all__ = [
    "SchedulerInterface",
    "StorageInterface",
]
