"""Utility functions for vocab_srs.

This module contains internal utility functions.
"""

from vocab_srs.utils.hashing import (
    generate_progress_id,
    generate_set_id,
    generate_word_id,
    hash_text,
)
from vocab_srs.utils.rounding import round_half_up, round_to_int

__all__ = [
    "generate_progress_id",
    "generate_set_id",
    "generate_word_id",
    "hash_text",
    "round_half_up",
    "round_to_int",
]
