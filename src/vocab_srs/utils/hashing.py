"""Hashing utilities for vocab_srs.

This module provides deterministic hash functions for generating
stable identifiers for vocabulary sets, words, and progress records.
"""

import hashlib

__all__ = [
    "generate_progress_id",
    "generate_set_id",
    "generate_word_id",
    "hash_text",
]


def hash_text(text: str) -> str:
    """Generate SHA256 hash of text.

    Args:
        text: Input text to hash

    Returns:
        Hexadecimal SHA256 hash string
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_set_id(title: str, source: str) -> str:
    """Generate deterministic vocabulary set ID.

    Importing the same set twice from the same source yields the same ID,
    so re-imports update the set instead of duplicating it.

    Args:
        title: Set title
        source: Import source (e.g., "vocabulary_json")

    Returns:
        Hexadecimal SHA256 hash string
    """
    combined = f"set|{title.strip().lower()}|{source}"
    return hash_text(combined)


def generate_word_id(set_id: str, term: str) -> str:
    """Generate deterministic word ID, unique per set.

    Args:
        set_id: Parent vocabulary set ID
        term: The word itself

    Returns:
        Hexadecimal SHA256 hash string
    """
    combined = f"word|{set_id}|{term.strip().lower()}"
    return hash_text(combined)


def generate_progress_id(user_id: str, word_id: str) -> str:
    """Generate the progress record ID for a (learner, word) pair."""
    return hash_text(f"progress|{user_id}|{word_id}")

