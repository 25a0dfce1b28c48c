"""Storage interface for vocab_srs.

This module defines the Protocol for the progress store and the
vocabulary catalog it is scoped by.
"""

from datetime import datetime
from typing import ClassVar, Protocol, runtime_checkable

from vocab_srs.models.progress import WordProgressDTO
from vocab_srs.models.vocabulary import VocabularySetDTO, WordDTO

__all__ = [
    "StorageInterface",
]


@runtime_checkable
class StorageInterface(Protocol):
    """Contract for persistent storage operations.

    Implementations must make ``save_progress`` atomic per
    (user_id, word_id): it is a compare-and-swap on ``review_count``,
    which the scheduler increments on every rating.
    """

    config_class: ClassVar[type | None] = None

    # Vocabulary set operations
    async def save_vocabulary_set(self, vocabulary_set: VocabularySetDTO) -> str:
        """Save or update a vocabulary set.

        Args:
            vocabulary_set: Set data to save

        Returns:
            Set ID
        """
        ...

    async def get_vocabulary_set(self, set_id: str) -> VocabularySetDTO | None:
        """Get a vocabulary set by ID.

        Args:
            set_id: Set ID to retrieve

        Returns:
            VocabularySetDTO if found, None otherwise
        """
        ...

    # Word operations
    async def save_word(self, word: WordDTO) -> str:
        """Save or update a word.

        Args:
            word: Word data to save

        Returns:
            Word ID
        """
        ...

    async def get_word(self, word_id: str) -> WordDTO | None:
        """Get a word by ID.

        Args:
            word_id: Word ID to retrieve

        Returns:
            WordDTO if found, None otherwise
        """
        ...

    async def get_words_for_set(self, set_id: str) -> list[WordDTO]:
        """Get all words in a vocabulary set.

        Args:
            set_id: Set ID to query

        Returns:
            List of words
        """
        ...

    # Progress operations
    async def get_progress(self, user_id: str, word_id: str) -> WordProgressDTO | None:
        """Get the progress record for a (learner, word) pair.

        Args:
            user_id: Learner ID
            word_id: Word ID

        Returns:
            WordProgressDTO if found, None otherwise
        """
        ...

    async def save_progress(
        self,
        progress: WordProgressDTO,
        expected_review_count: int | None,
    ) -> bool:
        """Write a progress record if nobody else has in the meantime.

        Args:
            progress: Record to write
            expected_review_count: ``review_count`` of the stored record the
                new state was computed from, or None to insert only if no
                record exists yet

        Returns:
            True if written, False if the stored record has moved on
        """
        ...

    async def get_due_progress(
        self,
        user_id: str,
        now: datetime,
        set_id: str | None = None,
        limit: int = 20,
    ) -> list[WordProgressDTO]:
        """Get records whose next review is at or before ``now``.

        Args:
            user_id: Learner ID
            now: Current instant
            set_id: Restrict to one vocabulary set
            limit: Maximum number of records

        Returns:
            Due records, most overdue first
        """
        ...

    async def get_all_progress(
        self,
        user_id: str,
        set_id: str | None = None,
    ) -> list[WordProgressDTO]:
        """Get all progress records of a learner.

        Args:
            user_id: Learner ID
            set_id: Restrict to one vocabulary set

        Returns:
            List of records
        """
        ...

    async def get_last_reviewed_progress(self, user_id: str) -> WordProgressDTO | None:
        """Get the record the learner rated most recently.

        Args:
            user_id: Learner ID

        Returns:
            WordProgressDTO if the learner has reviewed anything, None otherwise
        """
        ...

    async def delete_progress(self, user_id: str, set_id: str | None = None) -> int:
        """Delete progress records so words restart from the default state.

        Args:
            user_id: Learner ID
            set_id: Restrict to one vocabulary set

        Returns:
            Number of records deleted
        """
        ...
