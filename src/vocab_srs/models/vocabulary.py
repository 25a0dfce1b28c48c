"""Vocabulary models for vocab_srs.

These models represent vocabulary sets and the words they contain.
"""

from enum import StrEnum

from pydantic import BaseModel, Field

__all__ = [
    "SetLevel",
    "VocabularySetDTO",
    "WordDTO",
]


class SetLevel(StrEnum):
    """Difficulty level of a vocabulary set."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class VocabularySetDTO(BaseModel, frozen=True):
    """Public vocabulary set data transfer object.

    Sets hold metadata only - words are stored separately.

    Attributes:
        set_id: Deterministic set ID (SHA256 of title + source)
        title: Set title
        description: Short description
        category: Free-form category (e.g., "Travel", "Business")
        level: Difficulty level
        icon: Icon name used by clients
        source: Import source identifier
        word_count: Number of words in the set
        schema_version: Schema version for forward compatibility
    """

    set_id: str = Field(description="Hash-based set ID")
    title: str
    description: str = Field(default="")
    category: str = Field(default="General")
    level: SetLevel = Field(default=SetLevel.BEGINNER)
    icon: str | None = Field(default=None)
    source: str = Field(default="manual")
    word_count: int = Field(default=0, ge=0)
    schema_version: int = Field(default=1)


class WordDTO(BaseModel, frozen=True):
    """A word (fact) that can be scheduled for review.

    Attributes:
        word_id: Deterministic word ID (SHA256 of set_id + term)
        set_id: Parent vocabulary set ID
        term: The word itself
        meaning: Definition or translation
        phonetic: Pronunciation (IPA or similar)
        part_of_speech: Word type (noun, verb, ...)
        example: Example sentence
        schema_version: Schema version for forward compatibility
    """

    word_id: str = Field(description="Hash-based word ID")
    set_id: str
    term: str
    meaning: str
    phonetic: str = Field(default="")
    part_of_speech: str = Field(default="")
    example: str = Field(default="")
    schema_version: int = Field(default=1)
