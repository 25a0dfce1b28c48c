"""Ingestion boundary models for vocab_srs.

These frozen Pydantic models define the contract between import adapters
and the persistence layer. They are immutable and validated at creation.
"""

from pydantic import BaseModel, Field

from vocab_srs.models.vocabulary import SetLevel

__all__ = [
    "IngestWord",
    "VocabularySetIngest",
]


class IngestWord(BaseModel, frozen=True):
    """Single word from an import source.

    Attributes:
        term: The word itself
        meaning: Definition or translation
        phonetic: Pronunciation
        part_of_speech: Word type
        example: Example sentence
        schema_version: Schema version for forward compatibility
    """

    term: str = Field(min_length=1)
    meaning: str = Field(min_length=1)
    phonetic: str = Field(default="")
    part_of_speech: str = Field(default="")
    example: str = Field(default="")
    schema_version: int = Field(default=1)


class VocabularySetIngest(BaseModel, frozen=True):
    """Complete vocabulary set from an import source.

    Attributes:
        source: Import source identifier (e.g., "vocabulary_json")
        title: Set title
        description: Set description
        category: Set category
        level: Difficulty level
        icon: Icon name
        words: Words in the set, in source order
        schema_version: Schema version for forward compatibility
    """

    source: str = Field(description="Import source")
    title: str = Field(min_length=1)
    description: str = Field(default="")
    category: str = Field(default="General")
    level: SetLevel = Field(default=SetLevel.BEGINNER)
    icon: str | None = Field(default=None)
    words: list[IngestWord] = Field(default_factory=list)
    schema_version: int = Field(default=1)

    @property
    def word_count(self) -> int:
        """Get the number of words in this set."""
        return len(self.words)

    @property
    def has_words(self) -> bool:
        """Check if this set has any words."""
        return len(self.words) > 0
