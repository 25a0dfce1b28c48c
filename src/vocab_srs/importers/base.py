"""Base import adapter for vocab_srs.

This module defines the abstract base class for vocabulary import adapters.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO

from vocab_srs.models.ingest import VocabularySetIngest

__all__ = [
    "VocabularyImportAdapter",
]


class VocabularyImportAdapter(ABC):
    """Abstract base class for vocabulary import adapters.

    Import adapters parse source-specific export formats into the
    canonical VocabularySetIngest model.

    Important: Adapters must NOT persist data or generate IDs.
    They only normalize data.

    Example:
        class MyAdapter(VocabularyImportAdapter):
            @property
            def source_name(self) -> str:
                return "my_source"

            def parse(self, raw_export: Any) -> list[VocabularySetIngest]:
                ...
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return unique identifier for this import source.

        Returns:
            Source identifier string (e.g., "vocabulary_json")
        """
        ...

    @abstractmethod
    def parse(self, raw_export: Any) -> list[VocabularySetIngest]:
        """Parse raw export data into VocabularySetIngest objects.

        Args:
            raw_export: Decoded JSON data

        Returns:
            List of VocabularySetIngest objects

        Raises:
            ValueError: If the export format is invalid
        """
        ...

    def parse_file(self, path: Path | str) -> list[VocabularySetIngest]:
        """Parse from file path.

        Args:
            path: Path to the export JSON file

        Returns:
            List of VocabularySetIngest objects
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return self.parse(data)

    def parse_stream(self, stream: BinaryIO) -> list[VocabularySetIngest]:
        """Parse from a binary stream containing JSON."""
        return self.parse(json.load(stream))

    def parse_string(self, json_string: str) -> list[VocabularySetIngest]:
        """Parse from a JSON string."""
        return self.parse(json.loads(json_string))
