"""JSON vocabulary set import adapter for vocab_srs.

Expected format (one set):
    {
        "title": "Travel Essentials",
        "description": "Words for your next trip",
        "category": "Travel",
        "level": "Beginner",
        "icon": "flight",
        "words": [
            {
                "word": "itinerary",
                "phonetic": "/aɪˈtɪnəˌrɛri/",
                "type": "noun",
                "meaning": "a planned route or journey",
                "example": "Our itinerary includes three cities."
            }
        ]
    }

A list of such objects, or ``{"sets": [...]}``, is accepted too.
"""

from typing import Any

from pydantic import ValidationError

from vocab_srs.importers.base import VocabularyImportAdapter
from vocab_srs.importers.registry import ImportAdapterRegistry
from vocab_srs.models.ingest import IngestWord, VocabularySetIngest
from vocab_srs.models.vocabulary import SetLevel

__all__ = [
    "VocabularyJSONAdapter",
]


@ImportAdapterRegistry.register
class VocabularyJSONAdapter(VocabularyImportAdapter):
    """Adapter for vocabulary sets exported as JSON.

    Words missing a term or a meaning are skipped, and sets left
    without words are dropped.
    """

    def __init__(
        self,
        sets_key: str = "sets",
        words_key: str = "words",
        term_keys: tuple[str, ...] = ("word", "term"),
        meaning_keys: tuple[str, ...] = ("meaning", "definition", "translation"),
    ) -> None:
        """Initialize adapter with field mappings.

        Args:
            sets_key: Key for the sets array in the root object
            words_key: Key for the words array in a set object
            term_keys: Keys tried in order for the word itself
            meaning_keys: Keys tried in order for the meaning
        """
        self._sets_key = sets_key
        self._words_key = words_key
        self._term_keys = term_keys
        self._meaning_keys = meaning_keys

    @property
    def source_name(self) -> str:
        return "vocabulary_json"

    def parse(self, raw_export: Any) -> list[VocabularySetIngest]:
        """Parse one set, a list of sets, or an object holding a sets array.

        Raises:
            ValueError: If the root is neither an object nor an array, or a
                set has no title
        """
        if isinstance(raw_export, list):
            raw_sets = raw_export
        elif isinstance(raw_export, dict):
            if self._sets_key in raw_export:
                raw_sets = raw_export[self._sets_key] or []
            else:
                raw_sets = [raw_export]
        else:
            raise ValueError(f"Unsupported export root: {type(raw_export).__name__}")

        sets = [self._parse_set(raw) for raw in raw_sets if isinstance(raw, dict)]
        return [s for s in sets if s.has_words]

    def _parse_set(self, raw: dict[str, Any]) -> VocabularySetIngest:
        title = str(raw.get("title") or "").strip()
        if not title:
            raise ValueError("Vocabulary set without a title")

        words = [
            word
            for word in (self._parse_word(w) for w in raw.get(self._words_key) or [])
            if word is not None
        ]

        return VocabularySetIngest(
            source=self.source_name,
            title=title,
            description=str(raw.get("description") or ""),
            category=str(raw.get("category") or "General"),
            level=self._parse_level(raw.get("level")),
            icon=raw.get("icon"),
            words=words,
        )

    def _parse_word(self, raw: Any) -> IngestWord | None:
        if not isinstance(raw, dict):
            return None

        term = self._first_text(raw, self._term_keys)
        meaning = self._first_text(raw, self._meaning_keys)
        if not term or not meaning:
            return None

        try:
            return IngestWord(
                term=term,
                meaning=meaning,
                phonetic=str(raw.get("phonetic") or ""),
                part_of_speech=str(raw.get("type") or raw.get("part_of_speech") or ""),
                example=str(raw.get("example") or ""),
            )
        except ValidationError:
            return None

    @staticmethod
    def _first_text(raw: dict[str, Any], keys: tuple[str, ...]) -> str:
        for key in keys:
            value = raw.get(key)
            if value:
                return str(value).strip()
        return ""

    @staticmethod
    def _parse_level(value: Any) -> SetLevel:
        """Map a level label to SetLevel; unknown labels become beginner."""
        try:
            return SetLevel(str(value).strip().lower())
        except ValueError:
            return SetLevel.BEGINNER
