"""Unit tests for vocab_srs importers."""

import io
import json
from pathlib import Path

import pytest

from vocab_srs.importers.registry import ImportAdapterRegistry
from vocab_srs.importers.vocabulary_json import VocabularyJSONAdapter
from vocab_srs.models.vocabulary import SetLevel

TRAVEL_SET = {
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
            "example": "Our itinerary includes three cities.",
        },
        {"term": "layover", "definition": "a short stay between parts of a journey"},
    ],
}


class TestVocabularyJSONAdapter:
    """Tests for the JSON vocabulary adapter."""

    def test_source_name(self) -> None:
        adapter = VocabularyJSONAdapter()
        assert adapter.source_name == "vocabulary_json"

    def test_parse_single_set(self) -> None:
        adapter = VocabularyJSONAdapter()
        sets = adapter.parse(TRAVEL_SET)

        assert len(sets) == 1
        travel = sets[0]
        assert travel.title == "Travel Essentials"
        assert travel.source == "vocabulary_json"
        assert travel.category == "Travel"
        assert travel.level == SetLevel.BEGINNER
        assert travel.icon == "flight"
        assert travel.word_count == 2
        assert travel.words[0].term == "itinerary"
        assert travel.words[0].part_of_speech == "noun"
        assert travel.words[0].example == "Our itinerary includes three cities."
        assert travel.words[1].term == "layover"
        assert travel.words[1].meaning == "a short stay between parts of a journey"

    def test_parse_list_and_sets_key(self) -> None:
        second = {**TRAVEL_SET, "title": "Business", "level": "Advanced"}
        adapter = VocabularyJSONAdapter()

        from_list = adapter.parse([TRAVEL_SET, second])
        from_object = adapter.parse({"sets": [TRAVEL_SET, second]})

        assert [s.title for s in from_list] == ["Travel Essentials", "Business"]
        assert from_list == from_object
        assert from_list[1].level == SetLevel.ADVANCED

    def test_invalid_words_skipped(self) -> None:
        export = {
            "title": "Mixed",
            "words": [
                {"word": "ok", "meaning": "fine"},
                {"word": "", "meaning": "no term"},
                {"word": "no meaning"},
                "not an object",
            ],
        }

        sets = VocabularyJSONAdapter().parse(export)

        assert len(sets) == 1
        assert [w.term for w in sets[0].words] == ["ok"]

    def test_set_without_words_dropped(self) -> None:
        sets = VocabularyJSONAdapter().parse({"title": "Empty", "words": []})
        assert sets == []

    def test_unknown_level_defaults_to_beginner(self) -> None:
        sets = VocabularyJSONAdapter().parse({**TRAVEL_SET, "level": "Expert"})
        assert sets[0].level == SetLevel.BEGINNER

    def test_missing_title_rejected(self) -> None:
        with pytest.raises(ValueError, match="title"):
            VocabularyJSONAdapter().parse({"words": [{"word": "a", "meaning": "b"}]})

    def test_unsupported_root_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported export root"):
            VocabularyJSONAdapter().parse("travel")

    def test_parse_string_and_stream(self) -> None:
        adapter = VocabularyJSONAdapter()
        payload = json.dumps(TRAVEL_SET)

        from_string = adapter.parse_string(payload)
        from_stream = adapter.parse_stream(io.BytesIO(payload.encode("utf-8")))

        assert from_string == from_stream
        assert from_string[0].word_count == 2

    def test_parse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "travel.json"
        path.write_text(json.dumps([TRAVEL_SET]), encoding="utf-8")

        sets = VocabularyJSONAdapter().parse_file(path)

        assert sets[0].title == "Travel Essentials"


class TestImportAdapterRegistry:
    """Tests for adapter registry."""

    def test_json_adapter_registered(self) -> None:
        assert ImportAdapterRegistry.is_registered("vocabulary_json")
        assert "vocabulary_json" in ImportAdapterRegistry.list_sources()
        assert ImportAdapterRegistry.get("vocabulary_json") is VocabularyJSONAdapter

    def test_create(self) -> None:
        adapter = ImportAdapterRegistry.create("vocabulary_json")
        assert isinstance(adapter, VocabularyJSONAdapter)

    def test_unknown_source(self) -> None:
        with pytest.raises(KeyError, match="No adapter registered"):
            ImportAdapterRegistry.get("nonexistent")

    def test_reregistering_same_class_is_noop(self) -> None:
        assert ImportAdapterRegistry.register(VocabularyJSONAdapter) is VocabularyJSONAdapter
        assert ImportAdapterRegistry.get("vocabulary_json") is VocabularyJSONAdapter

    def test_source_name_clash_rejected(self) -> None:
        class ImpostorAdapter(VocabularyJSONAdapter):
            pass

        with pytest.raises(ValueError, match="already registered by VocabularyJSONAdapter"):
            ImportAdapterRegistry.register(ImpostorAdapter)

        assert ImportAdapterRegistry.get("vocabulary_json") is VocabularyJSONAdapter
