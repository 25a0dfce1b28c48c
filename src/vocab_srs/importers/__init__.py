"""Import adapters for vocab_srs.

This module exports the import adapter base class and registry.
"""

from vocab_srs.importers.base import VocabularyImportAdapter
from vocab_srs.importers.registry import ImportAdapterRegistry
from vocab_srs.importers.vocabulary_json import VocabularyJSONAdapter

__all__ = [
    "ImportAdapterRegistry",
    "VocabularyImportAdapter",
    "VocabularyJSONAdapter",
]
