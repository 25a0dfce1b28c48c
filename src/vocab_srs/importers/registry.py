"""Import adapter registry for vocab_srs.

Adapters register under their ``source_name`` so callers such as
``VocabSRS.insert_sets`` can pick a format by name.
"""

from typing import Any

from vocab_srs.importers.base import VocabularyImportAdapter

__all__ = [
    "ImportAdapterRegistry",
]

AdapterClass = type[VocabularyImportAdapter]


class ImportAdapterRegistry:
    """Class-level map of source name to adapter class.

    Example:
        @ImportAdapterRegistry.register
        class CsvAdapter(VocabularyImportAdapter):
            ...

        adapter = ImportAdapterRegistry.create("csv")
    """

    _by_source: dict[str, AdapterClass] = {}  # noqa: RUF012

    @classmethod
    def register(cls, adapter_cls: AdapterClass) -> AdapterClass:
        """Register ``adapter_cls``; usable as a class decorator.

        Registering the same class twice is a no-op, so a module that is
        re-imported does not fail.

        Raises:
            ValueError: If a different class already owns the source name
        """
        source = adapter_cls().source_name
        owner = cls._by_source.setdefault(source, adapter_cls)
        if owner is not adapter_cls:
            raise ValueError(
                f"Source {source!r} already registered by {owner.__name__}"
            )
        return adapter_cls

    @classmethod
    def get(cls, source_name: str) -> AdapterClass:
        """Adapter class for ``source_name``.

        Raises:
            KeyError: If nothing is registered under that name
        """
        try:
            return cls._by_source[source_name]
        except KeyError:
            known = ", ".join(sorted(cls._by_source)) or "none"
            raise KeyError(
                f"No adapter registered for source {source_name!r} (known: {known})"
            ) from None

    @classmethod
    def create(cls, source_name: str, **options: Any) -> VocabularyImportAdapter:
        return cls.get(source_name)(**options)

    @classmethod
    def list_sources(cls) -> list[str]:
        return sorted(cls._by_source)

    @classmethod
    def is_registered(cls, source_name: str) -> bool:
        return source_name in cls._by_source
