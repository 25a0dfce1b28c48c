"""Mock MongoDB client for testing.

Supports the subset of the Motor API used by MongoStorageRepository:
equality filters plus ``$lte``, ``$ne`` and ``$in``, ``$setOnInsert``
upserts, sorting and limits.
"""

import copy
from typing import Any, Self
from unittest.mock import MagicMock

from vocab_srs.infra.mongo.repositories import MongoStorageRepository


def _matches(document: dict[str, Any], filter_: dict[str, Any]) -> bool:
    for key, condition in filter_.items():
        value = document.get(key)
        if isinstance(condition, dict) and any(op.startswith("$") for op in condition):
            for op, operand in condition.items():
                if op == "$lte":
                    if value is None or not value <= operand:
                        return False
                elif op == "$ne":
                    if value == operand:
                        return False
                elif op == "$in":
                    if value not in operand:
                        return False
                else:
                    raise NotImplementedError(f"Operator not supported by mock: {op}")
        elif value != condition:
            return False
    return True


def _result(**attrs: Any) -> MagicMock:
    result = MagicMock()
    for name, value in attrs.items():
        setattr(result, name, value)
    return result


class MockMongoCollection:
    """Mock MongoDB collection."""

    def __init__(self) -> None:
        self._documents: list[dict[str, Any]] = []

    def _find_index(self, filter_: dict[str, Any]) -> int | None:
        for i, doc in enumerate(self._documents):
            if _matches(doc, filter_):
                return i
        return None

    async def insert_one(self, document: dict[str, Any]) -> MagicMock:
        self._documents.append(copy.deepcopy(document))
        return _result(inserted_id=len(self._documents) - 1)

    async def replace_one(
        self,
        filter_: dict[str, Any],
        replacement: dict[str, Any],
        upsert: bool = False,
    ) -> MagicMock:
        index = self._find_index(filter_)
        if index is not None:
            self._documents[index] = copy.deepcopy(replacement)
            return _result(matched_count=1, modified_count=1, upserted_id=None)
        if upsert:
            self._documents.append(copy.deepcopy(replacement))
            return _result(matched_count=0, modified_count=0, upserted_id=len(self._documents) - 1)
        return _result(matched_count=0, modified_count=0, upserted_id=None)

    async def update_one(
        self,
        filter_: dict[str, Any],
        update: dict[str, Any],
        upsert: bool = False,
    ) -> MagicMock:
        index = self._find_index(filter_)
        if index is not None:
            self._documents[index].update(copy.deepcopy(update.get("$set", {})))
            return _result(matched_count=1, modified_count=1, upserted_id=None)
        if upsert:
            doc = {k: v for k, v in filter_.items() if not isinstance(v, dict)}
            doc.update(copy.deepcopy(update.get("$setOnInsert", {})))
            doc.update(copy.deepcopy(update.get("$set", {})))
            self._documents.append(doc)
            return _result(matched_count=0, modified_count=0, upserted_id=len(self._documents) - 1)
        return _result(matched_count=0, modified_count=0, upserted_id=None)

    async def find_one(self, filter_: dict[str, Any]) -> dict[str, Any] | None:
        index = self._find_index(filter_)
        return copy.deepcopy(self._documents[index]) if index is not None else None

    async def count_documents(self, filter_: dict[str, Any], limit: int = 0) -> int:
        count = sum(1 for d in self._documents if _matches(d, filter_))
        return min(count, limit) if limit else count

    async def delete_many(self, filter_: dict[str, Any]) -> MagicMock:
        kept = [d for d in self._documents if not _matches(d, filter_)]
        deleted = len(self._documents) - len(kept)
        self._documents = kept
        return _result(deleted_count=deleted)

    async def create_index(self, *args: Any, **kwargs: Any) -> str:
        return "mock_index"

    def find(self, filter_: dict[str, Any] | None = None) -> "MockCursor":
        docs = [copy.deepcopy(d) for d in self._documents if _matches(d, filter_ or {})]
        return MockCursor(docs)

    def __len__(self) -> int:
        return len(self._documents)


class MockCursor:
    """Mock MongoDB cursor."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents
        self._index = 0

    def sort(self, key: str, direction: int = 1) -> "MockCursor":
        # Nulls sort first ascending, as in MongoDB
        self._documents.sort(
            key=lambda d: (d.get(key) is not None, d.get(key)),
            reverse=direction < 0,
        )
        return self

    def limit(self, n: int) -> "MockCursor":
        if n:
            self._documents = self._documents[:n]
        return self

    def __aiter__(self) -> "MockCursor":
        self._index = 0
        return self

    async def __anext__(self) -> dict[str, Any]:
        if self._index >= len(self._documents):
            raise StopAsyncIteration
        doc = self._documents[self._index]
        self._index += 1
        return doc


class MockMongoClient:
    """Mock MongoDB client for testing."""

    def __init__(self) -> None:
        self._collections: dict[str, MockMongoCollection] = {}

    def __getitem__(self, name: str) -> MockMongoCollection:
        if name not in self._collections:
            self._collections[name] = MockMongoCollection()
        return self._collections[name]

    @property
    def vocabulary_sets(self) -> MockMongoCollection:
        return self["vocabulary_sets"]

    @property
    def words(self) -> MockMongoCollection:
        return self["words"]

    @property
    def progress(self) -> MockMongoCollection:
        return self["user_progress"]

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def create_indexes(self) -> None:
        pass


class InMemoryStorage(MongoStorageRepository):
    """Mongo repository over MockMongoClient, pluggable into VocabSRS."""

    config_class = MagicMock()  # any non-None value routes VocabSRS through from_config

    @classmethod
    async def from_config(cls, config: Any) -> Self:
        instance = cls(MockMongoClient())  # type: ignore[arg-type]
        instance.closed = False
        return instance

    @classmethod
    async def from_dict(cls, config: dict[str, Any]) -> Self:
        return await cls.from_config(config)

    async def close(self) -> None:
        self.closed = True
