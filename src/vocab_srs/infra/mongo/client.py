"""MongoDB client for vocab_srs.

Wraps Motor's ``AsyncIOMotorClient`` and names the three collections the
repository works with: ``vocabulary_sets``, ``words`` and ``user_progress``.
"""

from typing import TYPE_CHECKING, Any

from vocab_srs.config import MongoSettings
from vocab_srs.logging import get_logger
from vocab_srs.utils.lazy_import import lazy_import

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

__all__ = [
    "MongoClient",
]

logger = get_logger(__name__)

get_async_motor = lazy_import("motor.motor_asyncio", "AsyncIOMotorClient")

IndexKeys = str | list[tuple[str, int]]

# collection name -> (keys, unique)
_INDEXES: dict[str, list[tuple[IndexKeys, bool]]] = {
    "vocabulary_sets": [
        ("set_id", True),
        ("category", False),
    ],
    "words": [
        ("word_id", True),
        ("set_id", False),
    ],
    # One record per (learner, word); the due query scans by date
    "user_progress": [
        ([("user_id", 1), ("word_id", 1)], True),
        ([("user_id", 1), ("next_review_at", 1)], False),
        ([("user_id", 1), ("set_id", 1)], False),
        ([("user_id", 1), ("last_reviewed_at", -1)], False),
    ],
}


class MongoClient:
    """Connection holder for the vocabulary and progress collections.

    Example:
        client = MongoClient(settings)
        await client.connect()
        await client.create_indexes()

        doc = await client.progress.find_one({"user_id": user_id, "word_id": word_id})

        await client.disconnect()
    """

    def __init__(self, settings: MongoSettings) -> None:
        self._settings = settings
        self._client = None
        self._db = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> None:
        """Open the Motor client and ping the server.

        Calling it again on a connected client does nothing.
        """
        if self.is_connected:
            return
        motor_client_cls = get_async_motor()

        # tz_aware so stored review timestamps compare against aware "now"
        client = motor_client_cls(
            self._settings.uri.get_secret_value(),
            tz_aware=True,
            serverSelectionTimeoutMS=self._settings.server_selection_timeout_ms,
        )
        await client.admin.command("ping")

        self._client = client
        self._db = client[self._settings.database]
        logger.info(
            "connected_to_mongodb",
            database=self._settings.database,
            prefix=self._settings.collection_prefix or None,
        )

    async def disconnect(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._db = None
        logger.info("disconnected_from_mongodb")

    @property
    def db(self) -> "AsyncIOMotorDatabase[dict[str, Any]]":
        """Database handle.

        Raises:
            RuntimeError: If connect() has not been awaited
        """
        if self._db is None:
            raise RuntimeError("MongoClient not connected. Call connect() first.")
        return self._db

    def collection(self, name: str) -> "AsyncIOMotorCollection[dict[str, Any]]":
        """Collection ``name`` with the configured prefix applied."""
        return self.db[self._settings.collection_prefix + name]

    @property
    def vocabulary_sets(self) -> "AsyncIOMotorCollection[dict[str, Any]]":
        return self.collection("vocabulary_sets")

    @property
    def words(self) -> "AsyncIOMotorCollection[dict[str, Any]]":
        return self.collection("words")

    @property
    def progress(self) -> "AsyncIOMotorCollection[dict[str, Any]]":
        return self.collection("user_progress")

    async def create_indexes(self) -> None:
        """Ensure the catalog and progress indexes exist."""
        created = 0
        for name, indexes in _INDEXES.items():
            target = self.collection(name)
            for keys, unique in indexes:
                if unique:
                    await target.create_index(keys, unique=True)
                else:
                    await target.create_index(keys)
                created += 1

        logger.info("created_mongodb_indexes", count=created)
