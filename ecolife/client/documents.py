"""Remote per-user document storage for productivity records."""
import logging
from typing import Optional, Protocol

from pymongo.errors import PyMongoError

from ecolife.config import settings
from ecolife.database import Database, database

logger = logging.getLogger(__name__)


class RemoteStoreError(Exception):
    """Raised when the remote document store cannot be read or written."""


class DocumentStore(Protocol):
    """Per-user composite record storage."""

    async def get(self, user_id: str) -> Optional[dict]:
        ...

    async def set(self, user_id: str, record: dict) -> None:
        ...


class MongoDocumentStore:
    """
    Stores one document per user, keyed by the user ID.

    Writes use ``$set`` with upsert, so fields of the stored document that
    are not part of the record are kept (merge-on-write).
    """

    def __init__(self, collection):
        """Initialize with a Motor collection."""
        self.collection = collection

    async def get(self, user_id: str) -> Optional[dict]:
        """
        Fetch a user's record.

        Returns:
            The stored document without its ``_id``, or None if absent

        Raises:
            RemoteStoreError: If the read fails
        """
        try:
            doc = await self.collection.find_one({"_id": user_id})
        except PyMongoError as e:
            raise RemoteStoreError(str(e)) from e

        if doc is None:
            return None
        doc.pop("_id", None)
        return doc

    async def set(self, user_id: str, record: dict) -> None:
        """
        Merge a record into the user's document.

        Raises:
            RemoteStoreError: If the write fails
        """
        try:
            await self.collection.update_one(
                {"_id": user_id},
                {"$set": record},
                upsert=True,
            )
        except PyMongoError as e:
            raise RemoteStoreError(str(e)) from e


class OfflineDocumentStore:
    """Stand-in used when the remote store is not configured; every call fails."""

    message = "Remote storage is not configured."

    async def get(self, user_id: str) -> Optional[dict]:
        raise RemoteStoreError(self.message)

    async def set(self, user_id: str, record: dict) -> None:
        raise RemoteStoreError(self.message)


async def connect_document_store(db: Database = database) -> DocumentStore:
    """
    Connect to the configured remote store.

    Falls back to an offline store (degraded mode) when no connection URL
    is configured.
    """
    if not await db.connect():
        logger.warning("Using offline document store")
        return OfflineDocumentStore()
    return MongoDocumentStore(db.get_collection(settings.productivity_collection))
