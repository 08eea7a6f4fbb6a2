"""MongoDB connection for the per-user document store, using Motor (async driver)."""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ecolife.config import settings

logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> bool:
        """
        Connect to MongoDB.

        A missing connection URL is logged and leaves the manager
        disconnected instead of failing startup.

        Returns:
            True if a client was created, False in degraded mode
        """
        if not settings.mongodb_url:
            logger.error(
                "MONGODB_URL is not set; productivity records will not be persisted"
            )
            return False

        self.client = AsyncIOMotorClient(settings.mongodb_url)
        self.db = self.client[settings.mongodb_db_name]
        logger.info("Connected to MongoDB: %s", settings.mongodb_db_name)
        return True

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client is not None:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    @property
    def connected(self) -> bool:
        return self.db is not None

    def get_collection(self, name: str):
        """Get a MongoDB collection."""
        if self.db is None:
            raise RuntimeError("Database not connected")
        return self.db[name]


# Global database instance
database = Database()
