"""Database connection setup for MongoDB."""
import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError
from shared.config import settings

logger = logging.getLogger(__name__)


@dataclass
class StartupResult:
    """Outcome of connecting to storage at startup."""
    success: bool
    error: Optional[str] = None


class DatabaseConnection:
    """Owns the MongoDB client for the lifetime of the application."""

    def __init__(
        self,
        mongo_url: str = None,
        db_name: str = None
    ):
        self.mongo_url = mongo_url or settings.mongo_url
        self.db_name = db_name or settings.mongo_db_name
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> StartupResult:
        """Open the client, verify the server answers and set up indexes."""
        try:
            self._client = AsyncIOMotorClient(self.mongo_url)
            await self._client.admin.command("ping")
            self._db = self._client[self.db_name]
            logger.info("Connected to MongoDB successfully")

            await self._setup_indexes()
            logger.info("Database and indexes ready")
        except PyMongoError as e:
            logger.error(f"MongoDB connection error: {e}")
            self.close()
            return StartupResult(success=False, error=str(e))

        return StartupResult(success=True)

    async def _setup_indexes(self):
        """Set up MongoDB indexes for optimal query performance."""
        news = self.db[settings.mongo_collection]
        await news.create_index([("pubDate", DESCENDING)])
        await news.create_index([("country", ASCENDING)])
        await news.create_index([("category", ASCENDING)])
        await news.create_index([("link", ASCENDING)], unique=True)

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Connected database; raises if connect() has not succeeded."""
        if self._db is None:
            raise RuntimeError("Database is not connected")
        return self._db

    def close(self):
        """Close the MongoDB client."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")


def get_database(request: Request) -> DatabaseConnection:
    """Dependency returning the connection created at startup."""
    return request.app.state.database
