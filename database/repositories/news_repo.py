"""News repository for reads and upserts on the news collection."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, UpdateOne
from shared.config import settings

logger = logging.getLogger(__name__)


class ArticleStatus:
    """Article status constants."""
    ACTIVE = "active"


@dataclass
class UpsertResult:
    """Counts reported by a batch upsert."""
    inserted: int = 0
    updated: int = 0


class NewsRepository:
    """Repository for news article storage."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[settings.mongo_collection]

    async def upsert_articles(self, articles: Sequence[Dict[str, Any]]) -> UpsertResult:
        """
        Write a batch of articles keyed on `link`.

        Existing records get every supplied field re-set, missing ones are
        inserted. Articles without a link are skipped. All operations go out
        in one bulk_write; storage errors propagate to the caller.
        """
        keyed = [article for article in articles if article.get("link")]
        skipped = len(articles) - len(keyed)
        if skipped:
            logger.warning(f"Skipping {skipped} articles without a link")

        if not keyed:
            return UpsertResult()

        operations = [
            UpdateOne(
                {"link": article["link"]},
                {"$set": article},
                upsert=True
            )
            for article in keyed
        ]

        result = await self.collection.bulk_write(operations)
        return UpsertResult(
            inserted=result.upserted_count,
            updated=result.matched_count
        )

    async def find_page(
        self,
        query: Dict[str, Any],
        skip: int = 0,
        limit: int = 20
    ) -> Tuple[List[Dict[str, Any]], int]:
        """Return one page of matches, newest pubDate first, plus the total match count."""
        cursor = self.collection.find(
            query,
            sort=[("pubDate", DESCENDING)],
            skip=skip,
            limit=limit
        )
        articles = await cursor.to_list(length=limit)
        total = await self.collection.count_documents(query)
        return articles, total

    async def distinct_values(self, field: str) -> List[Any]:
        """Distinct non-empty values stored under `field` (array fields are flattened)."""
        values = await self.collection.distinct(field)
        return [value for value in values if value]

    async def sample(self, size: int = 5) -> List[Dict[str, Any]]:
        """First `size` documents in natural order."""
        cursor = self.collection.find({}, limit=size)
        return await cursor.to_list(length=size)

    async def count_all(self) -> int:
        """Total number of stored articles."""
        return await self.collection.count_documents({})
