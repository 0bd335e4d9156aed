"""Ingestion of provider articles into storage."""
import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from database.repositories.news_repo import NewsRepository, UpsertResult
from api.services.news_provider import NewsDataClient
from api.services.normalizer import normalize_articles
from shared.config import settings

logger = logging.getLogger(__name__)


class IngestionService:
    """Fetches news from the provider and upserts it."""

    def __init__(self, db: AsyncIOMotorDatabase, client: NewsDataClient = None):
        self.news_repo = NewsRepository(db)
        self.client = client or NewsDataClient()

    async def fetch_and_store(
        self,
        country: str,
        category: Optional[str] = None,
        language: Optional[str] = None
    ) -> Optional[UpsertResult]:
        """
        Fetch the latest articles for `country` and store them.

        Returns None when the provider has nothing, otherwise the upsert
        counts. Provider and storage errors are logged and re-raised.
        """
        language = language or settings.default_language

        try:
            raw_articles = await self.client.fetch_latest(country, category, language)

            if not raw_articles:
                logger.info(f"No articles returned for country={country}")
                return None

            articles = normalize_articles(raw_articles, country)
            result = await self.news_repo.upsert_articles(articles)
        except Exception as e:
            logger.error(f"Error fetching news: {e}")
            raise

        logger.info(f"Stored {result.inserted} new articles, updated {result.updated}")
        return result
