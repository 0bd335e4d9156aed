"""Paginated news lookups."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List
from motor.motor_asyncio import AsyncIOMotorDatabase
from database.repositories.news_repo import NewsRepository
from api.services.query_builder import NewsFilters, build_news_query
from shared.config import settings
from shared.utils import calculate_skip, calculate_total_pages

logger = logging.getLogger(__name__)


@dataclass
class NewsPage:
    """One page of matching articles plus totals."""
    total: int
    page: int
    limit: int
    total_pages: int
    results: List[Dict[str, Any]] = field(default_factory=list)


class NewsQueryService:
    """Runs filtered, sorted and paginated news queries."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.news_repo = NewsRepository(db)

    async def execute(
        self,
        filters: NewsFilters,
        page: int = 1,
        limit: int = None
    ) -> NewsPage:
        """Fetch `page` (1-based) of articles matching `filters`, newest first."""
        limit = limit or settings.default_page_size
        query = build_news_query(filters)

        articles, total = await self.news_repo.find_page(
            query,
            skip=calculate_skip(page, limit),
            limit=limit
        )
        logger.info(f"Found {len(articles)} articles, total: {total}")

        return NewsPage(
            total=total,
            page=page,
            limit=limit,
            total_pages=calculate_total_pages(total, limit),
            results=articles
        )
