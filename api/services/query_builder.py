"""Translates news filter parameters into a MongoDB query."""
import logging
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator
from database.repositories.news_repo import ArticleStatus

logger = logging.getLogger(__name__)


# Stored articles carry full language names, clients usually send codes.
LANGUAGE_CODES = {
    "en": "english",
    "es": "spanish",
    "fr": "french",
    "de": "german",
}


def resolve_language(language: str) -> str:
    """Map a two-letter code to its stored name; unknown values pass through."""
    return LANGUAGE_CODES.get(language, language)


class NewsFilters(BaseModel):
    """Optional filters accepted by the news listing."""
    country: Optional[str] = Field(None, description="Exact country code")
    category: Optional[str] = Field(None, description="Category the article is tagged with")
    language: Optional[str] = Field(None, description="Language code (en) or full name (english)")
    source: Optional[str] = Field(None, description="Provider source id")
    status: Optional[str] = Field(ArticleStatus.ACTIVE, description="Article status")
    start_date: Optional[str] = Field(None, description="Inclusive lower bound on pubDate")
    end_date: Optional[str] = Field(None, description="Inclusive upper bound on pubDate")

    @field_validator(
        "country", "category", "language", "source", "status", "start_date", "end_date"
    )
    @classmethod
    def blank_as_missing(cls, v: Optional[str]) -> Optional[str]:
        """Empty strings impose no constraint."""
        if v == "":
            return None
        return v


def build_news_query(filters: NewsFilters) -> Dict[str, Any]:
    """Build a query holding one clause per supplied filter."""
    query: Dict[str, Any] = {}

    if filters.country:
        query["country"] = filters.country
    if filters.category:
        query["category"] = {"$in": [filters.category]}
    if filters.language:
        query["language"] = {"$in": [resolve_language(filters.language)]}
    if filters.source:
        query["source_id"] = filters.source
    if filters.status:
        query["status"] = filters.status

    # pubDate is compared as a raw string
    if filters.start_date or filters.end_date:
        query["pubDate"] = {}
        if filters.start_date:
            query["pubDate"]["$gte"] = filters.start_date
        if filters.end_date:
            query["pubDate"]["$lte"] = filters.end_date

    logger.info(f"Query: {query}")
    return query
