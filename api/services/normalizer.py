"""Shapes raw provider articles into stored news records."""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional
from database.repositories.news_repo import ArticleStatus
from shared.utils import get_utc_now


def normalize_article(
    raw: Mapping[str, Any],
    country: str,
    fetched_at: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Copy a provider article and stamp it for storage.

    Provider fields pass through untouched; `country`, `fetchedAt` and
    `status` are always overwritten.
    """
    article = dict(raw)
    article["country"] = country
    article["fetchedAt"] = fetched_at or get_utc_now()
    article["status"] = ArticleStatus.ACTIVE
    return article


def normalize_articles(raws: Iterable[Mapping[str, Any]], country: str) -> List[Dict[str, Any]]:
    """Normalize a fetched batch using one shared fetch timestamp."""
    fetched_at = get_utc_now()
    return [normalize_article(raw, country, fetched_at) for raw in raws]
