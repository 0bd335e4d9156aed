"""Client for the newsdata.io latest-news endpoint."""
import logging
from typing import Any, Dict, List, Optional
import aiohttp
from shared.config import settings

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when the news provider cannot be reached or rejects a request."""


class NewsDataClient:
    """Fetches the latest articles for a country from the provider."""

    def __init__(self, api_url: str = None, api_key: str = None):
        self.api_url = api_url or settings.news_api_url
        self.api_key = api_key if api_key is not None else settings.news_api_key

    def _build_params(
        self,
        country: str,
        category: Optional[str],
        language: str
    ) -> Dict[str, str]:
        params = {
            "country": country,
            "apikey": self.api_key,
            "language": language,
        }
        if category:
            params["category"] = category
        return params

    async def fetch_latest(
        self,
        country: str,
        category: Optional[str] = None,
        language: str = None
    ) -> List[Dict[str, Any]]:
        """
        Issue one request to the provider and return its `results` list.

        A missing or null `results` field is treated as no articles.
        Raises ProviderError on transport failures, non-2xx responses and
        bodies that are not a JSON object.
        """
        params = self._build_params(country, category, language or settings.default_language)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.api_url, params=params) as response:
                    if response.status >= 400:
                        body = await response.text()
                        raise ProviderError(
                            f"News provider returned HTTP {response.status}: {body[:200]}"
                        )
                    data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise ProviderError(f"Network error: {str(e)}") from e
        except ValueError as e:
            raise ProviderError("Malformed provider response") from e

        if data is None:
            return []
        if not isinstance(data, dict):
            raise ProviderError("Malformed provider response")
        return data.get("results") or []
