"""Request schemas for API endpoints."""
from typing import Optional
from pydantic import BaseModel, Field


class FetchNewsRequest(BaseModel):
    """Body of a fetch-and-store request."""
    country: Optional[str] = Field(None, description="Country code to fetch news for (required)")
    category: Optional[str] = Field(None, description="Optional provider category")
    language: Optional[str] = Field(None, description="Language code, defaults to en")
