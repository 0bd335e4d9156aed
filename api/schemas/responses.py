"""Response schemas for API endpoints."""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class NewsListResponse(BaseModel):
    """Response schema for the news listing."""
    success: bool = True
    total: int = Field(..., description="Number of articles matching the filters")
    page: int = Field(..., description="Current 1-based page")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., alias="totalPages", description="ceil(total / limit)")
    results: List[Dict[str, Any]] = Field(default_factory=list, description="Articles on this page")

    class Config:
        populate_by_name = True


class UpsertSummary(BaseModel):
    """Counts of articles written by an ingestion run."""
    inserted: int = Field(..., description="Articles stored for the first time")
    updated: int = Field(..., description="Existing articles overwritten")


class FetchNewsResponse(BaseModel):
    """Response schema for a fetch-and-store request."""
    success: bool = True
    message: str = Field(default="News fetched and stored successfully")
    result: Optional[UpsertSummary] = Field(None, description="Null when the provider returned nothing")


class FilterOptions(BaseModel):
    """Distinct values currently in storage."""
    categories: List[Any] = Field(default_factory=list)
    countries: List[Any] = Field(default_factory=list)
    languages: List[Any] = Field(default_factory=list)
    sources: List[Any] = Field(default_factory=list)


class FiltersResponse(BaseModel):
    """Response schema for available filters."""
    success: bool = True
    filters: FilterOptions


class DebugResponse(BaseModel):
    """Response schema for the debug dump."""
    total: int
    sample: List[Dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Schema for error responses."""
    success: bool = False
    error: str = Field(..., description="Error message")
