# Schemas module
from .requests import FetchNewsRequest
from .responses import (
    NewsListResponse,
    UpsertSummary,
    FetchNewsResponse,
    FilterOptions,
    FiltersResponse,
    DebugResponse,
    ErrorResponse
)

__all__ = [
    "FetchNewsRequest",
    "NewsListResponse",
    "UpsertSummary",
    "FetchNewsResponse",
    "FilterOptions",
    "FiltersResponse",
    "DebugResponse",
    "ErrorResponse"
]
