"""News routes for the REST API."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from database.connection import DatabaseConnection, get_database
from database.repositories.news_repo import ArticleStatus, NewsRepository
from api.services.ingestion import IngestionService
from api.services.news_provider import NewsDataClient
from api.services.news_query import NewsQueryService
from api.services.query_builder import NewsFilters
from api.schemas.requests import FetchNewsRequest
from api.schemas.responses import (
    NewsListResponse,
    UpsertSummary,
    FetchNewsResponse,
    FilterOptions,
    FiltersResponse,
    DebugResponse,
    ErrorResponse
)
from shared.config import settings
from shared.utils import serialize_document

router = APIRouter(
    prefix="/api",
    tags=["news"],
    responses={500: {"model": ErrorResponse, "description": "Provider or storage failure"}}
)


def get_db(database: DatabaseConnection = Depends(get_database)) -> AsyncIOMotorDatabase:
    """Dependency for getting the MongoDB database."""
    return database.db


def get_news_client() -> NewsDataClient:
    """Dependency for the news provider client."""
    return NewsDataClient()


def get_news_filters(
    country: Optional[str] = None,
    category: Optional[str] = None,
    language: Optional[str] = None,
    source: Optional[str] = None,
    status: Optional[str] = ArticleStatus.ACTIVE,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate")
) -> NewsFilters:
    """Collect the listing's query parameters into NewsFilters."""
    return NewsFilters(
        country=country,
        category=category,
        language=language,
        source=source,
        status=status,
        start_date=start_date,
        end_date=end_date
    )


@router.get("/news", response_model=NewsListResponse)
async def list_news(
    filters: NewsFilters = Depends(get_news_filters),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """List stored news, newest first, with optional filters."""
    query_service = NewsQueryService(db)
    news_page = await query_service.execute(filters, page=page, limit=limit)

    return NewsListResponse(
        total=news_page.total,
        page=news_page.page,
        limit=news_page.limit,
        total_pages=news_page.total_pages,
        results=[serialize_document(article) for article in news_page.results]
    )


@router.post(
    "/news/fetch",
    response_model=FetchNewsResponse,
    responses={400: {"model": ErrorResponse, "description": "Country missing"}}
)
async def fetch_news(
    request: Optional[FetchNewsRequest] = None,
    db: AsyncIOMotorDatabase = Depends(get_db),
    client: NewsDataClient = Depends(get_news_client)
):
    """
    Fetch fresh news from the provider and store it.

    - Requires a country
    - Upserts articles keyed on their link
    - Returns inserted/updated counts, or null when nothing came back
    """
    if request is None or not request.country:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Country is required"
        )

    ingestion = IngestionService(db, client)
    result = await ingestion.fetch_and_store(
        request.country,
        category=request.category,
        language=request.language
    )

    summary = None
    if result is not None:
        summary = UpsertSummary(inserted=result.inserted, updated=result.updated)

    return FetchNewsResponse(result=summary)


@router.get("/filters", response_model=FiltersResponse)
async def list_filters(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Distinct categories, countries, languages and sources in storage."""
    news_repo = NewsRepository(db)

    return FiltersResponse(
        filters=FilterOptions(
            categories=await news_repo.distinct_values("category"),
            countries=await news_repo.distinct_values("country"),
            languages=await news_repo.distinct_values("language"),
            sources=await news_repo.distinct_values("source_id")
        )
    )


@router.get("/debug/all", response_model=DebugResponse)
async def debug_all(db: AsyncIOMotorDatabase = Depends(get_db)):
    """First few stored articles and the overall count."""
    news_repo = NewsRepository(db)
    sample = await news_repo.sample(5)
    total = await news_repo.count_all()

    return DebugResponse(
        total=total,
        sample=[serialize_document(article) for article in sample]
    )
