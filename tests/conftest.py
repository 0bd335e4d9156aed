"""Pytest configuration and fixtures."""
import copy
import pytest
import pytest_asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.routes.news import get_db, get_news_client


def _matches(document, query):
    """Evaluate the subset of MongoDB query operators the service emits."""
    for key, condition in query.items():
        value = document.get(key)
        if isinstance(condition, dict):
            for op, arg in condition.items():
                if op == "$in":
                    candidates = value if isinstance(value, list) else [value]
                    if not any(candidate in arg for candidate in candidates):
                        return False
                elif op == "$gte":
                    if value is None or value < arg:
                        return False
                elif op == "$lte":
                    if value is None or value > arg:
                        return False
                else:
                    raise NotImplementedError(op)
        elif isinstance(value, list):
            if condition not in value:
                return False
        elif value != condition:
            return False
    return True


class FakeCursor:
    """Async cursor over an already materialised result list."""

    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self.documents)
        return list(self.documents[:length])


class FakeCollection:
    """In-memory stand-in for the motor collection used by NewsRepository."""

    def __init__(self):
        self.documents = []

    def seed(self, documents):
        for document in documents:
            stored = copy.deepcopy(document)
            stored.setdefault("_id", ObjectId())
            self.documents.append(stored)

    def find(self, query=None, sort=None, skip=0, limit=0):
        results = [copy.deepcopy(d) for d in self.documents if _matches(d, query or {})]
        for key, direction in reversed(sort or []):
            results.sort(key=lambda d: d.get(key) or "", reverse=direction < 0)
        results = results[skip:]
        if limit:
            results = results[:limit]
        return FakeCursor(results)

    async def count_documents(self, query):
        return sum(1 for d in self.documents if _matches(d, query))

    async def distinct(self, field):
        values = []
        for document in self.documents:
            value = document.get(field)
            for item in value if isinstance(value, list) else [value]:
                if item not in values:
                    values.append(item)
        return values

    async def bulk_write(self, operations):
        upserted = matched = 0
        for operation in operations:
            selector = operation._filter
            fields = operation._doc["$set"]
            existing = next((d for d in self.documents if _matches(d, selector)), None)
            if existing is not None:
                matched += 1
                existing.update(copy.deepcopy(fields))
            elif operation._upsert:
                upserted += 1
                stored = dict(selector)
                stored.update(copy.deepcopy(fields))
                stored["_id"] = ObjectId()
                self.documents.append(stored)
        return SimpleNamespace(upserted_count=upserted, matched_count=matched)


class FakeDatabase:
    """Database exposing FakeCollections by name."""

    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db():
    """Create an empty in-memory database."""
    return FakeDatabase()


@pytest.fixture
def news_collection(fake_db):
    """The news collection inside fake_db."""
    return fake_db["news"]


@pytest.fixture
def provider_articles():
    """Articles as the provider returns them."""
    return [
        {
            "article_id": "a1",
            "title": "Markets rally",
            "link": "https://example.com/markets-rally",
            "category": ["business"],
            "language": ["english"],
            "source_id": "example",
            "pubDate": "2024-02-04 10:30:00",
        },
        {
            "article_id": "a2",
            "title": "Cup final tonight",
            "link": "https://example.com/cup-final",
            "category": ["sports", "top"],
            "language": ["english"],
            "source_id": "sportsdesk",
            "pubDate": "2024-02-04 12:00:00",
        },
    ]


@pytest.fixture
def mock_news_client(provider_articles):
    """Provider client returning provider_articles."""
    client = AsyncMock()
    client.fetch_latest = AsyncMock(return_value=provider_articles)
    return client


@pytest.fixture
def app(fake_db, mock_news_client):
    """Application wired to the fake database and provider."""
    application = create_app()
    application.dependency_overrides[get_db] = lambda: fake_db
    application.dependency_overrides[get_news_client] = lambda: mock_news_client
    return application


@pytest_asyncio.fixture
async def client(app):
    """HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
