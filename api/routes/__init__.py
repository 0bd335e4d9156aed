# Routes module
from .news import router as news_router

__all__ = ["news_router"]
