"""Shared configuration for the news service."""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB Configuration
    mongo_url: str = "mongodb://localhost:27017"
    mongo_db_name: str = "devlook"
    mongo_collection: str = "news"

    # News provider Configuration
    news_api_url: str = "https://newsdata.io/api/1/latest"
    news_api_key: str = ""
    default_language: str = "en"

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_debug: bool = False
    cors_origins: List[str] = ["*"]

    # Pagination
    default_page_size: int = 20

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
