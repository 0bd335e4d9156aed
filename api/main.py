"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from database.connection import DatabaseConnection
from api.routes import news_router
from api.services.news_provider import ProviderError
from shared.config import settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    database = DatabaseConnection()

    # Startup
    startup = await database.connect()
    if not startup.success:
        logger.critical(f"Cannot start without MongoDB: {startup.error}")
        raise RuntimeError(f"MongoDB connection failed: {startup.error}")
    app.state.database = database

    yield

    # Shutdown
    database.close()


def create_app() -> FastAPI:
    """Build the application with its middleware, handlers and routes."""
    app = FastAPI(
        title="DevLook News API",
        description="Ingests news from newsdata.io and serves filtered, paginated reads",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return _error(400, "Invalid request parameters")

    @app.exception_handler(ProviderError)
    async def provider_exception_handler(request: Request, exc: ProviderError):
        logger.error(f"News provider error on {request.url.path}: {exc}")
        return _error(500, str(exc))

    @app.exception_handler(PyMongoError)
    async def storage_exception_handler(request: Request, exc: PyMongoError):
        logger.error(f"Storage error on {request.url.path}: {exc}")
        return _error(500, str(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception(f"Unhandled error on {request.url.path}")
        return _error(500, str(exc))

    app.include_router(news_router)

    @app.get("/")
    async def root():
        """Liveness probe."""
        return {"message": "DevLook News API", "status": "running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug
    )
