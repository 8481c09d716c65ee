"""
Country Directory - FastAPI Backend

Browsable, filterable directory of countries built on REST Countries data.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from country_directory.config import get_settings
from country_directory.rate_limit import limiter
from country_directory.routers import countries
from country_directory.services.country_loader import CountryLoader, get_loader
from country_directory.services.directory_state import DirectoryState

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    logger.info("Starting Country Directory backend...")

    directory: DirectoryState = app.state.directory
    load_task = None
    if directory.loading:
        # Requests are served while the fetch is in flight
        load_task = app.state.load_task = asyncio.create_task(app.state.loader.load(directory))
        logger.info("Country load started")
    else:
        logger.info(f"Directory already {directory.status.value}, skipping load")

    yield

    if load_task is not None and not load_task.done():
        load_task.cancel()
        try:
            await load_task
        except asyncio.CancelledError:
            pass
    logger.info("Shutting down Country Directory backend...")


def create_app(
    loader: Optional[CountryLoader] = None,
    directory: Optional[DirectoryState] = None,
) -> FastAPI:
    """Build the app around one session's state."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A filterable directory of the world's countries",
        lifespan=lifespan
    )
    app.state.loader = loader or get_loader()
    app.state.directory = directory or DirectoryState()
    app.state.load_task = None

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(countries.router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "country_directory.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
