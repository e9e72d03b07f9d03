"""
Live TV Application - FastAPI Backend

Aggregates live channels from independent providers and resolves them to
playable streams.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import get_settings
from app.routers import livetv
from app.services.livetv import LiveTVResolver
from app.services.rate_limit import limiter
from app.services.registry import build_default_registry

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    logger.info("Starting Live TV Backend...")

    registry = build_default_registry(settings)
    app.state.livetv = LiveTVResolver(registry)
    logger.info(f"Registered {len(registry)} live providers: {', '.join(registry.ids())}")

    yield

    logger.info("Shutting down Live TV Backend...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Live TV channel aggregation and stream resolution",
    lifespan=lifespan
)

# Add rate limiter
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

# Include routers
app.include_router(livetv.router)


@app.get("/api/health")
async def health_check(request: Request):
    """Health check endpoint."""
    resolver = getattr(request.app.state, "livetv", None)
    return {
        "status": "healthy",
        "version": settings.app_version,
        "providers": len(resolver.registry) if resolver else 0
    }


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
