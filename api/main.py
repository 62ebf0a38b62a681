"""
MagicStream Movies API - FastAPI application.

Provides endpoints for:
- Listing every movie in the catalog
- Looking up a single movie by IMDb id
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from api import deps
from api.errors import register_exception_handlers
from api.routers import movies
from magicstream_backend.repositories.movies import MovieStoreError

logger = logging.getLogger(__name__)


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=https://magicstream.example,http://localhost:5173
    """
    origins_str = os.getenv("CORS_ALLOW_ORIGINS", "")
    if not origins_str:
        return []
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def preflight_enabled() -> bool:
    return (os.getenv("MOVIE_STORE_PREFLIGHT") or "").strip().lower() in {"1", "true", "yes"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info("Starting up MagicStream Movies API...")
    if preflight_enabled():
        store = app.dependency_overrides.get(deps.get_movie_store, deps.get_movie_store)()
        store.ping()
        logger.info("Movie store preflight passed")
    yield
    # Shutdown
    logger.info("Shutting down MagicStream Movies API...")


app = FastAPI(
    title="MagicStream Movies API",
    description="Read-only movie catalog",
    version="0.1.0",
    lifespan=lifespan,
)

# If no origins configured, allows all origins but disables credentials
cors_origins = get_cors_origins()
allow_credentials = len(cors_origins) > 0

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(movies.router)


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Hello, MagicStreamMovies"


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/health/store")
def store_health(store: deps.MovieStoreDep):
    """Ping the movie store."""
    try:
        store.ping()
    except MovieStoreError as exc:
        logger.error(f"Movie store health check failed: {exc}")
        return JSONResponse(status_code=503, content={"detail": "Movie store unavailable"})
    return {"status": "ok"}
