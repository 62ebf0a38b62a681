"""
Mapping of catalog errors to HTTP responses.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from magicstream_backend.repositories.movies import MovieStoreError
from magicstream_backend.services.catalog import MovieNotFoundError

logger = logging.getLogger(__name__)


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Movie not found"})


async def movie_store_error_handler(request: Request, exc: MovieStoreError) -> JSONResponse:
    context = f"{request.method} {request.url.path}"
    logger.error(f"Movie store error during {context}: {exc}")
    # Don't leak internal error details to client
    return JSONResponse(status_code=500, content={"detail": f"Database error during {context}"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(MovieStoreError, movie_store_error_handler)
