"""
Dependency injection for the movie store and catalog service.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from supabase import Client

from magicstream_backend.db import supabase as supabase_settings
from magicstream_backend.db.supabase import create_supabase_read_client
from magicstream_backend.repositories.movies import (
    InMemoryMovieStore,
    MovieStore,
    SupabaseMovieStore,
)
from magicstream_backend.services.catalog import CatalogQueryService
from magicstream_backend.utils.env import load_env

load_env()

logger = logging.getLogger(__name__)

STORE_BACKENDS = ("supabase", "memory")


@lru_cache
def get_store_backend() -> str:
    backend = (os.getenv("MOVIE_STORE_BACKEND") or "supabase").strip().lower()
    if backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"MOVIE_STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got {backend!r}"
        )
    return backend


@lru_cache
def get_movies_relation() -> tuple[str, str]:
    schema = (os.getenv("MOVIES_SCHEMA") or "core").strip()
    table = (os.getenv("MOVIES_TABLE") or "movies").strip()
    return schema, table


@lru_cache
def get_supabase_client() -> Client:
    """
    Returns the process-wide Supabase client (anon key, read-only use).
    """
    return create_supabase_read_client()


@lru_cache
def get_movie_store() -> MovieStore:
    """
    Returns the configured movie store, built once per process.
    """
    backend = get_store_backend()
    if backend == "memory":
        seed_path = (os.getenv("MOVIES_SEED_PATH") or "").strip()
        if not seed_path:
            logger.warning("MOVIE_STORE_BACKEND=memory without MOVIES_SEED_PATH; catalog is empty")
            return InMemoryMovieStore()
        return InMemoryMovieStore.from_json_file(seed_path)

    schema, table = get_movies_relation()
    logger.info(f"Using Supabase movie store {schema}.{table}")
    return SupabaseMovieStore(get_supabase_client(), schema=schema, table=table)


def get_catalog_service(store: Annotated[MovieStore, Depends(get_movie_store)]) -> CatalogQueryService:
    return CatalogQueryService(store)


# Type aliases for dependency injection
MovieStoreDep = Annotated[MovieStore, Depends(get_movie_store)]
CatalogService = Annotated[CatalogQueryService, Depends(get_catalog_service)]


def clear_cached_settings() -> None:
    """Drop cached settings, client and store so the next request re-reads the environment."""
    for cached in (
        get_store_backend,
        get_movies_relation,
        get_supabase_client,
        get_movie_store,
        supabase_settings.get_supabase_url,
        supabase_settings.get_supabase_anon_key,
    ):
        cached.cache_clear()
