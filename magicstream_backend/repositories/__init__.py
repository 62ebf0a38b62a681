"""
Repository layer for DB access patterns.
"""

from magicstream_backend.repositories.movies import (
    InMemoryMovieStore,
    MovieStore,
    MovieStoreError,
    SupabaseMovieStore,
)

__all__ = [
    "InMemoryMovieStore",
    "MovieStore",
    "MovieStoreError",
    "SupabaseMovieStore",
]
