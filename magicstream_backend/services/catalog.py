"""
Catalog query service: the read-only movie lookups served by the API.
"""
from __future__ import annotations

import logging

from magicstream_backend.models.movies import MovieRecord
from magicstream_backend.repositories.movies import MovieStore

logger = logging.getLogger(__name__)


class MovieNotFoundError(LookupError):
    """Raised when no movie matches the requested imdb_id."""

    def __init__(self, imdb_id: str) -> None:
        self.imdb_id = imdb_id
        super().__init__(f"Movie not found: {imdb_id!r}")


class CatalogQueryService:
    """
    Lookups over an explicitly injected `MovieStore`.

    Holds no state besides the store handle. `MovieStoreError` raised by the
    store propagates to the caller as-is.
    """

    def __init__(self, store: MovieStore) -> None:
        self._store = store

    def list_movies(self) -> list[MovieRecord]:
        """Every movie in the store, in store order. Empty store gives []."""
        return list(self._store.find_all())

    def get_movie(self, imdb_id: str) -> MovieRecord:
        """
        Return the movie whose imdb_id equals `imdb_id` exactly.

        The id is not validated or normalized; a malformed id simply misses.
        """
        movie = self._store.find_by_id(imdb_id)
        if movie is None:
            logger.debug(f"No movie with imdb_id {imdb_id!r}")
            raise MovieNotFoundError(imdb_id)
        return movie
