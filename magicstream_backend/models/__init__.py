"""
Domain models shared across the API and services.
"""

from magicstream_backend.models.movies import MovieRecord

__all__ = [
    "MovieRecord",
]
