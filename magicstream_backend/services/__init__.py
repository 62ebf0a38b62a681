from magicstream_backend.services.catalog import CatalogQueryService, MovieNotFoundError

__all__ = [
    "CatalogQueryService",
    "MovieNotFoundError",
]
