"""
Read-only catalog endpoints for movies.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

from api.deps import CatalogService


router = APIRouter(tags=["movies"])


# --- Pydantic models ---

class Movie(BaseModel):
    """A movie as stored; every column besides imdb_id passes through untouched."""

    model_config = ConfigDict(extra="allow")

    imdb_id: str


# --- Endpoints ---

@router.get("/movies", response_model=list[Movie])
def list_movies(catalog: CatalogService) -> list[dict[str, Any]]:
    """List every movie in the catalog."""
    return [movie.to_dict() for movie in catalog.list_movies()]


@router.get("/movie/{imdb_id}", response_model=Movie)
def get_movie(catalog: CatalogService, imdb_id: str) -> dict[str, Any]:
    """Get a specific movie by its IMDb id."""
    return catalog.get_movie(imdb_id).to_dict()
