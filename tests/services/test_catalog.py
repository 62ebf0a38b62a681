from __future__ import annotations

from types import SimpleNamespace

import pytest

from magicstream_backend.models.movies import MovieRecord
from magicstream_backend.repositories.movies import InMemoryMovieStore, MovieStoreError, SupabaseMovieStore
from magicstream_backend.services.catalog import CatalogQueryService, MovieNotFoundError

SHAWSHANK = {"imdb_id": "tt0111161", "title": "The Shawshank Redemption"}


class _FailingStore:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def find_all(self):  # noqa: ANN201
        raise self.exc

    def find_by_id(self, _imdb_id: str):  # noqa: ANN201
        raise self.exc

    def ping(self) -> None:
        raise self.exc


class _CountingStore(InMemoryMovieStore):
    def __init__(self, rows) -> None:  # noqa: ANN001
        super().__init__(rows)
        self.reads = 0

    def find_all(self):  # noqa: ANN201
        self.reads += 1
        return super().find_all()

    def find_by_id(self, imdb_id: str):  # noqa: ANN201
        self.reads += 1
        return super().find_by_id(imdb_id)


def _rows(n: int) -> list[dict]:
    return [{"imdb_id": f"tt{i:07d}", "title": f"Movie {i}", "year": 1990 + i} for i in range(n)]


def test_list_movies_returns_empty_list_for_empty_store() -> None:
    assert CatalogQueryService(InMemoryMovieStore()).list_movies() == []


@pytest.mark.parametrize("n", [1, 3, 25])
def test_list_movies_returns_every_record(n: int) -> None:
    rows = _rows(n)
    movies = CatalogQueryService(InMemoryMovieStore(rows)).list_movies()
    assert [m.to_dict() for m in movies] == rows


def test_get_movie_returns_matching_record() -> None:
    service = CatalogQueryService(InMemoryMovieStore([SHAWSHANK]))
    assert service.get_movie("tt0111161") == MovieRecord.from_row(SHAWSHANK)


@pytest.mark.parametrize("imdb_id", ["tt0000000", "", "TT0111161", " tt0111161", "tt0111161 "])
def test_get_movie_raises_not_found_for_absent_id(imdb_id: str) -> None:
    service = CatalogQueryService(InMemoryMovieStore([SHAWSHANK]))
    with pytest.raises(MovieNotFoundError) as excinfo:
        service.get_movie(imdb_id)
    assert excinfo.value.imdb_id == imdb_id


def test_not_found_is_not_a_store_error() -> None:
    assert not issubclass(MovieNotFoundError, MovieStoreError)


def test_get_movie_reads_store_once() -> None:
    store = _CountingStore([SHAWSHANK])
    service = CatalogQueryService(store)
    service.get_movie("tt0111161")
    with pytest.raises(MovieNotFoundError):
        service.get_movie("tt0000000")
    assert store.reads == 2


def test_repeated_calls_do_not_mutate_store() -> None:
    store = InMemoryMovieStore(_rows(3) + [SHAWSHANK])
    before = [m.to_dict() for m in store.find_all()]
    service = CatalogQueryService(store)

    for _ in range(5):
        listed = service.list_movies()
        listed.clear()
        movie = service.get_movie("tt0111161")
        movie.to_dict()["title"] = "Changed"

    assert [m.to_dict() for m in store.find_all()] == before
    assert service.get_movie("tt0111161").attributes["title"] == "The Shawshank Redemption"


def test_list_movies_propagates_store_error_unchanged() -> None:
    error = MovieStoreError("Supabase error during listing core.movies: timeout")
    with pytest.raises(MovieStoreError) as excinfo:
        CatalogQueryService(_FailingStore(error)).list_movies()
    assert excinfo.value is error


def test_get_movie_propagates_store_error_unchanged() -> None:
    error = MovieStoreError("Supabase error during finding movie: connection refused")
    with pytest.raises(MovieStoreError) as excinfo:
        CatalogQueryService(_FailingStore(error)).get_movie("tt0111161")
    assert excinfo.value is error


def test_list_movies_raises_when_supabase_returns_no_data() -> None:
    class _NoDataClient:
        def __getattr__(self, _name: str):  # noqa: ANN204
            return lambda *_args, **_kwargs: self

        def execute(self):  # noqa: ANN201
            return SimpleNamespace(data=None, error=None)

    service = CatalogQueryService(SupabaseMovieStore(_NoDataClient()))
    with pytest.raises(MovieStoreError):
        service.list_movies()
