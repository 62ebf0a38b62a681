from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Protocol

from supabase import Client

from magicstream_backend.models.movies import MovieRecord

logger = logging.getLogger(__name__)


class MovieStoreError(RuntimeError):
    pass


class MovieStore(Protocol):
    """Read-only capability the catalog service queries."""

    def find_all(self) -> list[MovieRecord]: ...

    def find_by_id(self, imdb_id: str) -> MovieRecord | None: ...

    def ping(self) -> None: ...


def _is_missing_relation(message: str) -> bool:
    msg = (message or "").casefold()
    return (
        "42p01" in msg  # undefined_table
        or "pgrst205" in msg  # postgrest: relation not found in schema cache
        or "pgrst106" in msg  # postgrest: invalid schema
        or ("relation" in msg and "does not exist" in msg)
        or ("could not find" in msg and "relation" in msg)
    )


def _raise_for_supabase_error(response: Any, context: str) -> None:
    if hasattr(response, "error") and response.error:
        raise MovieStoreError(f"Supabase error during {context}: {response.error}")


def _rows_to_records(rows: Any, context: str) -> list[MovieRecord]:
    if not isinstance(rows, list):
        raise MovieStoreError(f"Supabase returned unexpected response shape during {context}.")
    try:
        return [MovieRecord.from_row(row) for row in rows]
    except (TypeError, ValueError, AttributeError) as exc:
        raise MovieStoreError(f"Corrupt movie row during {context}: {exc}") from exc


class SupabaseMovieStore:
    """
    Movie store backed by a Supabase (PostgREST) table, `core.movies` by default.

    Every client failure surfaces as `MovieStoreError`; nothing is retried.
    """

    def __init__(self, db: Client, *, schema: str = "core", table: str = "movies") -> None:
        self._db = db
        self._schema = schema
        self._table = table

    @property
    def relation(self) -> str:
        return f"{self._schema}.{self._table}"

    def _query(self):
        return self._db.schema(self._schema).table(self._table)

    def _execute(self, query: Any, context: str) -> Any:
        try:
            response = query.execute()
        except Exception as exc:
            raise MovieStoreError(f"Supabase error during {context}: {exc}") from exc
        _raise_for_supabase_error(response, context)
        return response

    def find_all(self) -> list[MovieRecord]:
        context = f"listing {self.relation}"
        response = self._execute(self._query().select("*"), context)
        return _rows_to_records(response.data, context)

    def find_by_id(self, imdb_id: str) -> MovieRecord | None:
        context = f"finding movie by imdb id in {self.relation}"
        response = self._execute(
            self._query().select("*").eq("imdb_id", imdb_id).limit(2),
            context,
        )
        records = _rows_to_records(response.data, context)
        if not records:
            return None
        if len(records) > 1:
            raise MovieStoreError(f"Duplicate rows in {self.relation} for imdb_id {imdb_id!r}")
        return records[0]

    def ping(self) -> None:
        """
        Fail fast with a clear error if the movies table is missing or unreachable.
        """
        try:
            self._execute(self._query().select("imdb_id").limit(1), f"{self.relation} preflight")
        except MovieStoreError as exc:
            if _is_missing_relation(str(exc)):
                raise MovieStoreError(
                    f"Database table `{self.relation}` is missing. "
                    "Check MOVIES_SCHEMA / MOVIES_TABLE and that the schema is exposed to PostgREST."
                ) from exc
            raise


class InMemoryMovieStore:
    """
    Read-only movie store held in process memory.

    Used for local development (`MOVIE_STORE_BACKEND=memory`) and tests.
    """

    def __init__(self, rows: Iterable[Mapping[str, Any]] = ()) -> None:
        records: dict[str, MovieRecord] = {}
        for row in rows:
            record = MovieRecord.from_row(row)
            if record.imdb_id in records:
                raise ValueError(f"duplicate imdb_id in seed data: {record.imdb_id!r}")
            records[record.imdb_id] = record
        self._records = records

    @classmethod
    def from_json_file(cls, path: str | Path) -> InMemoryMovieStore:
        path = Path(path)
        rows = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(rows, list):
            raise ValueError(f"{path} must contain a JSON array of movie objects")
        logger.info(f"Loaded {len(rows)} movies from {path}")
        return cls(rows)

    def __len__(self) -> int:
        return len(self._records)

    def find_all(self) -> list[MovieRecord]:
        return list(self._records.values())

    def find_by_id(self, imdb_id: str) -> MovieRecord | None:
        return self._records.get(imdb_id)

    def ping(self) -> None:
        return None
