from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class MovieRecord:
    """
    Canonical movie record (maps to `core.movies`).

    Only `imdb_id` is interpreted. Every other column (title, poster_path, genre,
    ranking, ...) is carried untouched in `attributes`.
    """

    imdb_id: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        attrs = {k: v for k, v in dict(self.attributes).items() if k != "imdb_id"}
        object.__setattr__(self, "attributes", MappingProxyType(attrs))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> MovieRecord:
        if not isinstance(row, Mapping):
            raise ValueError(f"movie row must be an object, got {type(row).__name__}")
        imdb_id = row.get("imdb_id")
        if not isinstance(imdb_id, str):
            raise ValueError(f"movie row has no string imdb_id: {imdb_id!r}")
        return cls(imdb_id=imdb_id, attributes=row)

    def to_dict(self) -> dict[str, Any]:
        return {"imdb_id": self.imdb_id, **self.attributes}
