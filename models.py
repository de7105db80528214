from __future__ import annotations

import uuid
from dataclasses import dataclass, asdict
from typing import Any, Dict


def new_movie_id() -> str:
    return str(uuid.uuid4())


def _optional_text(payload: Dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Movie {key} must be a string")
    return value


@dataclass(frozen=True)
class Movie:
    id: str
    title: str
    description: str | None = None
    rating: float = 0.0
    comment: str | None = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Movie":
        movie_id = payload.get("id")
        if not isinstance(movie_id, str) or not movie_id:
            raise ValueError("Movie id is required")

        title = payload.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ValueError("Movie title is required")

        rating_raw = payload.get("rating")
        # bool is an int subclass
        if isinstance(rating_raw, bool) or not isinstance(rating_raw, (int, float)):
            raise ValueError("Movie rating must be numeric")

        return cls(
            id=movie_id,
            title=title,
            description=_optional_text(payload, "description"),
            rating=float(rating_raw),
            comment=_optional_text(payload, "comment"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
