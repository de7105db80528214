from __future__ import annotations

from dataclasses import replace

from models import Movie, new_movie_id

TITLE_REQUIRED = "Enter a title"


def validate_title(text: str | None) -> str | None:
    if text is None or not text.strip():
        return TITLE_REQUIRED
    return None


def build_new_movie(title: str, description: str | None, rating: float) -> Movie:
    """Create a movie from the add form; blank descriptions are stored as None."""
    error = validate_title(title)
    if error:
        raise ValueError(error)
    description = (description or "").strip()
    return Movie(
        id=new_movie_id(),
        title=title.strip(),
        description=description or None,
        rating=float(rating),
    )


def apply_details(movie: Movie, rating: float, comment: str | None) -> Movie:
    # an emptied comment stays "" rather than None
    return replace(movie, rating=float(rating), comment=(comment or "").strip())
