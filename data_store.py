from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from typing import Any, Dict, Iterable, List

from config import Config
from models import Movie, new_movie_id

logger = logging.getLogger(__name__)

DEFAULT_MOVIES = (
    ("Inception Mind Heist", "Dream enters mind", 4.5),
    ("The Matrix Reloaded", "Virtual world battle", 4.0),
    ("Interstellar Space Journey", "Beyond stars travel", 4.2),
    ("The Dark Knight", "Hero saves city", 4.5),
    ("Back To Future", "Time travel adventure", 4.0),
    ("Forrest Gump Story", "Life is journey", 4.2),
    ("Jurassic Park Ride", "Dinosaurs on island", 3.8),
    ("Star Wars Saga", "Space battle epic", 4.7),
)


class PreferencesStore:
    """Key-value preferences persisted as a single JSON object on disk.

    Reads never raise: a missing, unreadable or malformed file reads as empty.
    Writes replace the whole file atomically and let ``OSError`` propagate.
    """

    def __init__(self, path: str | os.PathLike = Config.PREFS_FILE) -> None:
        self.path = os.fspath(path)
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        except (OSError, ValueError) as exc:
            logger.warning("Could not read preferences from %s: %s", self.path, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring preferences file %s: top level is not an object", self.path)
            return {}
        return payload

    def _write_all(self, payload: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path) or "."
        os.makedirs(directory, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as temp:
                json.dump(payload, temp, indent=2)
            os.replace(temp_path, self.path)
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

    def _set(self, key: str, value: Any) -> None:
        with self._lock:
            payload = self._read_all()
            payload[key] = value
            self._write_all(payload)

    def get_string(self, key: str) -> str | None:
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_string(self, key: str, value: str) -> None:
        self._set(key, value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        with self._lock:
            value = self._read_all().get(key)
        return value if isinstance(value, bool) else default

    def set_bool(self, key: str, value: bool) -> None:
        self._set(key, bool(value))


class MovieRepository:
    def __init__(self, prefs: PreferencesStore | None = None, key: str = Config.MOVIES_KEY) -> None:
        self.prefs = prefs if prefs is not None else PreferencesStore()
        self.key = key

    def load_movies(self) -> List[Movie]:
        raw = self.prefs.get_string(self.key)
        if not raw:
            logger.info("No stored movies under %r, using sample movies", self.key)
            return self.default_movies()
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError("Stored movies are not a list")
            movies: List[Movie] = []
            for item in payload:
                if not isinstance(item, dict):
                    raise ValueError("Stored movie is not an object")
                movies.append(Movie.from_dict(item))
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too
            logger.warning("Stored movies are corrupt (%s), using sample movies", exc)
            return self.default_movies()
        return movies

    def save_movies(self, movies: Iterable[Movie]) -> None:
        payload = [movie.to_dict() for movie in movies]
        self.prefs.set_string(self.key, json.dumps(payload))

    def default_movies(self) -> List[Movie]:
        return [
            Movie(id=new_movie_id(), title=title, description=description, rating=rating)
            for title, description, rating in DEFAULT_MOVIES
        ]

    def load_settings(self) -> dict:
        return {"dark_mode": self.prefs.get_bool(Config.DARK_MODE_KEY, Config.DEFAULT_DARK_MODE)}

    def save_settings(self, settings: dict) -> None:
        self.prefs.set_bool(Config.DARK_MODE_KEY, bool(settings.get("dark_mode", Config.DEFAULT_DARK_MODE)))
