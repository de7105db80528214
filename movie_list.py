from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from data_store import MovieRepository
from models import Movie

logger = logging.getLogger(__name__)

LOADING = "loading"
READY = "ready"


@dataclass(frozen=True)
class MovieListState:
    status: str = LOADING
    movies: Tuple[Movie, ...] = ()

    @property
    def ready(self) -> bool:
        return self.status == READY


def _require_ready(state: MovieListState) -> None:
    if not state.ready:
        raise RuntimeError("Movie list has not finished loading")


def loaded(state: MovieListState, movies: Iterable[Movie]) -> MovieListState:
    return replace(state, status=READY, movies=tuple(movies))


def add_movie(state: MovieListState, movie: Movie) -> MovieListState:
    _require_ready(state)
    return replace(state, movies=(movie,) + state.movies)


def delete_movie(state: MovieListState, movie_id: str) -> MovieListState:
    _require_ready(state)
    for index, movie in enumerate(state.movies):
        if movie.id == movie_id:
            return replace(state, movies=state.movies[:index] + state.movies[index + 1:])
    return state


def sort_by_rating(state: MovieListState) -> MovieListState:
    _require_ready(state)
    # sorted() is stable, so equal ratings keep their order
    return replace(state, movies=tuple(sorted(state.movies, key=lambda m: m.rating, reverse=True)))


def reset_movies(state: MovieListState, defaults: Iterable[Movie]) -> MovieListState:
    _require_ready(state)
    return replace(state, movies=tuple(defaults))


def replace_movie(state: MovieListState, updated: Movie) -> MovieListState:
    _require_ready(state)
    for index, movie in enumerate(state.movies):
        if movie.id == updated.id:
            movies = list(state.movies)
            movies[index] = updated
            return replace(state, movies=tuple(movies))
    return state


class MovieListController:
    """Owns the movie list and is the only writer to the repository.

    Loading and saving run on a single worker thread, so each save finishes
    before the next one starts. Callers never wait on a save.
    """

    def __init__(self, repo: MovieRepository, executor: ThreadPoolExecutor | None = None) -> None:
        self.repo = repo
        self.state = MovieListState()
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="movie-store")
        self._pending: Future | None = None

    @property
    def movies(self) -> Tuple[Movie, ...]:
        return self.state.movies

    def start_loading(self) -> Future:
        return self.executor.submit(self.repo.load_movies)

    def finish_loading(self, movies: Iterable[Movie]) -> None:
        self.state = loaded(self.state, movies)

    def load_blocking(self) -> None:
        self.finish_loading(self.start_loading().result())

    def add(self, movie: Movie) -> bool:
        return self._apply(add_movie(self.state, movie))

    def delete(self, movie_id: str) -> bool:
        return self._apply(delete_movie(self.state, movie_id))

    def sort(self) -> bool:
        return self._apply(sort_by_rating(self.state))

    def reset(self) -> bool:
        logger.info("Resetting to sample movies")
        return self._apply(reset_movies(self.state, self.repo.default_movies()))

    def update(self, movie: Movie) -> bool:
        return self._apply(replace_movie(self.state, movie))

    def _apply(self, new_state: MovieListState) -> bool:
        if new_state is self.state:
            return False
        self.state = new_state
        self._schedule_save(new_state.movies)
        return True

    def _schedule_save(self, snapshot: Tuple[Movie, ...]) -> None:
        logger.debug("Scheduling save of %d movies", len(snapshot))
        future = self.executor.submit(self.repo.save_movies, snapshot)
        future.add_done_callback(self._on_saved)
        self._pending = future

    def _on_saved(self, future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error("Saving movies failed", exc_info=exc)
            return
        logger.debug("Movies saved")

    def wait_for_saves(self) -> None:
        pending = self._pending
        if pending is None:
            return
        # the worker runs in submission order, so the last save is the latest to finish
        wait([pending])

    def close(self) -> None:
        self.wait_for_saves()
        self.executor.shutdown(wait=True)
