import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import Movie, new_movie_id


def test_new_movie_ids_are_unique():
    ids = {new_movie_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(ids)


def test_from_dict_missing_optional_fields_are_none():
    movie = Movie.from_dict({'id': 'a', 'title': 'Alien', 'rating': 4})
    assert movie.description is None
    assert movie.comment is None
    assert movie.rating == 4.0
    assert isinstance(movie.rating, float)


def test_from_dict_keeps_empty_comment():
    movie = Movie.from_dict({'id': 'a', 'title': 'Alien', 'rating': 4.0, 'comment': ''})
    assert movie.comment == ''


@pytest.mark.parametrize('payload', [
    {'title': 'Alien', 'rating': 4.0},
    {'id': 'a', 'title': '   ', 'rating': 4.0},
    {'id': 'a', 'title': 'Alien'},
    {'id': 'a', 'title': 'Alien', 'rating': '4.0'},
    {'id': 'a', 'title': 'Alien', 'rating': True},
    {'id': 'a', 'title': 'Alien', 'rating': 4.0, 'description': 12},
    {'id': 7, 'title': 'Alien', 'rating': 4.0},
])
def test_from_dict_rejects_bad_shape(payload):
    with pytest.raises(ValueError):
        Movie.from_dict(payload)


def test_to_dict_writes_all_fields():
    movie = Movie(id='a', title='Alien', rating=4.0)
    assert movie.to_dict() == {
        'id': 'a',
        'title': 'Alien',
        'description': None,
        'rating': 4.0,
        'comment': None,
    }


def test_movie_is_frozen():
    movie = Movie(id='a', title='Alien')
    with pytest.raises(AttributeError):
        movie.rating = 5.0
