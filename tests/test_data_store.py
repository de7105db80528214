import json
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from data_store import DEFAULT_MOVIES, MovieRepository, PreferencesStore
from models import Movie


def test_load_without_stored_value_returns_defaults(repo):
    movies = repo.load_movies()
    assert len(movies) == 8
    assert [m.title for m in movies] == [title for title, _, _ in DEFAULT_MOVIES]
    assert all(m.id for m in movies)
    assert len({m.id for m in movies}) == 8
    assert all(m.comment is None for m in movies)


def test_load_empty_string_returns_defaults(repo, prefs):
    prefs.set_string('movies_v1', '')
    assert len(repo.load_movies()) == 8


@pytest.mark.parametrize('raw', [
    'not json at all',
    '{"id": "a"}',
    '42',
    '[1, 2]',
    '[{"id": "a", "title": "Alien", "rating": 4.0}, {"id": "b"}]',
])
def test_load_corrupt_value_returns_defaults(repo, prefs, raw):
    prefs.set_string('movies_v1', raw)
    movies = repo.load_movies()
    assert len(movies) == 8
    assert movies[0].title == 'Inception Mind Heist'


def test_load_unreadable_prefs_file_returns_defaults(tmp_path):
    path = tmp_path / 'prefs.json'
    path.write_text('{broken', encoding='utf-8')
    repo = MovieRepository(PreferencesStore(path))
    assert len(repo.load_movies()) == 8


def test_save_then_load_round_trips(repo):
    movies = [
        Movie(id='1', title='Alien', description=None, rating=4.0, comment=None),
        Movie(id='2', title='Heat', description='Heist', rating=3.5, comment=''),
        Movie(id='3', title='Up', description='Balloons', rating=5.0, comment='Cried twice'),
    ]
    repo.save_movies(movies)
    assert repo.load_movies() == movies


def test_saved_format_is_a_json_list_of_records(repo, prefs):
    repo.save_movies([Movie(id='1', title='Alien', rating=4.0)])
    payload = json.loads(prefs.get_string('movies_v1'))
    assert payload == [
        {'id': '1', 'title': 'Alien', 'description': None, 'rating': 4.0, 'comment': None}
    ]


def test_save_empty_list_loads_empty_list(repo):
    repo.save_movies([])
    assert repo.load_movies() == []


def test_default_movies_get_fresh_ids(repo):
    first = {m.id for m in repo.default_movies()}
    second = {m.id for m in repo.default_movies()}
    assert not first & second


def test_save_propagates_storage_errors(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('', encoding='utf-8')
    repo = MovieRepository(PreferencesStore(blocker / 'prefs.json'))
    with pytest.raises(OSError):
        repo.save_movies([Movie(id='1', title='Alien')])


def test_settings_default_and_round_trip(repo):
    assert repo.load_settings() == {'dark_mode': True}
    repo.save_settings({'dark_mode': False})
    assert repo.load_settings() == {'dark_mode': False}


def test_settings_and_movies_share_the_prefs_file(repo, prefs):
    repo.save_movies([Movie(id='1', title='Alien')])
    repo.save_settings({'dark_mode': False})
    assert repo.load_movies()[0].title == 'Alien'
    assert prefs.get_bool('dark_mode', True) is False


def test_prefs_get_string_ignores_non_strings(prefs):
    prefs.set_bool('flag', True)
    assert prefs.get_string('flag') is None
    assert prefs.get_string('missing') is None


def test_prefs_write_leaves_no_temp_files(tmp_path):
    prefs = PreferencesStore(tmp_path / 'prefs.json')
    prefs.set_string('a', 'x')
    assert sorted(p.name for p in tmp_path.iterdir()) == ['prefs.json']


def test_load_prefs_file_with_invalid_utf8_returns_defaults(tmp_path):
    path = tmp_path / 'prefs.json'
    path.write_bytes(b'{"movies_v1": "\xff\xfe"}')
    repo = MovieRepository(PreferencesStore(path))
    movies = repo.load_movies()
    assert len(movies) == 8
    assert repo.load_settings() == {'dark_mode': True}


def test_save_replaces_prefs_file_with_invalid_utf8(tmp_path):
    path = tmp_path / 'prefs.json'
    path.write_bytes(b'\xff\xfe\x00garbage')
    repo = MovieRepository(PreferencesStore(path))
    repo.save_movies([Movie(id='1', title='Alien', rating=4.0)])
    assert repo.load_movies() == [Movie(id='1', title='Alien', rating=4.0)]
