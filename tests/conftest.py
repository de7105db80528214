import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from data_store import MovieRepository, PreferencesStore


@pytest.fixture
def prefs(tmp_path):
    return PreferencesStore(tmp_path / "prefs.json")


@pytest.fixture
def repo(prefs):
    return MovieRepository(prefs)
