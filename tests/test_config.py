import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import Config


def test_config_defaults():
    assert Config.MOVIES_KEY == 'movies_v1'
    assert Config.DEFAULT_NEW_RATING == 3.0
    assert Config.MIN_PICKER_RATING == 0.5
    assert Config.STAR_COUNT == 5


def test_config_prefs_file():
    assert Config.PREFS_FILE.parent == Config.BASE_DIR
    assert Config.PREFS_FILE.suffix == '.json'
