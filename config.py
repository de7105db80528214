import logging
from pathlib import Path


class Config:
    BASE_DIR = Path(__file__).resolve().parent

    PREFS_FILE = BASE_DIR / "movie_ratings_prefs.json"
    MOVIES_KEY = "movies_v1"
    DARK_MODE_KEY = "dark_mode"
    DEFAULT_DARK_MODE = True

    WINDOW_TITLE = "Movie Ratings"
    WINDOW_GEOMETRY = "720x760"

    LOG_LEVEL = logging.INFO
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # leading tile on each list row
    POSTER_SIZE = (56, 80)

    DEFAULT_NEW_RATING = 3.0
    MIN_PICKER_RATING = 0.5
    STAR_COUNT = 5
