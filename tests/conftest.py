import pytest

from mediarename.utils import LogLevel, logger
from mediarename.utils.tmdb import TMDbAPIError


class FakeProvider:
    """In-memory stand-in for the TMDb client, recording every call."""

    def __init__(self, series=None, movie=None, episode_titles=None, seasons=None, error=False):
        self.series = series
        self.movie = movie
        self.episode_titles = episode_titles or {}
        self.seasons = seasons or []
        self.error = error
        self.calls = []

    def _maybe_fail(self):
        if self.error:
            raise TMDbAPIError("Request failed: connection refused")

    def search_series(self, title, year=None):
        self.calls.append(("search_series", title, year))
        self._maybe_fail()
        return self.series

    def search_movie(self, title, year=None):
        self.calls.append(("search_movie", title, year))
        self._maybe_fail()
        return self.movie

    def get_episode_title(self, tmdb_id, season, episode):
        self.calls.append(("get_episode_title", tmdb_id, season, episode))
        self._maybe_fail()
        return self.episode_titles.get((season, episode))

    def get_season_names(self, tmdb_id):
        self.calls.append(("get_season_names", tmdb_id))
        self._maybe_fail()
        return self.seasons


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture(autouse=True)
def quiet_logs():
    previous = logger.get_log_level()
    logger.set_log_level(LogLevel.ERROR)
    yield
    logger.set_log_level(previous)
