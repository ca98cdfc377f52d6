"""Tests for the TMDb client, with a mocked HTTP session."""

from unittest.mock import MagicMock

import pytest
import requests

from mediarename.utils import constants
from mediarename.utils.tmdb import (
    MovieMatch,
    SeasonName,
    SeriesMatch,
    TMDbAPIError,
    TMDbClient,
    TMDbError,
    TMDbNotFoundError,
)

BASE_URL = "https://tmdb.example/3"


def _response(status_code=200, payload=None):
    response = MagicMock(status_code=status_code)
    response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return TMDbClient(api_key="secret", base_url=BASE_URL, timeout=3, session=session)


class TestConstruction:

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(constants, "TMDB_API_KEY", None)
        with pytest.raises(TMDbError):
            TMDbClient(session=MagicMock())

    def test_key_sent_with_every_request(self, client, session):
        assert session.params == {"api_key": "secret"}


class TestSearch:

    def test_series_first_result(self, client, session):
        session.get.return_value = _response(payload={"results": [
            {"id": 1, "name": "Angel", "first_air_date": "1999-10-05"},
            {"id": 2, "name": "Angel Beats!", "first_air_date": "2010-04-03"},
        ]})

        assert client.search_series("Angel", "1999") == SeriesMatch(1, "Angel", "1999-10-05")
        args, kwargs = session.get.call_args
        assert args[0] == f"{BASE_URL}/search/tv"
        assert kwargs["params"]["query"] == "Angel"
        assert kwargs["params"]["first_air_date_year"] == "1999"
        assert kwargs["timeout"] == 3

    def test_series_without_year(self, client, session):
        session.get.return_value = _response(payload={"results": [{"id": 1, "name": "Angel"}]})

        assert client.search_series("Angel") == SeriesMatch(1, "Angel", "")
        _, kwargs = session.get.call_args
        assert "first_air_date_year" not in kwargs["params"]

    def test_movie(self, client, session):
        session.get.return_value = _response(payload={"results": [{"id": 604, "title": "The Matrix Revolutions"}]})

        assert client.search_movie("The Matrix Revolutions", "2003") == MovieMatch(604, "The Matrix Revolutions")
        args, kwargs = session.get.call_args
        assert args[0] == f"{BASE_URL}/search/movie"
        assert kwargs["params"]["year"] == "2003"

    def test_no_results(self, client, session):
        session.get.return_value = _response(payload={"results": []})
        assert client.search_movie("Nothing Like This") is None

    def test_results_are_cached(self, client, session):
        session.get.return_value = _response(payload={"results": [{"id": 1, "name": "Angel"}]})

        client.search_series("Angel")
        client.search_series("Angel")
        client.search_series("Angel", "1999")
        assert session.get.call_count == 2


class TestEpisodesAndSeasons:

    def test_episode_title(self, client, session):
        session.get.return_value = _response(payload={"name": "Habeas Corpses"})

        assert client.get_episode_title(1, 4, 12) == "Habeas Corpses"
        assert session.get.call_args[0][0] == f"{BASE_URL}/tv/1/season/4/episode/12"

    def test_unknown_episode(self, client, session):
        session.get.return_value = _response(status_code=404)
        assert client.get_episode_title(1, 4, 99) is None

    def test_season_names(self, client, session):
        session.get.return_value = _response(payload={"seasons": [
            {"season_number": 0, "name": "Specials"},
            {"season_number": 1, "name": "Season 2018"},
        ]})

        assert client.get_season_names(7) == [SeasonName(0, "Specials"), SeasonName(1, "Season 2018")]


class TestErrors:

    def test_transport_error(self, client, session):
        session.get.side_effect = requests.exceptions.ConnectionError("connection refused")
        with pytest.raises(TMDbAPIError):
            client.search_series("Angel")

    def test_http_error_keeps_status(self, client, session):
        session.get.return_value = _response(status_code=500)
        with pytest.raises(TMDbAPIError) as excinfo:
            client.get_season_names(7)
        assert excinfo.value.status_code == 500

    def test_not_found_outside_episodes(self, client, session):
        session.get.return_value = _response(status_code=404)
        with pytest.raises(TMDbNotFoundError):
            client.get_season_names(7)

    def test_invalid_json(self, client, session):
        response = _response()
        response.json.side_effect = ValueError("Expecting value")
        session.get.return_value = response
        with pytest.raises(TMDbAPIError):
            client.search_movie("Angel")

    def test_unsuccessful_payload(self, client, session):
        session.get.return_value = _response(payload={"success": False, "status_message": "Invalid API key"})
        with pytest.raises(TMDbAPIError, match="Invalid API key"):
            client.search_movie("Angel")
