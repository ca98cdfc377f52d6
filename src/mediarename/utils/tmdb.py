"""
TMDb API client for movie and TV metadata lookup.

This module provides the metadata provider used by the enrichment step. It
wraps The Movie Database API behind four calls (series search, movie search,
episode title, season names), handles transport errors and caches search
results in memory. Anything with the same four methods can stand in for the
client, see `MetadataProvider`.
"""
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

import requests

from . import constants
from . import logger
from .logger import LogLevel


class TMDbError(Exception):
    """Base exception for TMDb API errors."""

    pass


class TMDbAPIError(TMDbError):
    """Exception for API request failures."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TMDbNotFoundError(TMDbAPIError):
    """Exception for when content is not found."""

    pass


@dataclass(frozen=True)
class SeriesMatch:
    id: int
    name: str
    first_air_date: str = ""


@dataclass(frozen=True)
class MovieMatch:
    id: int
    title: str


@dataclass(frozen=True)
class SeasonName:
    ordinal: int
    name: str


class MetadataProvider(Protocol):
    """The lookup operations the enrichment step relies on."""

    def search_series(self, title: str, year: Optional[str] = None) -> Optional[SeriesMatch]:
        ...

    def search_movie(self, title: str, year: Optional[str] = None) -> Optional[MovieMatch]:
        ...

    def get_episode_title(self, tmdb_id: int, season: int, episode: int) -> Optional[str]:
        ...

    def get_season_names(self, tmdb_id: int) -> List[SeasonName]:
        ...


class TMDbClient:
    """Client for interacting with The Movie Database API."""

    def __init__(
            self,
            api_key: Optional[str] = None,
            base_url: Optional[str] = None,
            timeout: Optional[int] = None,
            session: Optional[requests.Session] = None,
    ):
        """Initialize the TMDb client with an API key."""
        self.api_key = api_key or constants.TMDB_API_KEY
        if not self.api_key:
            raise TMDbError("TMDb API key is required. Set TMDB_API_KEY environment variable.")

        self.base_url = (base_url or constants.TMDB_BASE_URL).rstrip("/")
        self.timeout = timeout or constants.TMDB_TIMEOUT
        self.session = session or requests.Session()
        self.session.params = {"api_key": self.api_key}

        # Thread-safe caching
        self._cache: Dict[str, Any] = {}
        self._cache_lock = threading.Lock()

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a request to the TMDb API and handle errors."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TMDbAPIError(f"Request failed: {e}")

        if response.status_code == 404:
            raise TMDbNotFoundError(f"Not found: {endpoint}", status_code=404)
        if response.status_code != 200:
            raise TMDbAPIError(f"TMDb returned HTTP {response.status_code} for {endpoint}", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise TMDbAPIError(f"Invalid JSON response: {e}")

        if "success" in data and not data["success"]:
            raise TMDbAPIError(f"TMDb API error: {data.get('status_message', 'Unknown error')}")

        return data

    def _cached(self, key: str, fetch):
        with self._cache_lock:
            if key in self._cache:
                return self._cache[key]
        result = fetch()
        with self._cache_lock:
            self._cache[key] = result
        return result

    def search_series(self, title: str, year: Optional[str] = None) -> Optional[SeriesMatch]:
        """
        Search TMDb for a TV series, optionally filtered by first air year.
        Returns the first result or None if nothing was found.
        """

        def fetch():
            params = {"query": title, "include_adult": "false"}
            if year:
                params["first_air_date_year"] = str(year)
            logger.log("tmdb.search", LogLevel.DEBUG, type="tv", title=title, year=year)
            results = self._make_request("search/tv", params).get("results", [])
            if not results:
                return None
            # Take the first result for now
            show = results[0]
            return SeriesMatch(
                id=show.get("id"),
                name=show.get("name", ""),
                first_air_date=show.get("first_air_date") or "",
            )

        return self._cached(f"tv:{title}:{year}", fetch)

    def search_movie(self, title: str, year: Optional[str] = None) -> Optional[MovieMatch]:
        """
        Search TMDb for a movie, optionally filtered by release year.
        Returns the first result or None if nothing was found.
        """

        def fetch():
            params = {"query": title, "include_adult": "false"}
            if year:
                params["year"] = str(year)
            logger.log("tmdb.search", LogLevel.DEBUG, type="movie", title=title, year=year)
            results = self._make_request("search/movie", params).get("results", [])
            if not results:
                return None
            movie = results[0]
            return MovieMatch(id=movie.get("id"), title=movie.get("title", ""))

        return self._cached(f"movie:{title}:{year}", fetch)

    def get_episode_title(self, tmdb_id: int, season: int, episode: int) -> Optional[str]:
        """Get the episode name, returning None if the episode is unknown."""
        try:
            data = self._make_request(f"tv/{tmdb_id}/season/{season}/episode/{episode}")
        except TMDbNotFoundError:
            logger.log("tmdb.episode.not_found", LogLevel.DEBUG, tmdb_id=tmdb_id, season=season, episode=episode)
            return None
        return data.get("name") or None

    def get_season_names(self, tmdb_id: int) -> List[SeasonName]:
        """Get the ordinal number and display name of every season of a series."""
        data = self._make_request(f"tv/{tmdb_id}")
        return [
            SeasonName(ordinal=s.get("season_number"), name=s.get("name", ""))
            for s in data.get("seasons", [])
            if s.get("season_number") is not None
        ]
