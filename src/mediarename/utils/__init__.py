"""
A module providing constants, text helpers, the TMDb client and logging
for media identification tasks.

This module includes a collection of constants related to naming
templates and file types, the metadata provider used for lookups, and a
structured logging mechanism for safe and controlled outputs.
"""

from .constants import (
    ACTIONS,
    ADD_YEAR_TO_SERIES,
    COMPRESSED_EXTENSIONS,
    DEFAULT_MOVIE_FORMAT,
    DEFAULT_SERIES_FORMAT,
    MODES,
    MUSIC_EXTENSIONS,
    STATUS_DRY_RUN,
    STATUS_EXISTS,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    TMDB_API_KEY,
    TMDB_BASE_URL,
    VIDEO_EXTENSIONS,
)
from .logger import LogLevel

__all__ = [
    "ACTIONS",
    "ADD_YEAR_TO_SERIES",
    "COMPRESSED_EXTENSIONS",
    "DEFAULT_MOVIE_FORMAT",
    "DEFAULT_SERIES_FORMAT",
    "MODES",
    "MUSIC_EXTENSIONS",
    "STATUS_DRY_RUN",
    "STATUS_EXISTS",
    "STATUS_FAIL",
    "STATUS_OK",
    "STATUS_SKIP",
    "TMDB_API_KEY",
    "TMDB_BASE_URL",
    "VIDEO_EXTENSIONS",
    "LogLevel",
]
