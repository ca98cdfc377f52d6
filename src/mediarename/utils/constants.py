"""
Constants and configuration settings for media identification and renaming.

This module contains the values shared by the identification engine, the
renderer and the file operation executor: recognised file extensions, the
default naming templates, the list of ambiguous series names, the TMDb
connection settings and the executor defaults. Values that depend on the
environment are read once at import time (a local `.env` file is honoured).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Default naming templates
DEFAULT_MOVIE_FORMAT = "{n} ({y})/{n} ({y}) {r}"
DEFAULT_SERIES_FORMAT = "{n}/Season.{s}/{n}.S{s}E{e}.{r}"

# Accepted file extensions
VIDEO_EXTENSIONS = {".mp4", ".mkv", ".mov", ".avi", ".webm", ".wmv", ".mpg", ".mpeg"}
MUSIC_EXTENSIONS = {".mp3", ".flac", ".3pg", ".aac", ".alac", ".opus", ".ogg", ".wav", ".wmv", ".ape"}
COMPRESSED_EXTENSIONS = {".rar", ".zip", ".tar", ".bz2", ".gz"}

# Series that exist several times under the same name (remakes, reboots)
ADD_YEAR_TO_SERIES = frozenset({"The Flash", "Doctor Who", "Magnum P.I.", "Charmed"})

# TMDb API configuration
TMDB_API_KEY = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
TMDB_TIMEOUT = int(os.getenv("TMDB_TIMEOUT", "10"))

# Executor settings
ACTIONS = ("rename", "symlink", "hardlink", "copy", "move")
MODES = ("dry-run", "interactive", "force")
DEFAULT_ACTION = "rename"
DEFAULT_MODE = "dry-run"
MOVIE_FOLDER = os.getenv("MEDIARENAME_MOVIE_FOLDER", str(Path.home() / "media" / "Movies"))
SERIES_FOLDER = os.getenv("MEDIARENAME_SERIES_FOLDER", str(Path.home() / "media" / "TV Shows"))
MIN_FILE_SIZE_MB = int(os.getenv("MEDIARENAME_MIN_FILE_SIZE", "120"))

# Processing status codes
STATUS_OK = "OK"
STATUS_SKIP = "SKIP"
STATUS_FAIL = "FAIL"
STATUS_EXISTS = "EXISTS"
STATUS_DRY_RUN = "DRY-RUN"
