"""
Data types shared by every identification step.

`Options` is the immutable per-call configuration; `ParsedFile` is the record
that the extractor, classifier, normalizer and enrichment step fill in one
after the other, and that the renderer and the file executor read afterwards.
Empty strings mean "absent" for every textual attribute.
"""
import os
from dataclasses import dataclass, field

from mediarename.utils import DEFAULT_MOVIE_FORMAT, DEFAULT_SERIES_FORMAT, MUSIC_EXTENSIONS, VIDEO_EXTENSIONS
from mediarename.utils import LogLevel, logger


@dataclass(frozen=True)
class Options:
    """
    Configuration for a single identification.

    Attributes:
    - lookup: query the metadata provider for canonical names.
    - force_movie / force_series: bypass signal-based classification.
    - movie_format / series_format: target name templates.
    - original_file: path of the real file when identifying through its
      parent directory; a non-empty value also disables a further retry.
    """
    lookup: bool = False
    force_movie: bool = False
    force_series: bool = False
    movie_format: str = DEFAULT_MOVIE_FORMAT
    series_format: str = DEFAULT_SERIES_FORMAT
    original_file: str = ""


@dataclass
class ParsedFile:
    filepath: str
    options: Options = field(default_factory=Options)
    original_file: str = ""
    filename: str = ""
    extension: str = ""
    year: str = ""
    season: str = ""
    episode: str = ""
    episode_name: str = ""
    external_name: str = ""
    clean_name: str = ""
    quality: str = ""
    resolution: str = ""
    technical_info: str = ""
    anime_group: str = ""
    is_series: bool = False
    is_movie: bool = False
    external_id: int = 0
    has_year_as_season: bool = field(default=False, repr=False)

    @classmethod
    def from_path(cls, file_path: str, options: Options) -> "ParsedFile":
        """Split `file_path` into base name and extension; nothing is matched yet."""
        stem, extension = os.path.splitext(os.path.basename(file_path))
        return cls(
            filepath=file_path,
            options=options,
            original_file=options.original_file,
            filename=stem,
            extension=extension,
        )

    def __str__(self) -> str:
        return (
            f"Year: {self.year}, Season: {self.season}, Episode: {self.episode}, "
            f"EpisodeName: {self.episode_name}, TechnicalInfo: {self.technical_info}, "
            f"Name: {self.clean_name}, Movie: {self.is_movie}, Series: {self.is_series}"
        )

    @property
    def is_video(self) -> bool:
        return self.extension.lower() in VIDEO_EXTENSIONS

    @property
    def is_music(self) -> bool:
        return not self.is_video and self.extension.lower() in MUSIC_EXTENSIONS

    @property
    def is_classified(self) -> bool:
        return self.is_movie or self.is_series

    @property
    def full_name(self) -> str:
        """The original name of the file without the full path."""
        return self.filename + self.extension

    @property
    def season_number(self) -> int:
        return _to_int(self.season, "season")

    @property
    def episode_number(self) -> int:
        return _to_int(self.episode, "episode")

    def source_path(self) -> str:
        """The path file operations act on: the real file, even after a parent directory retry."""
        return self.original_file or self.filepath


def _to_int(value: str, attribute: str) -> int:
    try:
        return int(value)
    except ValueError:
        logger.log("identify.not_a_number", LogLevel.WARN, attribute=attribute, value=value)
        return 0
