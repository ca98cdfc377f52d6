"""Movie / series decision for an extracted ParsedFile."""
import os
from typing import Optional

from mediarename.identify.models import ParsedFile
from mediarename.utils import LogLevel, logger


def classify(parsed: ParsedFile) -> None:
    """
    Mark `parsed` as a movie or a series, or leave it unclassified.

    A forced type always wins. Otherwise a year without season and episode
    means a movie, and a season together with an episode means a series.
    """
    opts = parsed.options
    logger.log(
        "identify.extracted",
        LogLevel.DEBUG,
        file=parsed.filename,
        year=parsed.year,
        season=parsed.season,
        episode=parsed.episode,
    )
    if opts.force_movie or (parsed.episode == "" and parsed.season == "" and parsed.year != ""):
        parsed.is_movie = True
        logger.log("identify.classified", LogLevel.DEBUG, file=parsed.filename, type="movie")
    elif opts.force_series or (parsed.episode != "" and parsed.season != ""):
        parsed.is_series = True
        logger.log("identify.classified", LogLevel.DEBUG, file=parsed.filename, type="series")


def parent_retry_name(parsed: ParsedFile) -> Optional[str]:
    """
    Name to identify an unclassified file by instead: its parent directory plus its extension.

    Returns None when there is no usable parent directory (none, the root,
    or a relative "." / "..") or when this file is itself the product of a
    retry.
    """
    if parsed.options.original_file:
        return None
    parent = os.path.basename(os.path.dirname(parsed.filepath))
    # An all-dot name would swallow the extension when split again
    if parent in ("", os.sep) or parent.strip(".") == "":
        return None
    return parent + parsed.extension
