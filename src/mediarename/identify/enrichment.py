"""
Optional metadata enrichment of an identified file.

When lookups are enabled the locally derived name is replaced by the
canonical title from the metadata provider, a missing series year is filled
in from the first air date and the episode title is fetched. A series that
uses a year as its season number is mapped back to the real season number.
Provider failures are never fatal: they are logged and the local values stay.
"""
from typing import Optional

from mediarename.identify.models import ParsedFile
from mediarename.utils import LogLevel, file_util, logger
from mediarename.utils.tmdb import MetadataProvider, TMDbClient, TMDbError


def default_provider() -> Optional[MetadataProvider]:
    """Build a TMDb client from the environment, or None when that is not possible."""
    try:
        return TMDbClient()
    except TMDbError as e:
        logger.log("enrich.unavailable", LogLevel.WARN, error=str(e))
        return None


def enrich(parsed: ParsedFile, provider: MetadataProvider) -> None:
    """Overwrite name, id and (for series) year and episode title with provider data."""
    year = parsed.year or None
    logger.log("enrich.lookup", LogLevel.DEBUG, title=parsed.clean_name, year=parsed.year)

    if parsed.is_series:
        try:
            show = provider.search_series(parsed.clean_name, year)
        except TMDbError as e:
            logger.log("enrich.error", LogLevel.WARN, name=parsed.clean_name, error=str(e))
            return
        if show is None:
            logger.log("enrich.no_match", LogLevel.DEBUG, name=parsed.clean_name, type="tv")
            return

        parsed.external_id = show.id
        parsed.external_name = show.name
        parsed.clean_name = show.name
        if show.first_air_date and parsed.year == "":
            parsed.year = show.first_air_date.split("-")[0]

        if parsed.season != "" and parsed.episode != "":
            _fetch_episode_name(parsed, provider)

    elif parsed.is_movie:
        try:
            movie = provider.search_movie(parsed.clean_name, year)
        except TMDbError as e:
            logger.log("enrich.error", LogLevel.WARN, name=parsed.clean_name, error=str(e))
            return
        if movie is None:
            logger.log("enrich.no_match", LogLevel.DEBUG, name=parsed.clean_name, type="movie")
            return

        parsed.external_id = movie.id
        parsed.external_name = movie.title
        parsed.clean_name = movie.title

    logger.log(
        "enrich.match",
        LogLevel.DEBUG,
        external_id=parsed.external_id,
        external_name=parsed.external_name,
    )


def _fetch_episode_name(parsed: ParsedFile, provider: MetadataProvider) -> None:
    if not (parsed.season.isdigit() and parsed.episode.isdigit()):
        return
    season, episode = int(parsed.season), int(parsed.episode)
    try:
        title = provider.get_episode_title(parsed.external_id, season, episode)
    except TMDbError as e:
        logger.log("enrich.episode.error", LogLevel.DEBUG, season=season, episode=episode, error=str(e))
        return
    if title:
        parsed.episode_name = file_util.sanitize_episode_title(title)
        logger.log("enrich.episode", LogLevel.DEBUG, episode_name=parsed.episode_name, season=season, episode=episode)
    else:
        logger.log("enrich.episode.no_match", LogLevel.DEBUG, season=season, episode=episode)


def reconcile_year_as_season(parsed: ParsedFile, provider: Optional[MetadataProvider]) -> None:
    """
    Translate a year used as season number ("S2019E05") to the series' real season.

    Needs a provider match; without lookups the year is kept and a warning is
    emitted instead.
    """
    if not parsed.has_year_as_season:
        return
    if not parsed.options.lookup or provider is None:
        logger.log(
            "enrich.year_as_season.skip",
            LogLevel.WARN,
            msg="Season is a year but no lookup is available, keeping it as is",
            season=parsed.season,
        )
        return
    if parsed.external_id <= 0:
        logger.log("enrich.year_as_season.no_match", LogLevel.WARN, season=parsed.season)
        return

    try:
        seasons = provider.get_season_names(parsed.external_id)
    except TMDbError as e:
        logger.log("enrich.year_as_season.error", LogLevel.ERROR, external_id=parsed.external_id, error=str(e))
        return

    wanted = f"Season {parsed.season}"
    for season in seasons:
        if season.name == wanted:
            logger.log("enrich.year_as_season", LogLevel.DEBUG, season=parsed.season, ordinal=season.ordinal)
            parsed.season = f"{season.ordinal:02d}"
            return

    logger.log("enrich.year_as_season.no_match", LogLevel.WARN, season=parsed.season)
