"""
Module for extracting structured attributes from a raw filename.

The extractor walks the rule table once over the dotted base name and fills
in year, season, episode, quality, resolution and the anime release group.
The technical info tail is taken from the same untouched base name, before
the normalizer starts replacing tokens.
"""

from mediarename.identify import patterns
from mediarename.identify.models import ParsedFile
from mediarename.utils import LogLevel, logger


def extract_tokens(parsed: ParsedFile, rules=patterns.RULES) -> None:
    """
    Apply every rule to `parsed.filename` in the order of `rules`, first match wins.

    Season and episode numbers are zero-padded to two digits. A year that is
    identical to an already found year-as-season value is ignored, and an
    anime style episode ("Show - 01") is only used when no regular episode
    marker was found, in which case the season becomes "00".
    """
    filename = parsed.filename
    for rule in rules:
        match = rule.search(filename)
        if not match:
            continue

        if rule.name == patterns.YEAR_AS_SEASON:
            logger.log("identify.year_as_season", LogLevel.DEBUG, year=match.group(2))
            parsed.has_year_as_season = True
            parsed.season = match.group(2)
        elif rule.name == patterns.YEAR:
            if parsed.season == match.group(2):
                logger.log(
                    "identify.year_collision",
                    LogLevel.WARN,
                    msg="Found a year equal to the season, ignoring the year",
                    file=filename,
                    year=match.group(2),
                )
            else:
                parsed.year = match.group(2)
        elif rule.name == patterns.SEASON:
            if parsed.season == "":
                parsed.season = match.group(2).zfill(2)
            else:
                logger.log("identify.season.skip", LogLevel.TRACE, season=parsed.season)
        elif rule.name == patterns.EPISODE:
            parsed.episode = match.group(1).zfill(2)
        elif rule.name == patterns.QUALITY:
            parsed.quality = match.group(1)
        elif rule.name == patterns.RESOLUTION:
            parsed.resolution = match.group(2)
        elif rule.name == patterns.GROUP_ANIME:
            parsed.anime_group = match.group(1)
        elif rule.name == patterns.EPISODE_ANIME:
            if parsed.episode == "":
                parsed.episode = match.group(0).strip(" ")
                parsed.season = "00"


def extract_technical_info(filename: str) -> str:
    """
    Return the tail of `filename` that holds resolution, quality, codec and audio tags.

    The earliest hit of any technical rule marks the start; from there the
    start is moved back to just after the nearest separator ('.', '-', ' ')
    so a partially matched token is kept whole. The tail is returned verbatim,
    or "" when no technical tag is present.
    """
    match_start = -1
    for name in patterns.TECHNICAL_RULES:
        match = patterns.RULES_BY_NAME[name].search(filename)
        if match and (match_start == -1 or match.start() < match_start):
            match_start = match.start()

    if match_start == -1:
        return ""

    tech_start = match_start
    for i in range(match_start - 1, -1, -1):
        if filename[i] in ".- ":
            tech_start = i + 1
            break

    technical_info = filename[tech_start:]
    logger.log("identify.technical_info", LogLevel.DEBUG, technical_info=technical_info)
    return technical_info
