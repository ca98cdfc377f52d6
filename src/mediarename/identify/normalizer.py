"""
Derives the human readable title of a classified file.

The normalizer starts from the base name with dots turned into spaces and
removes every technical token the rule table recognises, in table order.
Anime releases keep their irregular punctuation; everything else is cut at
the first gap left behind by the removed tokens and title-cased.
"""
import re

from mediarename.identify import patterns
from mediarename.identify.models import ParsedFile
from mediarename.utils import ADD_YEAR_TO_SERIES, LogLevel, file_util, logger

_TRAILING_BLOCK_REGEX = re.compile(r"\s{2,}.*")

# A removal may not shrink the name below this many characters
MIN_NAME_LENGTH = 2


def _remove(rule: patterns.Rule, match: re.Match, name: str) -> str:
    if rule.name == patterns.EPISODE:
        return name.replace(match.group(0), " ")
    if rule.name in (patterns.SEASON, patterns.GROUP_ANIME):
        return name.replace(match.group(1), " ")
    return rule.pattern.sub(" ", name)


def strip_tokens(name: str, is_movie: bool, is_series: bool, rules=patterns.RULES) -> str:
    """
    Remove every recognised token from `name`.

    Movies keep season, episode and anime markers, unclassified names are
    left alone. A removal that would leave fewer than two characters is
    undone, since the match most likely was the title itself. `rules` is
    evaluated in the given order.
    """
    if not (is_movie or is_series):
        return name

    for rule in rules:
        if is_movie and rule.name in patterns.MOVIE_EXCLUDED:
            continue
        match = rule.search(name)
        if not match:
            continue
        previous = name
        name = _remove(rule, match, name)
        if len(name.strip(" ")) < MIN_NAME_LENGTH:
            logger.log(
                "normalize.revert",
                LogLevel.DEBUG,
                msg="Removing the match left almost nothing of the name, keeping the previous one",
                rule=rule.name,
                new_name=name,
                old_name=previous,
            )
            name = previous
    return name


def clean_name(parsed: ParsedFile) -> str:
    """Build the display title for `parsed` from its base name."""
    name = parsed.filename.replace(".", " ")
    name = strip_tokens(name, parsed.is_movie, parsed.is_series)
    name = name.strip(" ")

    # Anime names are too irregular for the trailing block cleanup
    if not parsed.anime_group:
        logger.log("normalize.cleanup", LogLevel.TRACE, clean_name=name)
        name = _TRAILING_BLOCK_REGEX.sub("", name)
        name = name.strip(" -")
        name = file_util.title_case(name)

    return file_util.strip_colons(name)


def disambiguate(parsed: ParsedFile) -> None:
    """Append the year to series names that exist more than once, e.g. "Charmed (2018)"."""
    if parsed.is_series and parsed.year and parsed.clean_name in ADD_YEAR_TO_SERIES:
        logger.log("normalize.disambiguate", LogLevel.DEBUG, name=parsed.clean_name, year=parsed.year)
        parsed.clean_name = f"{parsed.clean_name} ({parsed.year})"
