"""
The ordered rule table used to pick filenames apart.

Each rule is a compiled pattern with a name. The table is evaluated top to
bottom by both the token extractor and the name normalizer, and the order is
significant: a year-as-season token has to be seen before the plain year so
the two can be told apart, the season has to be known before the episode,
and so on. Group meanings per rule:

- year_as_season: group 2 is the 19xx/20xx number following the "S".
- year: group 2 is the four digit year, group 1 includes surrounding brackets.
- season: group 1 is the optional "S" plus digits, group 2 only the digits.
- episode: group 1 is the two digit episode number.
- episode_anime: the whole match is the episode (padded by separators).
- group_anime: group 1 is the bracketed release group, group 2 the title.
- resolution: group 2 is the resolution ("720p").
- quality: group 1 is the source tag ("HDTV", "WEB-DL").
- group: group 2 is the trailing release group.
- audio, codec, proper, repack, hardcoded, extended, internal: whole match.
"""
import re
from dataclasses import dataclass
from typing import Tuple

YEAR_AS_SEASON = "year_as_season"
YEAR = "year"
SEASON = "season"
EPISODE = "episode"
EPISODE_ANIME = "episode_anime"
GROUP_ANIME = "group_anime"
AUDIO = "audio"
RESOLUTION = "resolution"
QUALITY = "quality"
CODEC = "codec"
GROUP = "group"
PROPER = "proper"
REPACK = "repack"
HARDCODED = "hardcoded"
EXTENDED = "extended"
INTERNAL = "internal"


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern

    def search(self, text: str):
        return self.pattern.search(text)


def _rule(name: str, regex: str, flags: int = 0) -> Rule:
    return Rule(name, re.compile(regex, flags))


RULES: Tuple[Rule, ...] = (
    _rule(YEAR_AS_SEASON, r"(s((?:19|20)[0-9]{2}))[ex]", re.IGNORECASE),
    _rule(YEAR, r"([\[(]?((?:19[0-9]|20[0-9])[0-9])[\])]?)"),
    _rule(SEASON, r"(s?([0-9]{1,2}))[ex]", re.IGNORECASE),
    _rule(EPISODE, r"[ex]([0-9]{2})(?:[^0-9]|$)", re.IGNORECASE),
    _rule(EPISODE_ANIME, r"[-_ p]([0-9]{2})[-_ (v\[]([0-9]{2})?"),
    _rule(GROUP_ANIME, r"^(\[\w*\])\s(.*)\s-"),
    _rule(AUDIO, r"MP3|DD5\.?1|Dual[\- ]Audio|LiNE|DTS|AAC(?:\.?2\.0)?|AC3(?:\.5\.1)?"),
    _rule(RESOLUTION, r"(([0-9]{3,4}p))", re.IGNORECASE),
    _rule(
        QUALITY,
        r"((?:PPV\.)?[HP]DTV|(?:HD)?CAM|B[DR]Rip|(?:HD-?)?TS|(?:PPV )?WEB-?DL(?: DVDRip)?|HDRip|DVDRip|DVDRIP"
        r"|CamRip|W[EB]BRip|BluRay|DvDScr|hdtv|telesync)",
    ),
    _rule(CODEC, r"xvid|x264|x265|h265|h\.?264|h\.?265", re.IGNORECASE),
    _rule(GROUP, r"(- ?([^-]+(?:-=\{[^-]+-?$)?))$"),
    _rule(PROPER, r"PROPER"),
    _rule(REPACK, r"REPACK"),
    _rule(HARDCODED, r"HC"),
    _rule(EXTENDED, r"(EXTENDED(:?.CUT)?)"),
    _rule(INTERNAL, r"INTERNAL", re.IGNORECASE),
)

# Rules that carry no information for a movie and must not be stripped from its name
MOVIE_EXCLUDED = frozenset({YEAR_AS_SEASON, SEASON, EPISODE, EPISODE_ANIME, GROUP_ANIME})

# Rules whose earliest hit marks the start of the technical info tail
TECHNICAL_RULES = (RESOLUTION, QUALITY, CODEC, AUDIO)

RULES_BY_NAME = {rule.name: rule for rule in RULES}
