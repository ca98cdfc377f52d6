#!/usr/bin/env python3
"""
Test suite for identify/parser.py and the rule table it walks
"""

import pytest

from mediarename.identify import Options, ParsedFile, patterns
from mediarename.identify.parser import extract_technical_info, extract_tokens


def _extract(path, rules=patterns.RULES):
    parsed = ParsedFile.from_path(path, Options())
    extract_tokens(parsed, rules)
    return parsed


class TestPathSplitting:

    def test_filename_and_extension(self):
        parsed = ParsedFile.from_path("/home/test/Angel.S04E12.mkv", Options())
        assert parsed.filename == "Angel.S04E12"
        assert parsed.extension == ".mkv"
        assert parsed.full_name == "Angel.S04E12.mkv"

    def test_original_file_carried_from_options(self):
        parsed = ParsedFile.from_path("Show.mkv", Options(original_file="/x/y/video.mkv"))
        assert parsed.original_file == "/x/y/video.mkv"


class TestSeasonEpisode:

    def test_standard_marker(self):
        parsed = _extract("Angel.S04E12.mkv")
        assert parsed.season == "04"
        assert parsed.episode == "12"

    def test_cross_marker_is_zero_padded(self):
        parsed = _extract("Downton Abbey 5x06 HDTV x264-FoV [eztv].mkv")
        assert parsed.season == "05"
        assert parsed.episode == "06"
        assert parsed.quality == "HDTV"

    def test_codec_is_not_an_episode(self):
        parsed = _extract("Sonic.the.Hedgehog.2020.1080p.HDRip.X264.AC3-EVO.mkv")
        assert parsed.season == ""
        assert parsed.episode == ""
        assert parsed.year == "2020"
        assert parsed.resolution == "1080p"
        assert parsed.quality == "HDRip"


class TestYear:

    def test_bracketed_year(self):
        assert _extract("The Matrix Revolutions (2003).mkv").year == "2003"

    def test_number_in_title_is_not_an_episode(self):
        parsed = _extract("Apollo.11.2019.1080p.mkv")
        assert parsed.year == "2019"
        assert parsed.episode == ""
        assert parsed.season == ""

    def test_year_as_season_discards_year(self):
        parsed = _extract("Show.S2019E05.720p.mkv")
        assert parsed.has_year_as_season
        assert parsed.season == "2019"
        assert parsed.episode == "05"
        assert parsed.year == ""


class TestAnime:

    def test_absolute_numbering(self):
        parsed = _extract("[HorribleSubs] Kaiji S2 - Against All Rules - 01 [480p].mkv")
        assert parsed.season == "00"
        assert parsed.episode == "01"
        assert parsed.anime_group == "[HorribleSubs]"
        assert parsed.resolution == "480p"

    def test_anime_with_year(self):
        parsed = _extract("[HorribleSubs] Fruits Basket (2019) - 01 [1080p].mkv")
        assert parsed.year == "2019"
        assert parsed.season == "00"
        assert parsed.episode == "01"

    def test_regular_episode_wins_over_anime_episode(self):
        parsed = _extract("[Group] Show - S01E03 - 12 [720p].mkv")
        assert parsed.season == "01"
        assert parsed.episode == "03"


class TestRuleOrder:
    """The table order is part of the behaviour, not an implementation detail"""

    def test_table_starts_with_year_as_season_then_year(self):
        names = [rule.name for rule in patterns.RULES]
        assert names[:4] == [patterns.YEAR_AS_SEASON, patterns.YEAR, patterns.SEASON, patterns.EPISODE]
        assert names[-1] == patterns.INTERNAL
        assert len(names) == len(set(names)) == 16

    def test_year_after_year_as_season_prevents_collision(self):
        default = _extract("Show.S2019E05.mkv")
        assert default.year == ""

        reordered = [r for r in patterns.RULES if r.name != patterns.YEAR_AS_SEASON]
        reordered.insert(1, patterns.RULES_BY_NAME[patterns.YEAR_AS_SEASON])
        swapped = _extract("Show.S2019E05.mkv", reordered)
        assert swapped.year == "2019"
        assert swapped.season == "2019"


class TestTechnicalInfo:

    @pytest.mark.parametrize("filename, expected", [
        ("Sonic.the.Hedgehog.2020.1080p.HDRip.X264.AC3-EVO", "1080p.HDRip.X264.AC3-EVO"),
        ("Downton Abbey 5x06 HDTV x264-FoV [eztv]", "HDTV x264-FoV [eztv]"),
        ("The.Call.of.the.Wild.1080p.WEB-DL.DD5.1.H.264-EVO", "1080p.WEB-DL.DD5.1.H.264-EVO"),
    ])
    def test_tail_from_earliest_tag(self, filename, expected):
        assert extract_technical_info(filename) == expected

    def test_partial_token_is_kept_whole(self):
        assert extract_technical_info("Show.S01E01.WEBHDTV") == "WEBHDTV"

    def test_no_technical_tags(self):
        assert extract_technical_info("Angel.S04E12") == ""
