"""Tests for target name rendering."""

import pytest

from mediarename.identify import Options, ParsedFile, parse_file
from mediarename.rename import target_name


def _series(series_format="{n}/Season.{s}/{n}.S{s}E{e}.{r}", **kwargs):
    values = dict(clean_name="Angel", season="04", episode="12", year="1999")
    values.update(kwargs)
    return ParsedFile(
        filepath="Angel.S04E12.mkv",
        options=Options(series_format=series_format),
        filename="Angel.S04E12",
        extension=".mkv",
        is_series=True,
        **values,
    )


def _movie(movie_format="{n} ({y})/{n} ({y}) {r}", **kwargs):
    values = dict(clean_name="The Matrix Revolutions", year="2003")
    values.update(kwargs)
    return ParsedFile(
        filepath="The Matrix Revolutions (2003).mkv",
        options=Options(movie_format=movie_format),
        filename="The Matrix Revolutions (2003)",
        extension=".mkv",
        is_movie=True,
        **values,
    )


class TestDefaults:

    def test_series_default_template(self):
        assert target_name(parse_file("Angel.S04E12.mkv")) == "Angel/Season.04/Angel.S04E12.mkv"

    def test_movie_default_template(self):
        assert target_name(parse_file("The Matrix Revolutions (2003).mkv")) == \
            "The Matrix Revolutions (2003)/The Matrix Revolutions (2003).mkv"

    def test_empty_template_falls_back(self):
        assert target_name(_movie(movie_format="")) == \
            "The Matrix Revolutions (2003)/The Matrix Revolutions (2003).mkv"

    def test_resolution_filled_in(self):
        assert target_name(_series(resolution="720p")) == "Angel/Season.04/Angel.S04E12.720p.mkv"


class TestPlaceholders:

    @pytest.mark.parametrize("template, expected", [
        ("{n} - S{s}E{e} - {t}", "Angel - S04E12 - Hell Bound.mkv"),
        ("{n} ({y}) {q} {i}", "Angel (1999) HDTV HDTV.x264.mkv"),
        ("{n} {z}", "Angel {z}.mkv"),
    ])
    def test_series(self, template, expected):
        parsed = _series(template, episode_name="Hell Bound", quality="HDTV", technical_info="HDTV.x264")
        assert target_name(parsed) == expected

    def test_series_placeholders_are_literal_for_movies(self):
        assert target_name(_movie(movie_format="{n} S{s}E{e}")) == "The Matrix Revolutions S{s}E{e}.mkv"

    def test_one_trailing_dot_dropped(self):
        assert target_name(_series("{n}.{r}.")) == "Angel..mkv"

    def test_surrounding_spaces_trimmed(self):
        assert target_name(_movie(movie_format=" {n} {r} ")) == "The Matrix Revolutions.mkv"

    def test_rendering_is_repeatable(self):
        parsed = _series(resolution="720p")
        assert target_name(parsed) == target_name(parsed)


class TestUnclassified:

    def test_keeps_original_name(self):
        parsed = ParsedFile(filepath="video.mkv", filename="video", extension=".mkv", clean_name="Video")
        assert target_name(parsed) == "video.mkv"
