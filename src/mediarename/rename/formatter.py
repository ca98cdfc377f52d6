# python
"""
Renders the target name of an identified file from a naming template.

Templates are plain strings with placeholders:

- `{n}` clean name, `{y}` year, `{r}` resolution, `{q}` quality,
  `{i}` technical info,
- series only: `{s}` season, `{e}` episode, `{t}` episode title.

Notes:
- Placeholders are substituted verbatim in the order above; an unknown
  placeholder, or a series placeholder in a movie template, is left as
  literal text.
- The template may contain "/" to place the file in sub folders; the
  executor decides what to do with those.
- Unclassified files keep their original name.

Example:
    "{n}/Season.{s}/{n}.S{s}E{e}.{r}" -> "Angel/Season.04/Angel.S04E12.mkv"
"""
from mediarename.utils import DEFAULT_MOVIE_FORMAT, DEFAULT_SERIES_FORMAT


def target_name(parsed) -> str:
    """
    Build the name `parsed` should get, extension included.

    After substitution surrounding spaces are trimmed and a single trailing
    dot (left by an empty placeholder such as `{r}` in "...E{e}.{r}") is
    dropped before the original extension is appended.

    Parameters:
    - parsed (ParsedFile): A fully identified file.

    Returns:
    - str: The rendered name, e.g. "The Matrix Revolutions (2003)/The Matrix Revolutions (2003).mkv".
    """
    if parsed.is_movie:
        name = parsed.options.movie_format or DEFAULT_MOVIE_FORMAT
    elif parsed.is_series:
        name = parsed.options.series_format or DEFAULT_SERIES_FORMAT
    else:
        return parsed.full_name

    replacements = [
        ("{n}", parsed.clean_name),
        ("{r}", parsed.resolution),
        ("{q}", parsed.quality),
        ("{y}", parsed.year),
        ("{i}", parsed.technical_info),
    ]
    if parsed.is_series:
        replacements += [
            ("{s}", parsed.season),
            ("{e}", parsed.episode),
            ("{t}", parsed.episode_name),
        ]

    for placeholder, value in replacements:
        name = name.replace(placeholder, value)

    name = name.strip(" ")
    if name.endswith("."):
        name = name[:-1]

    return name + parsed.extension
