"""
Filename identification for movies and TV episodes.

This package turns an unstructured media filename into a `ParsedFile`:
the ordered rule table (`patterns`) drives token extraction (`parser`),
the movie/series decision (`classifier`) and title cleanup (`normalizer`);
`enrichment` optionally consults a metadata provider; `core` ties the steps
together.

Public API (top-level exports)
- `parse_file`: Identify a path and return a populated `ParsedFile`.
- `Options`: Immutable per-call configuration.
- `ParsedFile`: The identification result.

Example:
    from mediarename.identify import parse_file
    parsed = parse_file("Angel.S04E12.mkv")
    parsed.is_series, parsed.season, parsed.episode, parsed.clean_name
    # (True, "04", "12", "Angel")
"""
from .core import parse_file
from .models import Options, ParsedFile

__all__ = [
    "parse_file",
    "Options",
    "ParsedFile",
]
