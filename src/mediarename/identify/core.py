"""
Identification pipeline: path in, fully populated ParsedFile out.

The steps run once, in a fixed order:
- token extraction and technical info on the base name,
- classification, with at most one retry on the parent directory name,
- name normalization,
- optional metadata enrichment and year-as-season reconciliation,
- disambiguation of series names that exist more than once.

Nothing here raises for an unrecognisable file; it simply stays
unclassified.
"""
from dataclasses import replace
from typing import Optional

from mediarename.identify import classifier, enrichment, normalizer, parser
from mediarename.identify.models import Options, ParsedFile
from mediarename.utils import LogLevel, file_util, logger
from mediarename.utils.tmdb import MetadataProvider


def _identify(file_path: str, options: Options) -> ParsedFile:
    parsed = ParsedFile.from_path(file_path, options)
    logger.log("identify.start", LogLevel.DEBUG, file=parsed.filename, original_file=options.original_file)

    if not parsed.is_video:
        if parsed.is_music:
            logger.log("identify.music", LogLevel.DEBUG, msg="Music files are not handled", file=file_path)
        return parsed

    parser.extract_tokens(parsed)
    # Must run before the normalizer destroys the tags it is built from
    parsed.technical_info = parser.extract_technical_info(parsed.filename)
    classifier.classify(parsed)
    return parsed


def parse_file(
        file_path: str, options: Optional[Options] = None, provider: Optional[MetadataProvider] = None
) -> ParsedFile:
    """
    Identify the media file at `file_path`.

    Parameters:
    - file_path (str): Path as given; only its name and parent directory name are used.
    - options (Options): Per-call configuration, defaults to `Options()`.
    - provider (MetadataProvider): Lookup service used when `options.lookup` is set.
      When omitted a `TMDbClient` is built from the environment.

    Returns:
    - ParsedFile: The identification result. Files that are not videos are
      returned with only path, name and extension set.
    """
    options = options or Options()
    logger.log(
        "identify.options",
        LogLevel.TRACE,
        lookup=options.lookup,
        force_movie=options.force_movie,
        force_series=options.force_series,
        movie_format=options.movie_format,
        series_format=options.series_format,
        original_file=options.original_file,
    )

    parsed = _identify(file_path, options)
    if not parsed.is_video:
        return parsed

    if not parsed.is_classified:
        retry_name = classifier.parent_retry_name(parsed)
        if retry_name:
            logger.log(
                "identify.retry_parent",
                LogLevel.WARN,
                msg="Nothing sensible found, trying again with parent",
                file=parsed.filename,
                file_path=file_path,
                retry=retry_name,
            )
            parsed = _identify(retry_name, replace(options, original_file=file_path))
        if not parsed.is_classified:
            logger.log("identify.unclassified", LogLevel.WARN, file=parsed.filename, file_path=file_path)

    parsed.clean_name = normalizer.clean_name(parsed)

    if options.lookup:
        provider = provider or enrichment.default_provider()
        if provider is not None:
            enrichment.enrich(parsed, provider)
    enrichment.reconcile_year_as_season(parsed, provider)

    normalizer.disambiguate(parsed)

    # Windows really hates colons, strip any the provider brought back
    parsed.clean_name = file_util.strip_colons(parsed.clean_name)

    logger.log("identify.done", LogLevel.INFO, result=str(parsed))
    return parsed
