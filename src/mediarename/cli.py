#!/usr/bin/env python3
"""
Command line entry point: identify media files and put them where they belong.

Example:
    mediarename ~/Downloads --action symlink --mode force
"""
import argparse
import sys
from pathlib import Path

import mediarename
from mediarename.identify import Options
from mediarename.rename import batch
from mediarename.utils import ACTIONS, MODES, LogLevel, constants, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Identify movies and TV episodes from their filenames and rename, move, copy or link "
                    "them into a tidy library. Uses the TMDb API for canonical names when enabled.",
        epilog="Example: mediarename ~/Downloads --action symlink --mode force",
    )
    parser.add_argument("path", help="File or folder to scan")
    parser.add_argument(
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Scan folders inside of other folders (default: on)",
    )
    parser.add_argument(
        "--action",
        choices=ACTIONS,
        default=constants.DEFAULT_ACTION,
        help=f"How to act on files (default: {constants.DEFAULT_ACTION})",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=constants.DEFAULT_MODE,
        help=f"dry-run only logs, interactive asks first, force acts (default: {constants.DEFAULT_MODE})",
    )
    parser.add_argument("--movie-folder", default=constants.MOVIE_FOLDER, help="Folder where movies should be placed")
    parser.add_argument(
        "--series-folder", default=constants.SERIES_FOLDER, help="Folder where series should be placed"
    )
    parser.add_argument(
        "--tmdb-lookup",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Use TMDb for better look-up and matching (default: on)",
    )
    parser.add_argument(
        "--min-file-size",
        type=int,
        default=constants.MIN_FILE_SIZE_MB,
        help=f"Minimal video file size in MB to be processed (default: {constants.MIN_FILE_SIZE_MB})",
    )
    parser.add_argument("--movie-format", default=constants.DEFAULT_MOVIE_FORMAT, help="Format used to rename movies")
    parser.add_argument(
        "--series-format", default=constants.DEFAULT_SERIES_FORMAT, help="Format used to rename series"
    )
    parser.add_argument("--force-movie", action="store_true", help="Identify the given path as a movie")
    parser.add_argument("--force-series", action="store_true", help="Identify the given path as a series")
    parser.add_argument("--verbose", action="store_true", help="Show debug log information")
    parser.add_argument("--log-file", help="Write log lines to this file as well as the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {mediarename.__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger.set_log_level(LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    if args.log_file:
        logger.set_log_file(Path(args.log_file))

    if args.force_movie and args.force_series:
        logger.log("startup.error", LogLevel.ERROR, msg="--force-movie and --force-series are mutually exclusive")
        return 2

    path = Path(args.path).expanduser()
    if not path.exists():
        logger.log("startup.error", LogLevel.ERROR, msg="Path does not exist", path=str(path))
        return 2

    options = Options(
        lookup=args.tmdb_lookup,
        force_movie=args.force_movie,
        force_series=args.force_series,
        movie_format=args.movie_format,
        series_format=args.series_format,
    )

    try:
        batch.run(
            path,
            options,
            action=args.action,
            mode=args.mode,
            movie_folder=Path(args.movie_folder).expanduser(),
            series_folder=Path(args.series_folder).expanduser(),
            min_file_size=args.min_file_size * 1000 * 1000,
            recursive=args.recursive,
        )
    except KeyboardInterrupt:
        logger.safe_print("\nInterrupted by user")
        return 1
    finally:
        logger.set_log_file(None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
