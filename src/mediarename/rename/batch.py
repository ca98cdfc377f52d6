# python
"""Batch rename utilities: scan, plan and act on identified media files.

This module scans a file or folder for media files, identifies each one,
proposes a target path from the rendered name and then renames, moves,
copies or links the file. Nothing touches the disk in dry-run mode;
interactive mode shows the plan and asks before acting.
"""
import os
import shutil
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, List, Optional

from tqdm import tqdm

from mediarename.identify import Options, ParsedFile, enrichment, parse_file
from mediarename.rename import formatter
from mediarename.utils import (
    ACTIONS,
    STATUS_DRY_RUN,
    STATUS_EXISTS,
    STATUS_FAIL,
    STATUS_OK,
    VIDEO_EXTENSIONS,
    LogLevel,
    logger,
)
from mediarename.utils.tmdb import MetadataProvider


class FileOperationError(Exception):
    """Raised when a planned operation cannot be carried out."""

    pass


@dataclass
class PlannedOperation:
    source_path: Path
    target_path: Path
    action: str
    parsed: ParsedFile


def scan(path: Path, recursive: bool = True) -> Iterator[Path]:
    """Yield regular files: `path` itself, its direct children, or everything below it."""
    path = Path(path)
    if path.is_file():
        yield path
        return
    if recursive:
        logger.log("scan.start", LogLevel.INFO, path=str(path), recursive=True)
        candidates = sorted(path.rglob("*"))
    else:
        logger.log("scan.start", LogLevel.INFO, path=str(path), recursive=False)
        candidates = sorted(path.iterdir())
    for candidate in candidates:
        if candidate.is_file():
            yield candidate


def plan_file(
        file: Path,
        options: Options,
        action: str,
        movie_folder: Path,
        series_folder: Path,
        min_file_size: int = 0,
        provider: Optional[MetadataProvider] = None,
) -> Optional[PlannedOperation]:
    """
    Identify `file` and work out where it should go.

    Returns None for files that are skipped: non-regular files, videos
    smaller than `min_file_size` bytes and files that could not be
    classified. `rename` keeps the file in its own directory (only the last
    component of the rendered name is used); every other action places it
    under the movie or series folder.
    """
    file = Path(file)
    if not file.is_file():
        logger.log("plan.skip", LogLevel.DEBUG, file=str(file), reason="not a regular file")
        return None

    if file.suffix.lower() in VIDEO_EXTENSIONS and file.stat().st_size < min_file_size:
        logger.log(
            "plan.skip",
            LogLevel.WARN,
            file=str(file),
            reason="smaller than minimum size",
            size=file.stat().st_size,
            min_size=min_file_size,
        )
        return None

    parsed = parse_file(str(file), options, provider)
    if not parsed.is_classified:
        return None

    source = Path(parsed.source_path()).absolute()
    rendered = formatter.target_name(parsed)
    if action == "rename":
        target = source.parent / Path(rendered).name
    else:
        base = movie_folder if parsed.is_movie else series_folder
        target = Path(base) / rendered

    return PlannedOperation(source_path=source, target_path=target, action=action, parsed=parsed)


def plan(
        path: Path,
        options: Options,
        action: str,
        movie_folder: Path,
        series_folder: Path,
        min_file_size: int = 0,
        recursive: bool = True,
        provider: Optional[MetadataProvider] = None,
) -> List[PlannedOperation]:
    """
    Plan an operation for every file found under `path`, sharing one metadata provider.

    When lookups are requested but no provider can be built, lookups are
    switched off for the whole batch instead of being retried per file.
    """
    if options.lookup and provider is None:
        provider = enrichment.default_provider()
        if provider is None:
            options = replace(options, lookup=False)
    files = list(scan(path, recursive))
    operations = []
    for file in tqdm(files, desc="Analyzing files"):
        operation = plan_file(file, options, action, movie_folder, series_folder, min_file_size, provider)
        if operation:
            operations.append(operation)
    return operations


def execute(operation: PlannedOperation) -> str:
    """
    Carry out a single planned operation.

    An existing target is never overwritten. Symlinks point at the real
    source file through a path relative to the link's folder.

    Returns:
        str: STATUS_OK, or STATUS_EXISTS when the target was already there.

    Raises:
        FileOperationError: When the action is unknown.
        OSError: When the filesystem refuses the operation.
    """
    if operation.action not in ACTIONS:
        raise FileOperationError(f"Unknown action '{operation.action}'")

    source, target = operation.source_path, operation.target_path
    target.parent.mkdir(parents=True, exist_ok=True)

    if os.path.lexists(target):
        logger.log("rename.exists", LogLevel.WARN, msg="File already exists, doing nothing", target=str(target))
        return STATUS_EXISTS

    logger.log("rename.execute", LogLevel.INFO, action=operation.action, source=str(source), target=str(target))

    if operation.action in ("rename", "move"):
        shutil.move(str(source), str(target))
    elif operation.action == "copy":
        shutil.copy2(source, target)
    elif operation.action == "hardlink":
        os.link(source, target)
    elif operation.action == "symlink":
        real_source = os.path.realpath(source)
        relative = os.path.relpath(real_source, target.parent.resolve())
        logger.log("rename.symlink", LogLevel.DEBUG, source=relative, target=str(target))
        os.symlink(relative, target)

    return STATUS_OK


def _confirm(operations: List[PlannedOperation]) -> bool:
    """Show the plan and ask whether to go ahead."""
    cwd = Path.cwd()

    def _display(p: Path) -> str:
        try:
            return os.path.relpath(p, cwd)
        except ValueError:
            return str(p)

    logger.safe_print(f"\nFound {len(operations)} file(s) to process:\n")
    for i, op in enumerate(operations, start=1):
        logger.safe_print(f"{i}. {op.action}")
        logger.safe_print(f"   From: {_display(op.source_path)}")
        logger.safe_print(f"   To:   {_display(op.target_path)}\n")

    answer = input("Do you want to proceed with these operations? (y/N): ").strip().lower()
    return answer in ("y", "yes")


def run(
        path: Path,
        options: Options,
        action: str,
        mode: str,
        movie_folder: Path,
        series_folder: Path,
        min_file_size: int = 0,
        recursive: bool = True,
        provider: Optional[MetadataProvider] = None,
) -> List[tuple[PlannedOperation, str]]:
    """
    Identify everything under `path` and act on it according to `mode`.

    - dry-run: log the operations that would be performed.
    - interactive: print the plan and execute it after confirmation.
    - force: execute straight away.

    Per-file filesystem errors are logged and do not stop the batch.

    Returns:
        list of (operation, status) pairs.
    """
    operations = plan(path, options, action, movie_folder, series_folder, min_file_size, recursive, provider)
    if not operations:
        logger.safe_print("No files to process.")
        return []

    if mode == "dry-run":
        for op in operations:
            logger.log(
                "rename.dry_run",
                LogLevel.INFO,
                action=op.action,
                source=str(op.source_path),
                target=str(op.target_path),
            )
        return [(op, STATUS_DRY_RUN) for op in operations]

    if mode == "interactive" and not _confirm(operations):
        logger.safe_print("Operation cancelled by user.")
        return []

    results = []
    for op in tqdm(operations, desc="Processing files"):
        try:
            status = execute(op)
        except OSError as e:
            logger.log(
                "rename.error",
                LogLevel.ERROR,
                source=str(op.source_path),
                target=str(op.target_path),
                error=str(e),
            )
            status = STATUS_FAIL
        results.append((op, status))

    logger.safe_print(f"Completed processing {len(results)} file(s).")
    return results
