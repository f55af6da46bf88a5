"""File and directory entrypoints around the formatting core."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePosixPath

from neatify.errors import (
    FormattingError,
    NeatifyError,
    NeatifyIOError,
    SourceNotFoundError,
    UnsupportedFileError,
)
from neatify.formatters import Formatter, get_formatter_for_file
from neatify.pipeline.ignore import ignore_patterns_for, is_ignored
from neatify.pipeline.options import WalkOptions
from neatify.pipeline.results import FormattingStats, PathError, PathsReport

logger = logging.getLogger(__name__)


def format_file(path: Path | str, write: bool = False) -> bool:
    """Format one file; return True if it needed formatting.

    With `write`, a file that needs formatting is rewritten in place.
    """
    resolved = Path(path)
    if not resolved.exists():
        raise SourceNotFoundError(f"File does not exist: {resolved}", resolved)

    formatter = get_formatter_for_file(resolved)
    if formatter is None:
        raise UnsupportedFileError(resolved)

    return _format_with(formatter, resolved, write=write)


def format_directory(
    path: Path | str,
    write: bool = False,
    options: WalkOptions | None = None,
) -> FormattingStats:
    """Format every supported, non-ignored file below `path`."""
    root = Path(path)
    if not root.exists():
        raise SourceNotFoundError(f"Directory does not exist: {root}", root)
    if not root.is_dir():
        raise NeatifyIOError(f"Path is not a directory: {root}", root)

    stats = FormattingStats()
    for file_path, formatter in iter_source_files(root, options or WalkOptions()):
        try:
            needs_formatting = _format_with(formatter, file_path, write=write)
        except NeatifyError as exc:
            raise FormattingError(f"Error formatting {file_path}: {exc}", file_path) from exc
        stats.record(file_path, needs_formatting=needs_formatting, write=write)
    return stats


def format_paths(
    paths: Iterable[Path | str],
    *,
    write: bool = False,
    options: WalkOptions | None = None,
) -> PathsReport:
    """Format (or, without `write`, check) files and directories, collecting per-path errors."""
    stats = FormattingStats()
    errors: list[PathError] = []

    for raw in paths:
        path = Path(raw)
        try:
            if path.is_dir():
                stats.merge(format_directory(path, write=write, options=options))
            else:
                needs_formatting = format_file(path, write=write)
                stats.record(path, needs_formatting=needs_formatting, write=write)
        except NeatifyError as exc:
            logger.debug("Failed to process %s: %s", path, exc)
            errors.append(PathError(path=path, message=str(exc)))

    return PathsReport(stats=stats, errors=errors)


def check_paths(paths: Iterable[Path | str], options: WalkOptions | None = None) -> PathsReport:
    """Dry run of `format_paths`: report which files need formatting without writing."""
    return format_paths(paths, write=False, options=options)


def iter_source_files(root: Path, options: WalkOptions) -> Iterator[tuple[Path, Formatter]]:
    """Yield supported files below `root` in sorted order, pruning ignored paths."""
    patterns = ignore_patterns_for(root, options)
    yield from _walk(root, root, patterns, options.include_hidden)


def _walk(
    root: Path,
    directory: Path,
    patterns: tuple[str, ...],
    include_hidden: bool,
) -> Iterator[tuple[Path, Formatter]]:
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise NeatifyIOError(f"Failed to list directory {directory}: {exc}", directory) from exc

    for entry in entries:
        relative = PurePosixPath(entry.relative_to(root).as_posix())
        is_dir = entry.is_dir()
        if is_ignored(relative, patterns, include_hidden=include_hidden, is_dir=is_dir):
            logger.debug("Skipping ignored path %s", entry)
            continue
        if is_dir:
            # Symlinked directories are not followed; they may loop back to an ancestor.
            if entry.is_symlink():
                logger.debug("Skipping symlinked directory %s", entry)
                continue
            yield from _walk(root, entry, patterns, include_hidden)
        elif entry.is_file():
            formatter = get_formatter_for_file(entry)
            if formatter is not None:
                yield entry, formatter


def _format_with(formatter: Formatter, path: Path, *, write: bool) -> bool:
    try:
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NeatifyIOError(f"Failed to read {path}: {exc}", path) from exc

    result = formatter.run(content)
    if result.failed:
        message = result.diagnostics[0].message if result.diagnostics else "unknown failure"
        raise FormattingError(f"Failed to format {path}: {message}", path)

    if not result.changed:
        logger.debug("%s is already formatted", path)
        return False

    if write:
        try:
            path.write_bytes(result.formatted_text.encode("utf-8"))
        except OSError as exc:
            raise NeatifyIOError(f"Failed to write {path}: {exc}", path) from exc
        logger.debug("Formatted %s with %s formatter", path, formatter.name)
    else:
        logger.debug("%s needs formatting", path)
    return True
