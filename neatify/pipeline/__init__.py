"""Result carriers, walk options and lazy file entrypoint exports."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from neatify.pipeline.options import DEFAULT_IGNORE_PATTERNS, IGNORE_FILE_NAME, WalkOptions
from neatify.pipeline.results import (
    FormatRunResult,
    FormattingStats,
    PathError,
    PathsReport,
)


def format_file(path: Path | str, write: bool = False) -> bool:
    from neatify.pipeline.entrypoints import format_file as _format_file

    return _format_file(path, write=write)


def format_directory(
    path: Path | str,
    write: bool = False,
    options: WalkOptions | None = None,
) -> FormattingStats:
    from neatify.pipeline.entrypoints import format_directory as _format_directory

    return _format_directory(path, write=write, options=options)


def format_paths(
    paths: Iterable[Path | str],
    *,
    write: bool = False,
    options: WalkOptions | None = None,
) -> PathsReport:
    from neatify.pipeline.entrypoints import format_paths as _format_paths

    return _format_paths(paths, write=write, options=options)


def check_paths(paths: Iterable[Path | str], options: WalkOptions | None = None) -> PathsReport:
    from neatify.pipeline.entrypoints import check_paths as _check_paths

    return _check_paths(paths, options=options)


__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "IGNORE_FILE_NAME",
    "FormatRunResult",
    "FormattingStats",
    "PathError",
    "PathsReport",
    "WalkOptions",
    "check_paths",
    "format_directory",
    "format_file",
    "format_paths",
]
