from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from neatify import __version__
from neatify.pipeline import PathsReport, WalkOptions, check_paths, format_paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="neatify", description="A code formatter for JavaScript sources")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("paths", nargs="*", metavar="path", help="Files or directories to format (default: .)")
    parser.add_argument("-c", "--check", action="store_true", help="Check if files need formatting without modifying them")
    parser.add_argument("-w", "--write", action="store_true", help="Write formatted output back to files")
    parser.add_argument("-l", "--list-different", action="store_true", help="List files that need formatting")
    parser.add_argument("--no-ignore", action="store_true", help="Ignore .neatignore files")
    parser.add_argument("--ignore-path", default=None, metavar="path", help="Use this ignore file instead of <dir>/.neatignore")
    parser.add_argument("--include-hidden", action="store_true", help="Include hidden files and directories")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    paths = [Path(p) for p in (args.paths or ["."])]
    for path in paths:
        if not path.exists():
            print(f"Error: File or directory does not exist: {path}", file=sys.stderr)
            return 1

    options = WalkOptions.from_flags(
        no_ignore=args.no_ignore,
        ignore_path=args.ignore_path,
        include_hidden=args.include_hidden,
    )

    if args.check or args.list_different:
        return _run_check(paths, options, verbose=args.verbose, list_different=args.list_different)
    if args.write:
        return _run_write(paths, options, verbose=args.verbose)

    print("Warning: No action specified. Use --check or --write.", file=sys.stderr)
    print("Use --help for more information.")
    return 1


def _run_check(paths: list[Path], options: WalkOptions, *, verbose: bool, list_different: bool) -> int:
    if verbose:
        print("Checking files for formatting...")

    report = check_paths(paths, options=options)
    _print_errors(report)

    if report.changed_paths:
        if list_different:
            for path in report.changed_paths:
                print(path)
        else:
            print("\nFiles that need formatting:")
            for path in report.changed_paths:
                print(f"  {path}")
            print(f"\nTotal: {len(report.changed_paths)} files need formatting")
        return 1

    if verbose and not list_different:
        print("All files are properly formatted!")
    return 1 if report.errors else 0


def _run_write(paths: list[Path], options: WalkOptions, *, verbose: bool) -> int:
    if verbose:
        print("Formatting files...")

    report = format_paths(paths, write=True, options=options)
    if verbose:
        for path in report.changed_paths:
            print(f"Formatted: {path}")

    _print_errors(report)

    if verbose or report.errors:
        print("\nSummary:")
        print(f"  Files processed: {report.stats.total_files}")
        print(f"  Files formatted: {report.stats.formatted_files}")
        if report.errors:
            print(f"  Errors: {len(report.errors)}")

    return 1 if report.errors else 0


def _print_errors(report: PathsReport) -> None:
    if not report.errors:
        return
    print("\nErrors encountered:", file=sys.stderr)
    for error in report.errors:
        print(f"  {error.path}: {error.message}", file=sys.stderr)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
