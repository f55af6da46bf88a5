#!/usr/bin/env python3
"""Measure formatting throughput over a JavaScript source tree."""

from __future__ import annotations

import argparse
import cProfile
import pstats
import statistics
import time
from pathlib import Path

from tqdm import tqdm

from neatify.format import run_format
from neatify.pipeline import WalkOptions
from neatify.pipeline.entrypoints import iter_source_files


def _read_tree(root: Path, include_hidden: bool) -> dict[Path, str]:
    options = WalkOptions(include_hidden=include_hidden)
    return {path: path.read_bytes().decode("utf-8") for path, _ in iter_source_files(root, options)}


def _format_all(sources: dict[Path, str], *, desc: str, quiet: bool) -> tuple[float, int]:
    needs_formatting = 0
    started = time.perf_counter()
    for text in tqdm(sources.values(), desc=desc, unit="file", disable=quiet):
        needs_formatting += run_format(text).changed
    return time.perf_counter() - started, needs_formatting


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("root", type=Path, help="Directory of JavaScript sources")
    parser.add_argument("-n", "--runs", type=int, default=5, help="Timed passes over the tree (default: 5)")
    parser.add_argument("--include-hidden", action="store_true", help="Also time hidden files")
    parser.add_argument("-q", "--quiet", action="store_true", help="No progress bars")
    parser.add_argument("--profile", action="store_true", help="Profile one pass and print the top 25 entries")
    args = parser.parse_args()

    if not args.root.is_dir():
        raise SystemExit(f"Not a directory: {args.root}")

    sources = _read_tree(args.root, args.include_hidden)
    if not sources:
        raise SystemExit(f"No JavaScript files under {args.root}")
    total_chars = sum(len(text) for text in sources.values())

    if args.profile:
        profiler = cProfile.Profile()
        profiler.runcall(_format_all, sources, desc="profile", quiet=True)
        pstats.Stats(profiler).sort_stats("cumulative").print_stats(25)

    # One untimed pass warms caches before measuring.
    _format_all(sources, desc="warmup", quiet=args.quiet)
    timings: list[float] = []
    needs_formatting = 0
    for run in range(1, max(args.runs, 1) + 1):
        elapsed, needs_formatting = _format_all(sources, desc=f"pass {run}", quiet=args.quiet)
        timings.append(elapsed)

    median = statistics.median(timings)
    print(f"{len(sources)} files, {total_chars} chars under {args.root}; {needs_formatting} need formatting")
    print(f"median {median * 1000:.1f} ms over {len(timings)} passes (fastest {min(timings) * 1000:.1f} ms)")
    print(f"{len(sources) / median:.0f} files/s, {total_chars / median / 1024:.0f} KiB/s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
