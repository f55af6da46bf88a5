"""Ignore-pattern loading and gitignore-style matching for directory walks."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path, PurePosixPath

from neatify.errors import NeatifyIOError
from neatify.pipeline.options import DEFAULT_IGNORE_PATTERNS, IGNORE_FILE_NAME, WalkOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IgnoreRule:
    """One compiled ignore line.

    `regex` is matched against a full path relative to the walk root.
    """

    pattern: str
    regex: re.Pattern[str]
    negated: bool = False
    directory_only: bool = False

    def matches(self, relative: str, *, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        return self.regex.match(relative) is not None


def load_ignore_patterns(directory: Path, ignore_path: Path | None = None) -> tuple[str, ...]:
    """Read patterns from an ignore file, skipping blank lines and `#` comments.

    A missing `<directory>/.neatignore` means no patterns. A missing
    explicit `ignore_path` also means no patterns, but is logged.
    """
    ignore_file = ignore_path if ignore_path is not None else directory / IGNORE_FILE_NAME
    if not ignore_file.is_file():
        if ignore_path is not None:
            logger.warning("Ignore file %s does not exist, no ignore patterns loaded from it", ignore_file)
        return ()
    try:
        content = ignore_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise NeatifyIOError(f"Failed to read ignore file {ignore_file}: {exc}", ignore_file) from exc

    patterns: list[str] = []
    for line in content.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            patterns.append(stripped)
    return tuple(patterns)


def ignore_patterns_for(directory: Path, options: WalkOptions) -> tuple[str, ...]:
    patterns = list(DEFAULT_IGNORE_PATTERNS)
    if options.use_ignore_file:
        patterns.extend(load_ignore_patterns(directory, options.ignore_path))
    patterns.extend(options.extra_ignore)
    return tuple(patterns)


def is_ignored(
    relative_path: PurePosixPath,
    patterns: Iterable[str],
    *,
    include_hidden: bool = False,
    is_dir: bool = False,
) -> bool:
    """Match a path relative to the walk root against gitignore-style patterns.

    Hidden components are ignored unless `include_hidden`. Every ancestor
    directory is checked first, so nothing below an ignored directory can
    be re-included. At each level the last matching rule wins, and a `!`
    rule re-includes what an earlier rule excluded.
    """
    parts = relative_path.parts
    if not include_hidden and any(part.startswith(".") for part in parts):
        return True

    rules = [rule for rule in map(compile_ignore_rule, patterns) if rule is not None]
    for depth in range(1, len(parts) + 1):
        prefix = "/".join(parts[:depth])
        prefix_is_dir = depth < len(parts) or is_dir
        if _last_match_excludes(rules, prefix, prefix_is_dir):
            return True
    return False


@lru_cache(maxsize=None)
def compile_ignore_rule(line: str) -> IgnoreRule | None:
    """Compile one ignore line; blank lines and comments give None.

    - `!` negates, and `\\!` or `\\#` escape a literal first character.
    - A trailing `/` restricts the rule to directories.
    - A trailing `/**` excludes the directory and everything below it.
    - A pattern containing `/` is anchored to the walk root; otherwise it
      matches a name at any depth.
    - `*` and `?` never match `/`; `**` matches across directories.
    """
    pattern = line.strip()
    if not pattern or pattern.startswith("#"):
        return None

    negated = pattern.startswith("!")
    if negated:
        pattern = pattern[1:]
    elif pattern.startswith("\\"):
        pattern = pattern[1:]

    directory_only = pattern.endswith("/")
    pattern = pattern.rstrip("/")
    anchored = "/" in pattern
    if pattern.endswith("/**"):
        pattern = pattern[: -len("/**")]
        directory_only = True
    pattern = pattern.lstrip("/")
    if not pattern:
        return None

    body = _translate_glob(pattern)
    prefix = "" if anchored else "(?:.*/)?"
    return IgnoreRule(
        pattern=line,
        regex=re.compile(f"^{prefix}{body}$"),
        negated=negated,
        directory_only=directory_only,
    )


def _last_match_excludes(rules: list[IgnoreRule], relative: str, is_dir: bool) -> bool:
    excluded = False
    for rule in rules:
        if rule.matches(relative, is_dir=is_dir):
            excluded = not rule.negated
    return excluded


def _translate_glob(pattern: str) -> str:
    out: list[str] = []
    index = 0
    length = len(pattern)
    while index < length:
        ch = pattern[index]
        if pattern.startswith("**/", index):
            out.append("(?:.*/)?")
            index += 3
            continue
        if pattern.startswith("**", index):
            out.append(".*")
            index += 2
            continue

        match ch:
            case "*":
                out.append("[^/]*")
            case "?":
                out.append("[^/]")
            case "[":
                end = pattern.find("]", index + 2)
                if end == -1:
                    out.append(re.escape(ch))
                else:
                    members = pattern[index + 1 : end]
                    if members.startswith("!"):
                        members = "^" + members[1:]
                    escaped = members.replace("\\", "\\\\")
                    out.append(f"[{escaped}]")
                    index = end
            case "\\" if index + 1 < length:
                index += 1
                out.append(re.escape(pattern[index]))
            case _:
                out.append(re.escape(ch))
        index += 1
    return "".join(out)
