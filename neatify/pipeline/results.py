"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from neatify.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of one tokenize/render/decide pass over a source text."""

    source_text: str
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
    failed: bool = False

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(slots=True)
class FormattingStats:
    """Counters aggregated while formatting many files."""

    formatted_files: int = 0
    files_needing_formatting: int = 0
    total_files: int = 0
    changed_paths: list[Path] = field(default_factory=list)

    def record(self, path: Path, *, needs_formatting: bool, write: bool) -> None:
        self.total_files += 1
        if not needs_formatting:
            return
        self.changed_paths.append(path)
        if write:
            self.formatted_files += 1
        else:
            self.files_needing_formatting += 1

    def merge(self, other: FormattingStats) -> None:
        self.formatted_files += other.formatted_files
        self.files_needing_formatting += other.files_needing_formatting
        self.total_files += other.total_files
        self.changed_paths.extend(other.changed_paths)


@dataclass(frozen=True, slots=True)
class PathError:
    path: Path
    message: str


@dataclass(frozen=True, slots=True)
class PathsReport:
    """Outcome of formatting or checking a set of files and directories."""

    stats: FormattingStats
    errors: list[PathError]

    @property
    def changed_paths(self) -> list[Path]:
        return self.stats.changed_paths

    @property
    def ok(self) -> bool:
        return not self.stats.changed_paths and not self.errors
