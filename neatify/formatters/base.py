"""Formatter contract used by the file-selection layer."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from neatify.pipeline.results import FormatRunResult


class Formatter(Protocol):
    """Language formatter selected by capability rather than by type."""

    @property
    def name(self) -> str: ...

    @property
    def extensions(self) -> tuple[str, ...]: ...

    def is_supported(self, path: Path) -> bool: ...

    def run(self, content: str) -> FormatRunResult: ...

    def format(self, content: str) -> str: ...


def has_extension(path: Path, extensions: tuple[str, ...]) -> bool:
    return path.suffix.lower() in extensions
