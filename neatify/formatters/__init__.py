"""Formatter registry, tried in order."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from neatify.formatters.base import Formatter
from neatify.formatters.javascript import JavaScriptFormatter

FORMATTERS: Final[tuple[Formatter, ...]] = (JavaScriptFormatter(),)


def get_formatter_for_file(path: Path | str) -> Formatter | None:
    """Return the first registered formatter that accepts `path`."""
    resolved = Path(path)
    for formatter in FORMATTERS:
        if formatter.is_supported(resolved):
            return formatter
    return None


def is_supported(path: Path | str) -> bool:
    return get_formatter_for_file(path) is not None


__all__ = [
    "FORMATTERS",
    "Formatter",
    "JavaScriptFormatter",
    "get_formatter_for_file",
    "is_supported",
]
