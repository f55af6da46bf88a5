"""JavaScript formatter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from neatify.format import run_format
from neatify.formatters.base import has_extension
from neatify.pipeline.results import FormatRunResult


@dataclass(frozen=True, slots=True)
class JavaScriptFormatter:
    name: str = "javascript"
    extensions: tuple[str, ...] = (".js", ".mjs", ".cjs")

    def is_supported(self, path: Path) -> bool:
        return has_extension(path, self.extensions)

    def run(self, content: str) -> FormatRunResult:
        return run_format(content)

    def format(self, content: str) -> str:
        return self.run(content).formatted_text
