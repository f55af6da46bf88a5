"""Directory-walk configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Final

IGNORE_FILE_NAME: Final[str] = ".neatignore"

DEFAULT_IGNORE_PATTERNS: Final[tuple[str, ...]] = (
    "node_modules/**",
    ".git/**",
    "dist/**",
    "build/**",
    "coverage/**",
    "*.min.js",
)


@dataclass(frozen=True, slots=True)
class WalkOptions:
    """Controls which files a directory walk hands to the formatters."""

    include_hidden: bool = False
    use_ignore_file: bool = True
    ignore_path: Path | None = None
    extra_ignore: tuple[str, ...] = ()

    @staticmethod
    def from_flags(
        *,
        no_ignore: bool = False,
        ignore_path: str | None = None,
        include_hidden: bool = False,
    ) -> "WalkOptions":
        return WalkOptions(
            include_hidden=include_hidden,
            use_ignore_file=not no_ignore,
            ignore_path=Path(ignore_path) if ignore_path else None,
        )
