from __future__ import annotations

from pathlib import Path


class NeatifyError(Exception):
    """Base class for all errors raised outside the formatting core."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class UnsupportedFileError(NeatifyError):
    """No registered formatter accepts the file."""

    def __init__(self, path: Path | str):
        super().__init__(f"Unsupported file: {path}", path)


class NeatifyIOError(NeatifyError):
    """Reading or writing a source file failed."""

    def __str__(self) -> str:
        return f"IO error: {super().__str__()}"


class SourceNotFoundError(NeatifyIOError):
    """The requested file or directory does not exist."""


class FormattingError(NeatifyError):
    """Formatting a file failed."""

    def __str__(self) -> str:
        return f"Formatting error: {super().__str__()}"
