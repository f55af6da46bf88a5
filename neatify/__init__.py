"""neatify: a canonical-layout code formatter."""

from neatify.errors import (
    FormattingError,
    NeatifyError,
    NeatifyIOError,
    SourceNotFoundError,
    UnsupportedFileError,
)
from neatify.format import format_content, render, run_format
from neatify.formatters import get_formatter_for_file, is_supported
from neatify.lexer import Token, TokenFlags, TokenKind, tokenize
from neatify.pipeline import (
    FormatRunResult,
    FormattingStats,
    WalkOptions,
    check_paths,
    format_directory,
    format_file,
    format_paths,
)

__version__ = "0.1.1"

__all__ = [
    "FormatRunResult",
    "FormattingError",
    "FormattingStats",
    "NeatifyError",
    "NeatifyIOError",
    "SourceNotFoundError",
    "Token",
    "TokenFlags",
    "TokenKind",
    "UnsupportedFileError",
    "WalkOptions",
    "__version__",
    "check_paths",
    "format_content",
    "format_directory",
    "format_file",
    "format_paths",
    "get_formatter_for_file",
    "is_supported",
    "render",
    "run_format",
    "tokenize",
]
