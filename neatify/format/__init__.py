"""Formatting core: renderer and the formatting decision."""

from neatify.format.renderer import INDENT_UNIT, Renderer, render
from neatify.format.runner import (
    format_content,
    is_whitespace_equivalent,
    normalize_whitespace,
    run_format,
)

__all__ = [
    "INDENT_UNIT",
    "Renderer",
    "format_content",
    "is_whitespace_equivalent",
    "normalize_whitespace",
    "render",
    "run_format",
]
