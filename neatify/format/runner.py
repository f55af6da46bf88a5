"""Format runner: tokenize, render, then decide whether the source needs formatting."""

from __future__ import annotations

import logging

from neatify.diagnostics import FORMAT_INTERNAL_ERROR, collect_diagnostics, diagnostic_from_spec
from neatify.format.renderer import render
from neatify.lexer import Lexer
from neatify.pipeline.results import FormatRunResult

logger = logging.getLogger(__name__)


def run_format(text: str) -> FormatRunResult:
    """Run formatting over one source text.

    The rendered candidate is only used when it differs from the source in
    more than whitespace; otherwise the source is returned verbatim. Any
    unexpected exception raised while tokenizing or rendering is contained
    here and reported as a failed result carrying the original text.
    """
    try:
        lexer = Lexer(text)
        tokens = lexer.tokenize()
        candidate = render(tokens)
    except Exception as exc:
        logger.exception("Formatting failed, leaving source unchanged")
        return FormatRunResult(
            source_text=text,
            formatted_text=text,
            diagnostics=[
                diagnostic_from_spec(
                    FORMAT_INTERNAL_ERROR,
                    0,
                    message=f"{FORMAT_INTERNAL_ERROR.message} ({type(exc).__name__}: {exc})",
                )
            ],
            changed=False,
            failed=True,
        )

    if is_whitespace_equivalent(text, candidate):
        formatted_text = text
    else:
        formatted_text = candidate

    return FormatRunResult(
        source_text=text,
        formatted_text=formatted_text,
        diagnostics=collect_diagnostics(lexer.diagnostics),
        changed=formatted_text != text,
    )


def format_content(text: str) -> str:
    """Return the text to use for `text`: either unchanged or reformatted."""
    return run_format(text).formatted_text


def normalize_whitespace(text: str) -> str:
    """Collapse every run of whitespace to one space and trim both ends."""
    return " ".join(text.split())


def is_whitespace_equivalent(left: str, right: str) -> bool:
    return normalize_whitespace(left) == normalize_whitespace(right)
